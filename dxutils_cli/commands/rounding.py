"""Round a number to N decimal places."""

import typer
from typing_extensions import Annotated

from dxutils.numbers import get_value_to_decimal
from dxutils_cli.display import ResultRenderer


def round_value(
    value: Annotated[float, typer.Argument(help="Number to round")],
    places: Annotated[
        int,
        typer.Option("--places", "-p", help="Decimal places"),
    ] = 0,
) -> None:
    """Round VALUE half up to --places decimal places."""
    ResultRenderer().render_value(get_value_to_decimal(value, places))
