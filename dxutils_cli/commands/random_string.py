"""Generate random alphanumeric strings."""

import typer
from typing_extensions import Annotated

from dxutils.strings import generate_random_string
from dxutils_cli.context import get_context
from dxutils_cli.display import ResultRenderer


def random_string(
    length: Annotated[
        int | None,
        typer.Option("--length", "-n", help="String length (default: from config)"),
    ] = None,
    count: Annotated[
        int,
        typer.Option("--count", "-c", min=1, help="How many strings to generate"),
    ] = 1,
) -> None:
    """Print random alphanumeric strings."""
    if length is None:
        length = get_context().config.random_string_length

    renderer = ResultRenderer()
    for _ in range(count):
        renderer.render_value(generate_random_string(length))
