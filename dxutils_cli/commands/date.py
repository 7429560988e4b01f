"""Print MySQL-ready date strings."""

import logging

import typer
from typing_extensions import Annotated

from dxutils.dates import (
    get_date_string_from_current_date,
    get_local_date_string_from_current_date,
)
from dxutils.exceptions import DateFormatError
from dxutils_cli.display import ResultRenderer

logger = logging.getLogger(__name__)


def date(
    source: Annotated[
        str | None,
        typer.Option("--from", help="ISO-8601 date to format (default: now)"),
    ] = None,
    seconds: Annotated[
        float,
        typer.Option("--seconds", "-s", help="Seconds to add before formatting"),
    ] = 0,
    local: Annotated[
        bool,
        typer.Option("--local", help="Format in the local timezone instead of UTC"),
    ] = False,
) -> None:
    """Print a date as YYYY-MM-DD HH:MM:SS."""
    renderer = ResultRenderer()
    formatter = (
        get_local_date_string_from_current_date
        if local
        else get_date_string_from_current_date
    )

    try:
        result = formatter(source, seconds)
    except DateFormatError as e:
        logger.debug(f"Date formatting failed: {e}")
        renderer.render_error(str(e))
        raise typer.Exit(1)

    renderer.render_value(result)
