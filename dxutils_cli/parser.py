"""CLI command routing."""

import logging
import sys
import traceback

import typer
from typing_extensions import Annotated

from dxutils.exceptions import DxUtilsError
from dxutils_cli import setup_logging
from dxutils_cli.commands import (
    case,
    date,
    demo,
    message,
    random_string,
    round_value,
    validate,
)
from dxutils_cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="String, date and validation helpers with styled console output.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info logging"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared CLI context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command()(case)
app.command()(date)
app.command("round")(round_value)
app.command()(validate)
app.command("random")(random_string)
app.command("print")(message)
app.command()(demo)


def main() -> None:
    """Main CLI entry point with command routing and error handling."""
    try:
        app()
    except DxUtilsError as e:
        logger.error(f"dx-utils error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
