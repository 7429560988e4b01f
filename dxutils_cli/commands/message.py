"""Print a styled message through the console formatter."""

import typer
from typing_extensions import Annotated

from dxutils.formatting import MessageColor, MessageType, render
from dxutils_cli.context import get_context


def message(
    text: Annotated[str, typer.Argument(help="Message to print")],
    message_type: Annotated[
        MessageType,
        typer.Option("--type", "-t", help="Layout of the message"),
    ] = MessageType.DEFAULT,
    color: Annotated[
        MessageColor,
        typer.Option("--color", "-c", help="Semantic color of the message"),
    ] = MessageColor.DARK,
) -> None:
    """Print TEXT with the layout of --type and the style of --color."""
    render(text, message_type, color, sink=get_context().sink)
