"""Show every message style and a few helper results."""

from dxutils.formatting import (
    MessageColor,
    MessageType,
    StyleToken,
    output_formatted_log,
    print_error_message,
    print_formatted_message,
    print_heading_message,
    print_info_message,
    print_sub_heading_message,
    print_success_message,
    print_terminal_message,
    print_warning_message,
    resolve_style,
)
from dxutils.strings import generate_random_string
from dxutils.validators import validate_email_address
from dxutils_cli.context import get_context
from dxutils_cli.display import ResultRenderer

SAMPLE_EMAILS = [
    "notanemail.com",
    "workingexample@stackabuse.com",
    "example@yale.edu.com",
    "johndoe@gmail.com",
    "john.doe@gmail.com",
    "johndoe@gmail.co",
    "johndoe@gmail.co.uk",
    "johndoe@gmail.app",
    "Johndoe@gmail.com",
    "johndoe@GMAILcom",
    "test@test.123",
    "TeSt@teST.123",
    "johndoe@GMAIL.com",
]


def demo() -> None:
    """Print every message style, then sample helper results."""
    sink = get_context().sink

    output_formatted_log(
        "A test message",
        resolve_style(
            [
                StyleToken.FOREGROUND_GREEN,
                StyleToken.BACKGROUND_BLACK,
                StyleToken.BRIGHT,
            ]
        ),
        sink,
    )

    print_formatted_message(
        "A test heading message", MessageType.HEADING, MessageColor.WARNING, sink
    )
    print_formatted_message(
        "A test sub heading message", MessageType.SUB_HEADING, MessageColor.INFO, sink
    )
    print_formatted_message(
        "A test default message", MessageType.DEFAULT, MessageColor.DANGER, sink
    )

    print_heading_message("Preformatted heading message", sink)
    print_sub_heading_message("Preformatted sub heading message", sink)
    print_error_message("Preformatted error message", sink)
    print_warning_message("Preformatted warning message", sink)
    print_success_message("Preformatted success message", sink)
    print_info_message("Preformatted info message", sink)
    print_terminal_message("Preformatted terminal message", sink)

    renderer = ResultRenderer()
    renderer.render_validation(
        "email",
        [(address, validate_email_address(address)) for address in SAMPLE_EMAILS],
    )
    renderer.render_value(f"Random string: {generate_random_string(4)}")
