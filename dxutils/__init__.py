"""Stateless utility helpers and a console message formatter."""

from dxutils.dates import (
    get_date_string_from_current_date,
    get_local_date_string_from_current_date,
)
from dxutils.formatting import (
    MessageColor,
    MessageType,
    StyleToken,
    emit,
    output_formatted_log,
    print_error_message,
    print_formatted_message,
    print_heading_message,
    print_info_message,
    print_sub_heading_message,
    print_success_message,
    print_terminal_message,
    print_warning_message,
    render,
    resolve_style,
)
from dxutils.numbers import get_value_to_decimal
from dxutils.strings import (
    compact_whitespace,
    convert_camel_case_to_pascal_case,
    convert_lower_case_to_camel_case,
    convert_lower_case_to_pascal_case,
    convert_pascal_case_to_camel_case,
    generate_random_string,
    get_camel_case_splitted_to_lower_case,
    get_camel_case_splitted_to_upper_case,
    get_sentence_case,
)
from dxutils.timers import sleep
from dxutils.validators import (
    are_primitive_arrays_equal,
    is_empty_object,
    is_json_string,
    is_numeric,
    is_valid_object,
    validate_email_address,
)

__version__ = "0.1.0"

__all__ = [
    # Timers
    "sleep",
    # Numbers
    "get_value_to_decimal",
    # Dates
    "get_date_string_from_current_date",
    "get_local_date_string_from_current_date",
    # Strings
    "get_camel_case_splitted_to_lower_case",
    "get_camel_case_splitted_to_upper_case",
    "convert_lower_case_to_camel_case",
    "convert_lower_case_to_pascal_case",
    "convert_camel_case_to_pascal_case",
    "convert_pascal_case_to_camel_case",
    "get_sentence_case",
    "compact_whitespace",
    "generate_random_string",
    # Validators
    "validate_email_address",
    "is_json_string",
    "is_numeric",
    "is_valid_object",
    "is_empty_object",
    "are_primitive_arrays_equal",
    # Formatting
    "StyleToken",
    "MessageType",
    "MessageColor",
    "resolve_style",
    "emit",
    "render",
    "output_formatted_log",
    "print_formatted_message",
    "print_error_message",
    "print_warning_message",
    "print_info_message",
    "print_success_message",
    "print_heading_message",
    "print_sub_heading_message",
    "print_terminal_message",
]
