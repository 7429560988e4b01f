"""Console message formatting.

This module provides:
- StyleToken, MessageType, MessageColor: closed style enumerations
- resolve_style / style_for: escape sequence resolution
- ConsoleSink: Rich-backed output sink with configurable fallback width
- render / emit and the print_*_message convenience functions
"""

from dxutils.formatting.renderer import (
    emit,
    get_default_sink,
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
    set_default_sink,
)
from dxutils.formatting.sink import ConsoleSink, OutputSink
from dxutils.formatting.styles import (
    COLOR_STYLES,
    ESCAPE_CODES,
    RESET,
    TYPE_STYLES,
    MessageColor,
    MessageType,
    StyleToken,
    resolve_style,
    style_for,
)

__all__ = [
    # Enumerations
    "StyleToken",
    "MessageType",
    "MessageColor",
    # Tables
    "ESCAPE_CODES",
    "TYPE_STYLES",
    "COLOR_STYLES",
    "RESET",
    # Resolver
    "resolve_style",
    "style_for",
    # Sinks
    "OutputSink",
    "ConsoleSink",
    "get_default_sink",
    "set_default_sink",
    # Renderer
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
