"""Render styled messages to an output sink.

Messages are laid out by MessageType:

- heading: rule, upper-cased message, rule
- sub_heading: message, rule
- default: message
- terminal: ": message "

Every line is styled with the escape sequence for its (type, color) pair and
followed by a reset.
"""

import threading

from dxutils.config import FormatterConfig
from dxutils.formatting.sink import ConsoleSink, OutputSink
from dxutils.formatting.styles import RESET, MessageColor, MessageType, style_for

# Serializes sink writes so one rendered block is never interleaved
_lock = threading.RLock()

_default_sink: OutputSink | None = None


def get_default_sink() -> OutputSink:
    """Get the shared sink (lazy-loaded from FormatterConfig.from_env())."""
    global _default_sink
    with _lock:
        if _default_sink is None:
            config = FormatterConfig.from_env()
            _default_sink = ConsoleSink(
                width=config.terminal_width,
                fallback_width=config.fallback_width,
                rule_character=config.rule_character,
            )
        return _default_sink


def set_default_sink(sink: OutputSink | None) -> None:
    """Replace the shared sink.

    Args:
        sink: Sink to use, or None to reload from configuration on next use.
    """
    global _default_sink
    with _lock:
        _default_sink = sink


def _coerce_type(message_type: MessageType | str) -> MessageType:
    try:
        return MessageType(message_type)
    except ValueError:
        return MessageType.DEFAULT


def emit(text: str, escape_sequence: str, sink: OutputSink | None = None) -> None:
    """Write escape_sequence + text + reset as one line."""
    with _lock:
        target = sink if sink is not None else get_default_sink()
        target.write_line(f"{escape_sequence}{text}{RESET}")


def render(
    message: str,
    message_type: MessageType | str = MessageType.DEFAULT,
    color: MessageColor | str = MessageColor.DARK,
    sink: OutputSink | None = None,
) -> None:
    """Render a message with the layout of its type.

    Args:
        message: Text to print.
        message_type: Layout category; unknown values render as default.
        color: Semantic color role.
        sink: Destination (defaults to the shared console sink).
    """
    escape_sequence = style_for(message_type, color)

    with _lock:
        target = sink if sink is not None else get_default_sink()
        layout = _coerce_type(message_type)

        if layout is MessageType.HEADING:
            rule = target.rule_character * target.width
            emit(rule, escape_sequence, target)
            emit(message.upper(), escape_sequence, target)
            emit(rule, escape_sequence, target)
        elif layout is MessageType.SUB_HEADING:
            emit(message, escape_sequence, target)
            emit(target.rule_character * target.width, escape_sequence, target)
        elif layout is MessageType.TERMINAL:
            emit(f": {message} ", escape_sequence, target)
        else:
            emit(message, escape_sequence, target)


# Original public names
print_formatted_message = render
output_formatted_log = emit


def print_error_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.DEFAULT, MessageColor.DANGER, sink)


def print_warning_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.DEFAULT, MessageColor.WARNING, sink)


def print_info_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.DEFAULT, MessageColor.INFO, sink)


def print_success_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.DEFAULT, MessageColor.SUCCESS, sink)


def print_heading_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.HEADING, MessageColor.PRIMARY, sink)


def print_sub_heading_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.SUB_HEADING, MessageColor.SECONDARY, sink)


def print_terminal_message(message: str, sink: OutputSink | None = None) -> None:
    render(message, MessageType.TERMINAL, MessageColor.TERMINAL, sink)
