"""Output sinks for styled console lines."""

import logging
from typing import IO, Protocol

from rich.console import Console

from dxutils.constants import DEFAULT_RULE_CHARACTER, DEFAULT_TERMINAL_WIDTH

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    """Destination for styled text lines."""

    @property
    def width(self) -> int:
        """Display width in columns."""
        ...

    @property
    def rule_character(self) -> str:
        """Character repeated to draw full-width rules."""
        ...

    def write_line(self, text: str) -> None:
        """Write one line of text."""
        ...


class ConsoleSink:
    """Write raw escape-styled lines through a Rich console's file.

    Lines are written straight to the console's file, so escape sequences
    reach the terminal untouched. The console is used for terminal detection
    and width.

    Usage:
        sink = ConsoleSink(fallback_width=100)
        sink.write_line("hello")
    """

    def __init__(
        self,
        file: IO[str] | None = None,
        width: int | None = None,
        fallback_width: int = DEFAULT_TERMINAL_WIDTH,
        rule_character: str = DEFAULT_RULE_CHARACTER,
    ):
        """Initialize console sink.

        Args:
            file: Stream to write to (defaults to stdout).
            width: Fixed width in columns; skips terminal detection.
            fallback_width: Width used when the stream is not a terminal.
            rule_character: Character repeated to draw rules.
        """
        self._console = Console(file=file, highlight=False)
        self._width = width
        self._fallback_width = fallback_width
        self._rule_character = rule_character

    @property
    def console(self) -> Console:
        """Underlying Rich console."""
        return self._console

    @property
    def rule_character(self) -> str:
        """Character repeated to draw rules."""
        return self._rule_character

    @property
    def width(self) -> int:
        """Current width in columns.

        The explicit width if configured, else the terminal width, else the
        fallback width when output is redirected.
        """
        if self._width is not None:
            return self._width
        if self._console.is_terminal:
            return self._console.size.width
        logger.debug(
            f"Output is not a terminal, using fallback width {self._fallback_width}"
        )
        return self._fallback_width

    def write_line(self, text: str) -> None:
        """Write text and a newline, then flush."""
        stream = self._console.file
        stream.write(text + "\n")
        stream.flush()
