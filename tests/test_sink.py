"""Tests for output sinks."""

import io

from dxutils.formatting import ConsoleSink, OutputSink


def test_console_sink_write_line(buffer):
    """Test write_line appends a newline."""
    sink = ConsoleSink(file=buffer)
    sink.write_line("one")
    sink.write_line("two")
    assert buffer.getvalue() == "one\ntwo\n"


def test_console_sink_writes_escape_codes_verbatim(buffer):
    """Test that escape sequences and markup are not interpreted."""
    sink = ConsoleSink(file=buffer)
    sink.write_line("\x1b[31m[bold]red[/bold]\x1b[0m")
    assert buffer.getvalue() == "\x1b[31m[bold]red[/bold]\x1b[0m\n"


def test_console_sink_fallback_width_when_redirected(buffer):
    """Test the fallback width is used for non-terminal output."""
    assert ConsoleSink(file=buffer).width == 80
    assert ConsoleSink(file=buffer, fallback_width=33).width == 33


def test_console_sink_explicit_width(buffer):
    """Test an explicit width wins."""
    assert ConsoleSink(file=buffer, width=7, fallback_width=33).width == 7


def test_console_sink_terminal_width(monkeypatch):
    """Test that a terminal stream reports the console width."""

    class FakeTerminal(io.StringIO):
        def isatty(self) -> bool:
            return True

    monkeypatch.delenv("TERM", raising=False)
    sink = ConsoleSink(file=FakeTerminal(), fallback_width=33)
    sink.console.width = 50
    assert sink.width == 50


def test_console_sink_satisfies_protocol(buffer):
    """Test ConsoleSink provides the OutputSink surface."""
    sink: OutputSink = ConsoleSink(file=buffer)
    assert isinstance(sink.width, int)
    sink.write_line("x")


def test_console_sink_rule_character(buffer):
    """Test the rule character defaults to a dash and can be overridden."""
    assert ConsoleSink(file=buffer).rule_character == "-"
    assert ConsoleSink(file=buffer, rule_character="=").rule_character == "="
