"""Tests for the command-line interface."""

import logging
import re
import sys

import pytest
from typer.testing import CliRunner

from dxutils.exceptions import UnsupportedFormatError
from dxutils_cli.commands.case import convert_case
from dxutils_cli.commands.demo import SAMPLE_EMAILS
from dxutils_cli.context import CLIContext, get_context, set_context
from dxutils_cli.parser import app, main

ANSI = re.compile(r"\x1b\[\d+m")

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    """Keep log files in tmp_path and restore root logging afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DXUTILS_LOG_DIR", str(tmp_path / "logs"))
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


def plain_lines(text: str) -> list[str]:
    return [ANSI.sub("", line) for line in text.splitlines()]


def test_no_args_shows_help():
    """Test that running without a command prints usage."""
    result = runner.invoke(app, [])
    assert "Usage" in result.output


def test_case_camel():
    """Test camelCase conversion."""
    result = runner.invoke(app, ["case", "this_is_a_lower_case_stRIng"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "thisIsALowerCaseString"


@pytest.mark.parametrize(
    "args, expected",
    [
        (["a_b_c", "--to", "pascal"], "ABC"),
        (["my-class", "--to", "camel", "--splitter", "-"], "myClass"),
        (["camelCase", "--to", "lower-split", "-s", "_"], "camel_case"),
        (["camelCase", "--to", "upper-split", "-s", "-"], "CAMEL-CASE"),
        (["camelCase", "--to", "camel-to-pascal"], "CamelCase"),
        (["PascalCase", "--to", "pascal-to-camel"], "pascalCase"),
        (["some_textValue", "--to", "sentence"], "Some text value"),
        (["some_textValue", "--to", "title"], "Some Text Value"),
    ],
)
def test_case_conversions(args, expected):
    """Test each conversion target."""
    result = runner.invoke(app, ["case", *args])
    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_case_brackets_are_not_markup():
    """Test that user text is printed verbatim."""
    result = runner.invoke(app, ["case", "[bold]x", "--to", "camel-to-pascal"])
    assert result.stdout.strip() == "[bold]x"


def test_case_unknown_target():
    """Test that an unknown target is a usage error."""
    result = runner.invoke(app, ["case", "abc", "--to", "shouting"])
    assert result.exit_code == 2


def test_date_from_iso():
    """Test formatting an explicit date."""
    result = runner.invoke(
        app, ["date", "--from", "2024-01-01T00:00:00+00:00", "--seconds", "90"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "2024-01-01 00:01:30"


def test_date_invalid_input():
    """Test that an invalid date exits with an error."""
    result = runner.invoke(app, ["date", "--from", "yesterday"])
    assert result.exit_code == 1
    assert "Invalid date string" in result.stdout


def test_round():
    """Test rounding to decimal places."""
    result = runner.invoke(app, ["round", "1.2345", "--places", "2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1.23"


def test_validate_email_table():
    """Test validation table output."""
    result = runner.invoke(
        app, ["validate", "email", "workingexample@stackabuse.com", "notanemail.com"]
    )
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert any("stackabuse.com" in line and "true" in line for line in lines)
    assert any("notanemail.com" in line and "false" in line for line in lines)


def test_validate_json_output():
    """Test JSON result output."""
    result = runner.invoke(app, ["validate", "numeric", "12", "abc", "--json"])
    assert result.exit_code == 0
    assert result.stdout.strip() == '{"12": true, "abc": false}'


def test_random_length_and_count():
    """Test random strings honour length and count."""
    result = runner.invoke(app, ["random", "--length", "5", "--count", "3"])
    assert result.exit_code == 0
    values = result.stdout.split()
    assert len(values) == 3
    assert all(len(value) == 5 and value.isalnum() for value in values)


def test_random_length_from_config(monkeypatch):
    """Test the default length comes from configuration."""
    monkeypatch.setenv("DXUTILS_RANDOM_LENGTH", "6")
    result = runner.invoke(app, ["random"])
    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 6


def test_print_heading(monkeypatch):
    """Test heading rendering through the CLI with the fallback width."""
    monkeypatch.setenv("DXUTILS_FALLBACK_WIDTH", "10")
    result = runner.invoke(
        app, ["print", "deploy", "--type", "heading", "--color", "primary"]
    )
    assert result.exit_code == 0
    assert plain_lines(result.stdout) == ["----------", "DEPLOY", "----------"]
    assert "\x1b[36m" in result.stdout


def test_print_rule_character(monkeypatch):
    """Test the configured rule character."""
    monkeypatch.setenv("DXUTILS_FALLBACK_WIDTH", "4")
    monkeypatch.setenv("DXUTILS_RULE_CHARACTER", "=")
    result = runner.invoke(app, ["print", "Notes", "--type", "sub_heading"])
    assert plain_lines(result.stdout) == ["Notes", "===="]


def test_print_terminal():
    """Test terminal annotation through the CLI."""
    result = runner.invoke(
        app, ["print", "build finished", "-t", "terminal", "-c", "terminal"]
    )
    assert plain_lines(result.stdout) == [": build finished "]


def test_demo():
    """Test the demo prints every message style."""
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    text = "\n".join(plain_lines(result.stdout))
    assert "A test message" in text
    assert "PREFORMATTED HEADING MESSAGE" in text
    assert ": Preformatted terminal message " in text
    assert "Random string: " in text


def test_callback_sets_context():
    """Test that the callback installs a CLI context."""
    runner.invoke(app, ["-v", "round", "1"])
    ctx = get_context()
    assert isinstance(ctx, CLIContext)
    assert ctx.verbose is True


def test_callback_writes_log_file(tmp_path):
    """Test that logging is configured with a file handler."""
    runner.invoke(app, ["round", "1"])
    assert (tmp_path / "logs" / "dxutils.log").exists()


def test_get_context_uninitialized(monkeypatch):
    """Test get_context before initialization."""
    monkeypatch.setattr("dxutils_cli.context._ctx", None)
    with pytest.raises(RuntimeError):
        get_context()


def test_set_context_round_trip():
    """Test set_context/get_context."""
    ctx = CLIContext(quiet=True)
    set_context(ctx)
    assert get_context() is ctx


def test_main_exits_on_configuration_error(monkeypatch):
    """Test that library errors exit with status 1."""
    monkeypatch.setenv("DXUTILS_FALLBACK_WIDTH", "0")
    monkeypatch.setattr(sys, "argv", ["dxutils", "random"])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 1


def test_convert_case_unsupported_target():
    """Test that a target outside CaseChoice raises UnsupportedFormatError."""
    with pytest.raises(UnsupportedFormatError):
        convert_case("abc", "shouting")


def test_round_infinity():
    """Test that non-finite numbers are printed unchanged."""
    result = runner.invoke(app, ["round", "inf", "--places", "2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "inf"


def test_demo_lists_every_sample_email():
    """Test the demo validates the full sample address list."""
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    for address in SAMPLE_EMAILS:
        assert address in result.stdout
    assert len(SAMPLE_EMAILS) == 13
