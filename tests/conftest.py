import io

import pytest

from dxutils.formatting import ConsoleSink, set_default_sink

_ENV_VARS = [
    "DXUTILS_TERMINAL_WIDTH",
    "DXUTILS_FALLBACK_WIDTH",
    "DXUTILS_RULE_CHARACTER",
    "DXUTILS_RANDOM_LENGTH",
    "DXUTILS_LOG_DIR",
    "DXUTILS_LOG_FILENAME",
    # Rich treats these as "stdout is a terminal"
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
    "TTY_INTERACTIVE",
    "COLUMNS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from configuration in the environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    set_default_sink(None)


@pytest.fixture
def buffer():
    """In-memory stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def sink(buffer):
    """Console sink writing to the buffer with a 10-column fallback width."""
    return ConsoleSink(file=buffer, fallback_width=10)
