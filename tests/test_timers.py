"""Tests for timer helpers."""

import asyncio
import time

from dxutils.timers import sleep


def test_sleep_waits_milliseconds():
    """Test that sleep suspends for roughly the requested time."""
    start = time.monotonic()
    asyncio.run(sleep(50))
    assert time.monotonic() - start >= 0.04


def test_sleep_default_returns_immediately():
    """Test the zero-millisecond default."""
    assert asyncio.run(sleep()) is None
