"""Timer helpers."""

import asyncio


async def sleep(ms: float = 0) -> None:
    """Sleep for ms milliseconds when awaited."""
    await asyncio.sleep(ms / 1000)
