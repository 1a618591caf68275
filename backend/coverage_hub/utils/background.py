"""
Fire-and-forget task runner for best-effort writes.

Tasks are tracked until they finish so the event loop does not garbage
collect them mid-flight, and so shutdown can wait for pending writes.
Failures are logged here and never reach the request path.
"""
import asyncio
import logging
from typing import Awaitable, Set

logger = logging.getLogger("background")

_pending: Set[asyncio.Task] = set()


def _on_done(task: asyncio.Task) -> None:
    _pending.discard(task)
    if task.cancelled():
        logger.warning("background task cancelled name=%s", task.get_name())
        return
    exc = task.exception()
    if exc is not None:
        logger.error("background task failed name=%s error=%s", task.get_name(), exc)


def spawn(coro: Awaitable, name: str) -> asyncio.Task:
    """Schedule a coroutine without awaiting it."""
    task = asyncio.ensure_future(coro)
    task.set_name(name)
    _pending.add(task)
    task.add_done_callback(_on_done)
    return task


def pending_count() -> int:
    return len(_pending)


async def drain() -> None:
    """Wait for every pending background task (used on shutdown and in tests)."""
    while _pending:
        await asyncio.gather(*list(_pending), return_exceptions=True)
