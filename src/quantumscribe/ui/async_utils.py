# Rev 0.1.0
# src/quantumscribe/ui/async_utils.py
from __future__ import annotations
import asyncio
from typing import Coroutine, Set

from ..utils.logging_setup import get_logger

log = get_logger("ui")

# strong refs until done; the loop only keeps weak ones
_pending: Set[asyncio.Task] = set()


def spawn(coro: Coroutine) -> asyncio.Task:
    """Schedule a viewmodel coroutine from a Qt slot."""
    task = asyncio.ensure_future(coro)
    _pending.add(task)
    task.add_done_callback(_finished)
    return task


def _finished(task: asyncio.Task) -> None:
    _pending.discard(task)
    if not task.cancelled() and task.exception() is not None:
        log.error("Background task failed", exc_info=task.exception())
