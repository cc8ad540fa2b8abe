from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class LoopScheduler:
    """Schedules tasks onto an asyncio event loop.

    Safe to use from any thread. Errors raised by tasks are reported through the
    loop's exception handler.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        if loop is not None and not isinstance(loop, asyncio.AbstractEventLoop):
            msg = f"loop must be `AbstractEventLoop | None`, got {type(loop).__name__}"
            raise TypeError(msg)

        self._loop = loop if loop is not None else asyncio.get_running_loop()

    def __repr__(self) -> str:
        return f"LoopScheduler(loop={self._loop!r})"

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def schedule(self, task: Callable[[], None]) -> None:
        self._loop.call_soon_threadsafe(task)
