from __future__ import annotations

from collections import deque
from collections.abc import Callable


class QueueScheduler:
    """Explicit task queue, drained by whoever owns it.

    Nothing runs until ``step`` or ``run`` is called. A task that raises
    propagates out of the drain call and leaves the remaining tasks queued.
    """

    def __init__(self) -> None:
        self._tasks = deque[Callable[[], None]]()

    def __repr__(self) -> str:
        return f"QueueScheduler(pending={self.pending})"

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def empty(self) -> bool:
        return not self._tasks

    def schedule(self, task: Callable[[], None]) -> None:
        self._tasks.append(task)

    def step(self) -> bool:
        if not self._tasks:
            return False

        task = self._tasks.popleft()
        task()
        return True

    def run(self, limit: int | None = None) -> int:
        if limit is not None and (not isinstance(limit, int) or limit < 0):
            msg = f"limit must be a non-negative `int | None`, got {limit!r}"
            raise ValueError(msg)

        n = 0
        while (limit is None or n < limit) and self.step():
            n += 1
        return n
