from __future__ import annotations

import os
import threading

from eventual.models.scheduler import Scheduler
from eventual.schedulers.fifo import QueueScheduler
from eventual.schedulers.thread import ThreadScheduler

SCHEDULER_KINDS = ("thread", "queue")

_lock = threading.Lock()
_default: Scheduler | None = None


def default_scheduler() -> Scheduler:
    """Return the process wide scheduler, creating it on first use.

    The kind is taken from ``EVENTUAL_SCHEDULER``: ``thread`` (the default)
    or ``queue``.
    """
    global _default

    with _lock:
        if _default is None:
            kind = os.getenv("EVENTUAL_SCHEDULER", "thread").lower()
            match kind:
                case "thread":
                    _default = ThreadScheduler()
                case "queue":
                    _default = QueueScheduler()
                case _:
                    msg = f"EVENTUAL_SCHEDULER must be one of {SCHEDULER_KINDS}, got {kind!r}"
                    raise ValueError(msg)
        return _default


def set_default_scheduler(scheduler: Scheduler | None) -> Scheduler | None:
    """Replace the process wide scheduler and return the previous one, if any.

    Passing ``None`` makes the next ``default_scheduler`` call create a fresh
    one. The previous scheduler is not stopped.
    """
    global _default

    if scheduler is not None and not isinstance(scheduler, Scheduler):
        msg = f"scheduler must be `Scheduler | None`, got {type(scheduler).__name__}"
        raise TypeError(msg)

    with _lock:
        previous, _default = _default, scheduler
    return previous
