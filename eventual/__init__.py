from __future__ import annotations

from . import logging as _logging  # noqa: F401
from .future import Future
from .handle import Handle
from .interop import from_concurrent, to_concurrent
from .models.result import Ko, Ok
from .models.scheduler import Scheduler
from .models.thenable import Thenable
from .schedulers import LoopScheduler, QueueScheduler, ThreadScheduler, default_scheduler, set_default_scheduler

__all__ = [
    "Future",
    "Handle",
    "Ko",
    "LoopScheduler",
    "Ok",
    "QueueScheduler",
    "Scheduler",
    "Thenable",
    "ThreadScheduler",
    "default_scheduler",
    "from_concurrent",
    "set_default_scheduler",
    "to_concurrent",
]
