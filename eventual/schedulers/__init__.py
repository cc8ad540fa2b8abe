from __future__ import annotations

from .default import default_scheduler, set_default_scheduler
from .fifo import QueueScheduler
from .loop import LoopScheduler
from .thread import ThreadScheduler

__all__ = ["LoopScheduler", "QueueScheduler", "ThreadScheduler", "default_scheduler", "set_default_scheduler"]
