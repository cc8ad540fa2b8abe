from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

from eventual.errors import SchedulerStoppedError
from eventual.utils import exit_on_exception

logger = logging.getLogger(__name__)


class ThreadScheduler:
    """Runs tasks in order on a single daemon worker thread."""

    def __init__(self, name: str = "eventual") -> None:
        if not isinstance(name, str):
            msg = f"name must be `str`, got {type(name).__name__}"
            raise TypeError(msg)

        self._name = name
        self._sq = queue.Queue[Callable[[], None] | None]()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._lock = threading.Lock()
        self._started = False
        self._stopped = False

    def __repr__(self) -> str:
        return f"ThreadScheduler(name={self._name}, started={self._started}, stopped={self._stopped})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def thread(self) -> threading.Thread:
        return self._thread

    def start(self) -> None:
        with self._lock:
            if self._stopped:
                raise SchedulerStoppedError(self._name)
            self._start()

    def stop(self, timeout: float | None = None) -> None:
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            started = self._started
            self._sq.put(None)

        logger.debug("stopping scheduler %s", self._name)

        # a task may stop its own scheduler, the worker exits after that task
        if started and threading.current_thread() is not self._thread:
            self._thread.join(timeout)

    def schedule(self, task: Callable[[], None]) -> None:
        with self._lock:
            if self._stopped:
                raise SchedulerStoppedError(self._name)
            self._start()
            self._sq.put(task)

    def _start(self) -> None:
        if not self._started:
            self._started = True
            self._thread.start()
            logger.debug("started scheduler %s", self._name)

    @exit_on_exception
    def _run(self) -> None:
        while (task := self._sq.get()) is not None:
            try:
                task()
            except Exception:
                logger.exception("unhandled exception in task on scheduler %s", self._name)
            except BaseException:
                # the worker is gone, later tasks would never run
                with self._lock:
                    self._stopped = True
                logger.exception("task exited the worker of scheduler %s, scheduler stopped", self._name)
                return
