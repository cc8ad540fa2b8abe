from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Future as ConcurrentFuture
from typing import TYPE_CHECKING

from eventual.future import Future
from eventual.interop import as_exception, to_concurrent
from eventual.models.result import Ko, Ok

if TYPE_CHECKING:
    from collections.abc import Generator


class Handle[T]:
    """Blocking and awaitable view of a Future.

    Settled futures are read directly. Pending futures are mirrored into a
    ``concurrent.futures.Future`` the first time a caller has to wait.
    """

    def __init__(self, future: Future[T]) -> None:
        if not isinstance(future, Future):
            msg = f"future must be `Future`, got {type(future).__name__}"
            raise TypeError(msg)

        self._future = future
        self._f: ConcurrentFuture[T] | None = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Handle(future={self._future!r})"

    @property
    def id(self) -> int:
        return self._future.id

    @property
    def future(self) -> Future[T]:
        return self._future

    def done(self) -> bool:
        return self._future.settled

    def result(self, timeout: float | None = None) -> T:
        match self._future.result():
            case Ok(value):
                return value
            case Ko(value):
                raise as_exception(value)
            case _:
                return self._subscribe().result(timeout)

    def __await__(self) -> Generator[None, None, T]:
        return asyncio.wrap_future(self._subscribe()).__await__()

    def _subscribe(self) -> ConcurrentFuture[T]:
        # one mirror per handle, however many threads wait on it
        with self._lock:
            if self._f is None:
                match self._future.result():
                    case Ok(value):
                        self._f = ConcurrentFuture[T]()
                        self._f.set_result(value)
                    case Ko(value):
                        self._f = ConcurrentFuture[T]()
                        self._f.set_exception(as_exception(value))
                    case _:
                        self._f = to_concurrent(self._future)
            return self._f
