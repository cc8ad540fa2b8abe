from __future__ import annotations

import asyncio
import concurrent.futures
from typing import TYPE_CHECKING, Any

from eventual.errors import RejectedError
from eventual.future import Future

if TYPE_CHECKING:
    from collections.abc import Callable

    from eventual.models.scheduler import Scheduler


def from_concurrent(source: concurrent.futures.Future[Any] | asyncio.Future[Any], *, scheduler: Scheduler | None = None) -> Future[Any]:
    """Adopt a ``concurrent.futures`` or ``asyncio`` future.

    A cancelled source rejects with its ``CancelledError``.
    """
    if not callable(getattr(source, "add_done_callback", None)):
        msg = f"source must be `concurrent.futures.Future | asyncio.Future`, got {type(source).__name__}"
        raise TypeError(msg)

    def producer(resolve: Callable[[Any], None], reject: Callable[[Any], None]) -> None:
        def done(f: concurrent.futures.Future[Any] | asyncio.Future[Any]) -> None:
            try:
                e = f.exception()
            except (asyncio.CancelledError, concurrent.futures.CancelledError) as c:
                reject(c)
                return

            if e is not None:
                reject(e)
            else:
                resolve(f.result())

        source.add_done_callback(done)

    return Future(producer, scheduler=scheduler)


def to_concurrent[T](future: Future[T]) -> concurrent.futures.Future[T]:
    """Mirror a Future's settlement into a new ``concurrent.futures.Future``."""
    if not isinstance(future, Future):
        msg = f"future must be `Future`, got {type(future).__name__}"
        raise TypeError(msg)

    f = concurrent.futures.Future[T]()

    # running futures can not be cancelled, cancellation is not supported
    f.set_running_or_notify_cancel()

    future.observe(f.set_result, lambda reason: f.set_exception(as_exception(reason)))
    return f


def as_exception(reason: Any) -> BaseException:
    # In python, only exceptions may be raised. Rejection payloads that are
    # not exceptions are wrapped.
    return reason if isinstance(reason, BaseException) else RejectedError(reason)
