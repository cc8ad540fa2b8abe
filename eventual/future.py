from __future__ import annotations

import functools
import itertools
import logging
import threading
from typing import TYPE_CHECKING, Any, Literal

from eventual.errors import PendingError
from eventual.models.result import Ko, Ok, Result
from eventual.models.scheduler import Scheduler
from eventual.models.settlement import PendingOn, Value, classify
from eventual.schedulers import default_scheduler
from eventual.utils import describe

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

type State = Literal["PENDING", "FULFILLED", "REJECTED"]
type Handler = Callable[[Any], Any]
type Waiter = tuple[Handler | None, Handler | None]
type Producer = Callable[[Callable[[Any], None], Callable[[Any], None]], Any]

_ids = itertools.count(1)


class Future[T]:
    """The eventual outcome of an operation that has not completed yet.

    The producer runs synchronously in the constructor and receives two
    callables, ``resolve`` and ``reject``. The first call of either one wins,
    later calls are ignored. Resolving with anything that exposes a callable
    ``register`` (another Future included) adopts that computation's outcome
    instead of storing it as the value.

    Consumers attach with ``register`` (returns a new Future for chaining) or
    ``observe`` (terminal). Handlers always run on a later turn of the Future's
    scheduler, one delivery per waiter, in registration order.

    Example::

        f = Future(lambda resolve, reject: resolve(1), scheduler=scheduler)
        f.register(lambda x: x + 1).observe(print)
    """

    def __init__(self, producer: Producer, *, scheduler: Scheduler | None = None) -> None:
        if not callable(producer):
            msg = f"producer must be `Callable`, got {type(producer).__name__}"
            raise TypeError(msg)

        if scheduler is not None and not isinstance(scheduler, Scheduler):
            msg = f"scheduler must be `Scheduler | None`, got {type(scheduler).__name__}"
            raise TypeError(msg)

        self._id = next(_ids)
        self._scheduler = scheduler if scheduler is not None else default_scheduler()
        self._lock = threading.Lock()
        self._result: Result[T] | None = None
        self._waiters: list[Waiter] = []

        self._run(producer)

    def __repr__(self) -> str:
        match self._result:
            case Ok(value) | Ko(value):
                return f"Future(id={self._id}, state={self.state}, value={describe(value)})"
            case _:
                return f"Future(id={self._id}, state={self.state})"

    @classmethod
    def resolve(cls, value: Any, *, scheduler: Scheduler | None = None) -> Future[Any]:
        return cls(lambda resolve, _: resolve(value), scheduler=scheduler)

    @classmethod
    def reject(cls, error: Any, *, scheduler: Scheduler | None = None) -> Future[Any]:
        return cls(lambda _, reject: reject(error), scheduler=scheduler)

    @property
    def id(self) -> int:
        return self._id

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def state(self) -> State:
        match self._result:
            case Ok():
                return "FULFILLED"
            case Ko():
                return "REJECTED"
            case _:
                return "PENDING"

    @property
    def pending(self) -> bool:
        return self._result is None

    @property
    def settled(self) -> bool:
        return not self.pending

    @property
    def fulfilled(self) -> bool:
        return isinstance(self._result, Ok)

    @property
    def rejected(self) -> bool:
        return isinstance(self._result, Ko)

    @property
    def value(self) -> Any:
        if self._result is None:
            raise PendingError(self._id)
        return self._result.value

    def result(self) -> Result[T] | None:
        return self._result

    def register(self, on_success: Handler | None = None, on_failure: Handler | None = None) -> Future[Any]:
        """Attach handlers and return a new Future for what they produce.

        A missing handler passes the outcome through unchanged. A handler that
        returns normally fulfills the new Future (a failure handler recovers the
        chain), a handler that raises rejects it.
        """
        _check_handler("on_success", on_success)
        _check_handler("on_failure", on_failure)

        def producer(resolve: Callable[[Any], None], reject: Callable[[Any], None]) -> None:
            def success(value: Any) -> None:
                if on_success is None:
                    resolve(value)
                    return

                try:
                    value = on_success(value)
                except Exception as e:
                    reject(e)
                else:
                    resolve(value)

            def failure(error: Any) -> None:
                if on_failure is None:
                    reject(error)
                    return

                try:
                    value = on_failure(error)
                except Exception as e:
                    reject(e)
                else:
                    resolve(value)

            self.observe(success, failure)

        return Future(producer, scheduler=self._scheduler)

    def observe(self, on_success: Handler | None = None, on_failure: Handler | None = None) -> None:
        """Attach terminal handlers. Errors they raise surface through the scheduler."""
        _check_handler("on_success", on_success)
        _check_handler("on_failure", on_failure)

        waiter = (on_success, on_failure)
        with self._lock:
            if self._result is None:
                self._waiters.append(waiter)
            else:
                self._schedule(waiter, self._result)

    def _run(self, producer: Producer) -> None:
        resolve, reject = self._capabilities()
        try:
            producer(resolve, reject)
        except Exception as e:
            reject(e)

    def _capabilities(self) -> tuple[Callable[[Any], None], Callable[[Any], None]]:
        # one shot: once either capability has been called, both are spent,
        # even if the first call adopted a computation that is still pending
        called = False

        def claim(what: str, payload: Any) -> bool:
            nonlocal called
            with self._lock:
                if called:
                    logger.debug("future %s already settled, ignoring %s with %.80r", self._id, what, payload)
                    return False
                called = True
                return True

        def resolve(result: Any) -> None:
            if claim("resolve", result):
                self._resolve(result)

        def reject(error: Any) -> None:
            if claim("reject", error):
                self._settle(Ko(error))

        return resolve, reject

    def _resolve(self, result: Any) -> None:
        if result is self:
            self._settle(Ko(TypeError(f"future {self._id} cannot be resolved with itself")))
            return

        try:
            settlement = classify(result)
        except Exception as e:
            self._settle(Ko(e))
            return

        match settlement:
            case PendingOn() if isinstance(result, Future):
                logger.debug("future %s adopting future %s", self._id, result.id)
                self._run(lambda resolve, reject: result.observe(resolve, reject))
            case PendingOn(register):
                logger.debug("future %s adopting %.80r", self._id, result)
                self._run(lambda resolve, reject: register(resolve, reject))
            case Value(value):
                self._settle(Ok(value))

    def _settle(self, result: Result[T]) -> None:
        with self._lock:
            if self._result is not None:
                logger.debug("future %s already settled, ignoring %.80r", self._id, result)
                return

            self._result = result
            waiters, self._waiters = self._waiters, []

            logger.debug("future %s %s with %.80r, delivering to %d waiter(s)", self._id, self.state.lower(), result.value, len(waiters))

            # scheduled under the lock so a concurrent registration can not
            # overtake this batch
            for waiter in waiters:
                self._schedule(waiter, result)

    def _schedule(self, waiter: Waiter, result: Result[T]) -> None:
        self._scheduler.schedule(functools.partial(_deliver, waiter, result))


def _deliver(waiter: Waiter, result: Result[Any]) -> None:
    on_success, on_failure = waiter
    match result:
        case Ok(value):
            if on_success is not None:
                on_success(value)
        case Ko(value):
            if on_failure is not None:
                on_failure(value)


def _check_handler(name: str, handler: Handler | None) -> None:
    if handler is not None and not callable(handler):
        msg = f"{name} must be `Callable | None`, got {type(handler).__name__}"
        raise TypeError(msg)
