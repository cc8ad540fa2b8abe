from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any

import pytest

from eventual import Future, Handle
from eventual.errors import RejectedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from eventual import QueueScheduler, ThreadScheduler


def test_result_of_a_fulfilled_future(scheduler: QueueScheduler) -> None:
    h = Handle(Future.resolve(42, scheduler=scheduler))

    assert h.done()
    assert h.result() == 42
    assert scheduler.empty()


def test_result_of_a_future_rejected_with_an_exception(scheduler: QueueScheduler) -> None:
    e = KeyError("missing")
    h = Handle(Future.reject(e, scheduler=scheduler))

    with pytest.raises(KeyError) as info:
        h.result()
    assert info.value is e


def test_result_of_a_future_rejected_with_a_plain_value(scheduler: QueueScheduler) -> None:
    h = Handle(Future.reject("boom", scheduler=scheduler))

    with pytest.raises(RejectedError) as info:
        h.result()
    assert info.value.reason == "boom"


def test_result_times_out(scheduler: QueueScheduler) -> None:
    h = Handle(Future(lambda resolve, reject: None, scheduler=scheduler))

    assert not h.done()
    with pytest.raises(TimeoutError):
        h.result(timeout=0.01)


def test_result_waits_for_settlement(thread_scheduler: ThreadScheduler) -> None:
    captured: dict[str, Callable[[Any], None]] = {}
    f = Future(lambda resolve, reject: captured.update(resolve=resolve), scheduler=thread_scheduler)
    h = Handle(f)

    timer = threading.Timer(0.05, captured["resolve"], args=(7,))
    timer.start()
    try:
        assert h.result(timeout=5) == 7
    finally:
        timer.cancel()

    assert h.id == f.id
    assert h.future is f


class CountingScheduler:
    def __init__(self, inner: ThreadScheduler) -> None:
        self.inner = inner
        self.scheduled = 0
        self.lock = threading.Lock()

    def schedule(self, task: Callable[[], None]) -> None:
        with self.lock:
            self.scheduled += 1
        self.inner.schedule(task)


def test_concurrent_waiters_share_one_subscription(thread_scheduler: ThreadScheduler) -> None:
    s = CountingScheduler(thread_scheduler)
    captured: dict[str, Callable[[Any], None]] = {}
    h = Handle(Future(lambda resolve, reject: captured.update(resolve=resolve), scheduler=s))

    n = 8
    barrier = threading.Barrier(n + 1)
    results: list[Any] = []

    def wait() -> None:
        barrier.wait(5)
        results.append(h.result(timeout=5))

    threads = [threading.Thread(target=wait) for _ in range(n)]
    for t in threads:
        t.start()

    barrier.wait(5)
    timer = threading.Timer(0.2, captured["resolve"], args=("shared",))
    timer.start()
    try:
        for t in threads:
            t.join(5)
    finally:
        timer.cancel()

    assert results == ["shared"] * n
    assert s.scheduled == 1


def test_await_a_settled_future(scheduler: QueueScheduler) -> None:
    async def main() -> Any:
        return await Handle(Future.resolve("ready", scheduler=scheduler))

    assert asyncio.run(main()) == "ready"


def test_await_a_rejected_future(scheduler: QueueScheduler) -> None:
    async def main() -> Any:
        return await Handle(Future.reject(ValueError("nope"), scheduler=scheduler))

    with pytest.raises(ValueError, match="nope"):
        asyncio.run(main())


def test_requires_a_future() -> None:
    with pytest.raises(TypeError):
        Handle(42)  # type: ignore[arg-type]
