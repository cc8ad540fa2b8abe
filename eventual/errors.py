from __future__ import annotations

from typing import Any


class EventualError(Exception):
    def __init__(self, msg: str, code: int) -> None:
        super().__init__(msg, code)
        self.msg = msg
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code:03d}] {self.msg}"


class RejectedError(EventualError):
    def __init__(self, reason: Any) -> None:
        super().__init__(f"future rejected with {reason!r}", 10)
        self.reason = reason

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.reason,))


class PendingError(EventualError):
    def __init__(self, future_id: int) -> None:
        super().__init__(f"future {future_id} is still pending", 20)
        self.future_id = future_id

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.future_id,))


class SchedulerStoppedError(EventualError):
    def __init__(self, name: str) -> None:
        super().__init__(f"scheduler {name} is stopped", 30)
        self.name = name

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.name,))
