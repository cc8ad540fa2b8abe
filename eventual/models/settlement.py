from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Callable

type Settlement[T] = Value[T] | PendingOn


@dataclass(frozen=True)
class Value[T]:
    value: Final[T]


@dataclass(frozen=True)
class PendingOn:
    # bound register method of the adopted thenable
    register: Final[Callable[[Callable[[Any], Any] | None, Callable[[Any], Any] | None], Any]]


def classify[T](result: T) -> Value[T] | PendingOn:
    """Decide once whether a settlement result is a plain value or a pending computation.

    The ``register`` attribute is read exactly one time, so a lazily computed
    attribute is never evaluated twice. Errors raised while reading it propagate
    to the caller.

    Classes are always plain values: every ``abc.ABC`` subclass exposes a
    callable ``register`` classmethod.
    """
    if result is None or isinstance(result, type):
        return Value(result)

    register = getattr(result, "register", None)
    if callable(register):
        return PendingOn(register)

    return Value(result)
