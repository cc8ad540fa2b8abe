from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

type Result[T] = Ok[T] | Ko


@dataclass(frozen=True)
class Ok[T]:
    value: Final[T]


@dataclass(frozen=True)
class Ko:
    # rejection payloads are opaque, they need not be exceptions
    value: Final[Any]
