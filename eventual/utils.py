from __future__ import annotations

import logging
import os
import threading
import traceback
from functools import wraps
from importlib.metadata import version
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def exit_on_exception[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            format = """
eventual encountered an unexpected exception and had to shut down.

Version:     %s
Thread:      %s
Exception:   %s
Stacktrace:
---------------------------------------------------------------------
%s
---------------------------------------------------------------------
"""
            logger.critical(
                format,
                eventual_version(),
                threading.current_thread().name,
                repr(e),
                traceback.format_exc(),
            )

            # Exit the process with a non-zero exit code, this kills all
            # threads
            os._exit(1)

    return wrapper


def eventual_version() -> str:
    try:
        return version("eventual")
    except Exception:
        return "unknown"


def describe(value: Any, n: int = 80) -> str:
    return truncate(repr(value), n)


def truncate(s: str, n: int) -> str:
    if len(s) > n:
        return s[:n] + "..."
    return s
