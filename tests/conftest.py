from __future__ import annotations

import logging
import random
import sys
from typing import TYPE_CHECKING

import pytest

from eventual import QueueScheduler, ThreadScheduler, set_default_scheduler

if TYPE_CHECKING:
    from collections.abc import Generator


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption("--seed", action="store")
    parser.addoption("--steps", action="store")


@pytest.fixture
def seed(request: pytest.FixtureRequest) -> str:
    seed = request.config.getoption("--seed")

    if not isinstance(seed, str):
        return str(random.randint(0, sys.maxsize))

    return seed


@pytest.fixture
def steps(request: pytest.FixtureRequest) -> int:
    steps = request.config.getoption("--steps")

    if isinstance(steps, str):
        try:
            return int(steps)
        except ValueError:
            pass

    return 2000


@pytest.fixture
def scheduler() -> QueueScheduler:
    return QueueScheduler()


@pytest.fixture
def thread_scheduler() -> Generator[ThreadScheduler]:
    s = ThreadScheduler(name="eventual-test")
    yield s
    s.stop(timeout=5)


@pytest.fixture
def reset_default_scheduler() -> Generator[None]:
    reset()
    yield
    reset()


def reset() -> None:
    previous = set_default_scheduler(None)
    if isinstance(previous, ThreadScheduler):
        previous.stop(timeout=5)
