from __future__ import annotations

import logging
import os

ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level() -> str:
    level = os.getenv("EVENTUAL_LOG_LEVEL", "WARNING").upper()
    if level not in ALLOWED_LOG_LEVELS:
        msg = f"EVENTUAL_LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}, got {level!r}"
        raise ValueError(msg)
    return level


def configure(logger: logging.Logger) -> None:
    """Attach the package handler and set the level from ``EVENTUAL_LOG_LEVEL``.

    An invalid level falls back to ``WARNING`` and is reported on the logger,
    importing the package never fails because of it.
    """
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    try:
        logger.setLevel(log_level())
    except ValueError as e:
        logger.setLevel(logging.WARNING)
        logger.warning("%s, falling back to WARNING", e)


logger = logging.getLogger(__package__)
if not logger.handlers:
    configure(logger)
