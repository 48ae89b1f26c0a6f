"""
Logging configuration for playsplash.

Each run gets its own structlog logger bound to an append-mode log file and
rendering JSON lines. The logger is passed explicitly to every step; the
process-wide structlog configuration is never touched.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

import structlog
from structlog.typing import FilteringBoundLogger

from .exceptions import LogFileError

LOG_FILE_MODE = 0o644


def _level_number(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def build_logger(
    stream: IO[str],
    *,
    level: str = "INFO",
    env: str = "prod",
) -> FilteringBoundLogger:
    """
    Build a JSON logger writing to ``stream``.

    Args:
        stream: Open text stream receiving one JSON object per line
        level: Minimum level name (DEBUG, INFO, ...)
        env: Environment name bound into every event

    Returns:
        A structlog bound logger with service context
    """
    logger = structlog.wrap_logger(
        structlog.PrintLogger(file=stream),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
    return logger.bind(service="playsplash", env=env)


def _append_opener(path: str, flags: int) -> int:
    return os.open(path, flags, LOG_FILE_MODE)


@contextmanager
def open_log_file(file_name: str | Path, *, level: str = "INFO", env: str = "prod") -> Iterator[FilteringBoundLogger]:
    """
    Open ``file_name`` for append and yield a logger writing to it.

    The file is created with mode 0644 when absent and closed when the
    context exits, whether the body succeeded or raised.

    Raises:
        LogFileError: If the file cannot be opened
    """
    try:
        stream = open(file_name, "a", encoding="utf-8", errors="replace", opener=_append_opener)
    except OSError as e:
        raise LogFileError(f"failed to initialize log file: {e}") from e

    with stream:
        logger = build_logger(stream, level=level, env=env)
        logger.info("Log file initialized", log_file=str(Path(file_name).resolve()))
        yield logger
