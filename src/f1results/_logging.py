"""Call logging for the source, store and ingestion layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from f1results.config import get_settings

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "f1results"
_LOG_FILE_NAME = "f1results.log"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        settings = get_settings()
        os.makedirs(settings.log_dir, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(settings.log_level.upper())
        logger.propagate = False

        if not logger.handlers:
            handler = logging.FileHandler(
                os.path.join(settings.log_dir, _LOG_FILE_NAME), encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _summarise_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'; records and batches are summarised by size.
    parts = [_short_repr(a) for a in args[1:]]
    parts += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _short_repr(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return f"<{len(value)} items>"
    record_id = getattr(value, "record_id", None)
    if isinstance(record_id, str):
        return repr(record_id)
    return repr(value)


def log_io_call(fn: F) -> F:
    """Decorator that logs source and store method calls to the log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        arg_str = _summarise_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            count = len(result) if isinstance(result, list) else 1
            logger.info(
                "OK: %s(%s) -> %d items (%.3fs)",
                fn.__qualname__, arg_str, count, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]


def log_pipeline_call(fn: F) -> F:
    """Decorator that logs ingestion pipeline runs to the log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        arg_str = ", ".join(
            [_short_repr(a) for a in args] + [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        )
        logger.info("PIPELINE CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info(
                "PIPELINE OK: %s -> %.3fs", fn.__qualname__, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "PIPELINE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
