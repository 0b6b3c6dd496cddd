"""Upstream and service call logging for the IndyCar data layer."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "indycar.api"

_LOG_DIR = os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure(log_dir: str) -> None:
    """Point the file logger at *log_dir*. Takes effect before first use."""
    global _LOG_DIR, _LOG_FILE
    _LOG_DIR = log_dir
    _LOG_FILE = os.path.join(log_dir, "api_calls.log")


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # skip 'self'
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _wrap(fn: F, on_call: Callable, on_ok: Callable, on_fail: Callable) -> F:
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = _get_logger()
            arg_str = _arg_summary(args, kwargs)
            on_call(logger, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                on_fail(logger, arg_str, exc, time.monotonic() - start)
                raise
            on_ok(logger, arg_str, result, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _arg_summary(args, kwargs)
        on_call(logger, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            on_fail(logger, arg_str, exc, time.monotonic() - start)
            raise
        on_ok(logger, arg_str, result, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]


def _describe(result: Any) -> str:
    """Short summary of a fetch result: item count for lists, else the model's own summary."""
    if isinstance(result, list):
        return f"{len(result)} items"
    summary = getattr(result, "summary", None)
    if callable(summary):
        return summary()
    return type(result).__name__


def log_api_call(fn: F) -> F:
    """Decorator that logs upstream fetches to the API log file."""
    name = fn.__qualname__

    def on_call(logger: logging.Logger, arg_str: str) -> None:
        logger.info("CALL: %s(%s)", name, arg_str)

    def on_ok(logger: logging.Logger, arg_str: str, result: Any, elapsed: float) -> None:
        logger.info("OK: %s(%s) -> %s (%.3fs)", name, arg_str, _describe(result), elapsed)

    def on_fail(logger: logging.Logger, arg_str: str, exc: Exception, elapsed: float) -> None:
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            name, arg_str, type(exc).__name__, exc, elapsed,
        )

    return _wrap(fn, on_call, on_ok, on_fail)


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer calls to the API log file."""
    name = fn.__qualname__

    def on_call(logger: logging.Logger, arg_str: str) -> None:
        logger.info("SERVICE CALL: %s(%s)", name, arg_str)

    def on_ok(logger: logging.Logger, arg_str: str, result: Any, elapsed: float) -> None:
        logger.info("SERVICE OK: %s -> %.3fs", name, elapsed)

    def on_fail(logger: logging.Logger, arg_str: str, exc: Exception, elapsed: float) -> None:
        logger.error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            name, type(exc).__name__, exc, elapsed,
        )

    return _wrap(fn, on_call, on_ok, on_fail)
