#!/usr/bin/env python3

"""Logger lookup, elapsed-time formatting and the timing decorator."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name (typically ``__name__``)."""
    return logging.getLogger(name)


def format_elapsed(seconds: float) -> str:
    """
    Render a duration for log lines.

    Parsing a single Go file usually takes well under a second, so short
    durations are shown in milliseconds and longer ones in seconds.

    Args:
        seconds: Elapsed wall time in seconds

    Returns:
        Text such as ``"3.4ms"`` or ``"1.25s"``
    """
    seconds = max(seconds, 0.0)
    if seconds < 1.0:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


def log_timing(func: F) -> F:
    """
    Log how long a call takes at DEBUG level, and failures at ERROR level.

    The logger is the one of the module that defines ``func``. Exceptions
    are logged with the elapsed time and re-raised unchanged.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        logger.debug(f"Starting {func_name}")
        start_time = perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"Failed {func_name} after {format_elapsed(perf_counter() - start_time)}: {e}"
            )
            raise

        logger.debug(f"Completed {func_name} in {format_elapsed(perf_counter() - start_time)}")
        return result

    return cast("F", wrapper)
