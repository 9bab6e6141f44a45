"""Development helpers."""
from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def timer(func: F) -> F:
    """
    Log the wall time of every call to `func` at DEBUG level.

    Args:
        func: Function to wrap.

    Returns:
        The wrapped function, with the same signature and return value.
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start
            logger.debug(f"{func.__qualname__} finished in {elapsed:.4f} s")

    return wrapper  # type: ignore[return-value]
