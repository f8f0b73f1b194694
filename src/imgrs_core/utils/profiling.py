"""Performance profiling utilities for imgrs_core operations."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to measure and log execution time of an operation.

    Logs the function name and execution time at DEBUG level, whether the
    call returns or raises.

    Usage:
        @timed
        def resize_image(input_path, output_path, options):
            ...
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.debug(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")

    return wrapper
