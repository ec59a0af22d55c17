from __future__ import annotations

import functools
import time
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from relayer_core.logs.structlog import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """
    Wrap a coroutine function so every call logs its latency.

    Successful calls are logged at debug level; failures are logged as warnings
    and re-raised unchanged.
    """
    name = func.__qualname__

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        started = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 3)
            logger.warning(f"{name} failed", elapsed_ms=elapsed_ms, error=str(e))
            raise
        elapsed_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.debug(f"{name} completed", elapsed_ms=elapsed_ms)
        return result

    return wrapper
