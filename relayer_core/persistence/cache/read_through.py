from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import TypeVar

from relayer_core.logs.structlog import logger
from relayer_core.persistence.cache.base import Cache

T = TypeVar("T")


async def read_through(
    cache: Cache,
    key: str,
    ttl: timedelta,
    loader: Callable[[], Awaitable[T]],
) -> T:
    """
    Return the cached value for key if it is younger than ttl, otherwise await
    the loader, store its result under key and return it.

    A loader result of None is returned but never stored.
    """
    cached = await cache.load_if_recent(key, ttl)
    if cached is not None:
        logger.debug("cache hit", key=key)
        return cached  # type: ignore[no-any-return]

    logger.debug("cache miss", key=key)
    value = await loader()
    if value is not None:
        await cache.save(key, value, ttl)
    return value
