from __future__ import annotations

from relayer_core.persistence.cache.base import Cache
from relayer_core.persistence.cache.disk import DiskCache, DiskConfig
from relayer_core.persistence.cache.memory import MemoryCache, MemoryConfig
from relayer_core.persistence.cache.redis import RedisCache, RedisConfig


def create_cache(config: MemoryConfig | RedisConfig | DiskConfig) -> Cache:
    """
    Factory function to create a Cache implementation based on configuration.
    """

    if isinstance(config, MemoryConfig):
        return MemoryCache(config)
    elif isinstance(config, RedisConfig):
        return RedisCache(config)
    elif isinstance(config, DiskConfig):
        return DiskCache(config)

    raise ValueError(f"Unsupported cache configuration type: {type(config)}")
