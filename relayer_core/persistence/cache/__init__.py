from relayer_core.persistence.cache.base import Cache
from relayer_core.persistence.cache.config import CacheConfig
from relayer_core.persistence.cache.disk import DiskCache, DiskConfig
from relayer_core.persistence.cache.factory import create_cache
from relayer_core.persistence.cache.memory import MemoryCache, MemoryConfig
from relayer_core.persistence.cache.read_through import read_through
from relayer_core.persistence.cache.redis import RedisCache, RedisConfig

__all__ = [
    "Cache",
    "CacheConfig",
    "DiskCache",
    "DiskConfig",
    "MemoryCache",
    "MemoryConfig",
    "RedisCache",
    "RedisConfig",
    "create_cache",
    "read_through",
]
