from datetime import timedelta
from unittest.mock import patch

import pytest

from relayer_core.persistence.cache import Cache
from relayer_core.persistence.cache.memory import MemoryCache


@pytest.mark.asyncio
async def test_memory_cache_implements_protocol():
    assert isinstance(MemoryCache(), Cache)


@pytest.mark.asyncio
async def test_memory_cache_save_load_delete():
    cache = MemoryCache()

    assert await cache.load("key") is None
    await cache.save("key", {"a": 1})
    assert await cache.load("key") == {"a": 1}
    assert cache.exists("key")

    await cache.delete("key")
    assert not cache.exists("key")
    # deleting twice is a no-op
    await cache.delete("key")


@pytest.mark.asyncio
async def test_memory_cache_ttl_expiry():
    cache = MemoryCache()

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=1000.0):
        await cache.save("key", "value", timedelta(seconds=60))

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=1059.0):
        assert await cache.load("key") == "value"

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=1060.0):
        assert await cache.load("key") is None
        assert not cache.exists("key")


@pytest.mark.asyncio
async def test_memory_cache_load_if_recent():
    cache = MemoryCache()

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=1000.0):
        await cache.save("key", "value")

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=1030.0):
        assert await cache.load_if_recent("key", timedelta(seconds=60)) == "value"
        assert await cache.load_if_recent("key", timedelta(seconds=10)) is None
        # the entry itself is kept for callers with a looser max_age
        assert await cache.load("key") == "value"


@pytest.mark.asyncio
async def test_memory_cache_save_sweeps_expired_entries():
    cache = MemoryCache()

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=1000.0):
        for i in range(1000):
            await cache.save(f"filled:{i}", str(i), timedelta(seconds=60))
        await cache.save("pinned", "kept")
    assert len(cache._entries) == 1001

    with patch("relayer_core.persistence.cache.memory.time.time", return_value=5000.0):
        await cache.save("fresh", "value", timedelta(seconds=60))

    assert sorted(cache._entries) == ["fresh", "pinned"]
