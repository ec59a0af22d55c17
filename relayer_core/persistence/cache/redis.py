from __future__ import annotations

import pickle
import time
from datetime import timedelta
from typing import Any, Literal

import redis
import redis.asyncio as async_redis
import structlog
from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field

from relayer_core.persistence.cache.base import Cache

logger = structlog.get_logger()


@beartype
class RedisConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    type: Literal["redis"] = "redis"
    host: str = Field(default="localhost", min_length=1)
    port: int = Field(default=6379, ge=1, le=65535)
    db: int = Field(default=0, ge=0)
    password: str | None = None


class RedisCache(Cache):
    """
    Redis-based cache implementation using pickle for serialization.

    Values are stored as a {saved_at, data} envelope so freshness can be
    checked against any max_age, and the key expiry is set when a ttl is given.
    """

    @beartype
    def __init__(self, config: RedisConfig) -> None:
        self.config = config
        self._async_client = async_redis.Redis(
            host=config.host, port=config.port, db=config.db, password=config.password
        )
        self._sync_client = redis.Redis(
            host=config.host, port=config.port, db=config.db, password=config.password
        )

    async def _load_envelope(self, key: str) -> dict[str, Any] | None:
        try:
            payload = await self._async_client.get(key)
            if payload is None:
                return None
            envelope: dict[str, Any] = pickle.loads(payload)
            return envelope
        except Exception as e:
            logger.error("Failed to load from Redis", key=key, error=str(e))
            return None

    @beartype
    async def save(self, key: str, data: Any, ttl: timedelta | None = None) -> None:
        """Save data to Redis asynchronously."""
        try:
            payload = pickle.dumps({"saved_at": time.time(), "data": data})
            expire_ms = max(int(ttl.total_seconds() * 1000), 1) if ttl is not None else None
            await self._async_client.set(key, payload, px=expire_ms)
        except Exception as e:
            logger.error("Failed to save to Redis", key=key, error=str(e))

    @beartype
    async def load(self, key: str) -> Any | None:
        """Load data from Redis asynchronously."""
        envelope = await self._load_envelope(key)
        if envelope is None:
            return None
        return envelope["data"]

    @beartype
    async def load_if_recent(self, key: str, max_age: timedelta) -> Any | None:
        """Load data from Redis if it was saved less than max_age ago."""
        envelope = await self._load_envelope(key)
        if envelope is None:
            return None
        if time.time() - envelope["saved_at"] > max_age.total_seconds():
            return None
        return envelope["data"]

    @beartype
    async def delete(self, key: str) -> None:
        """Delete data from Redis asynchronously."""
        try:
            await self._async_client.delete(key)
        except Exception as e:
            logger.error("Failed to delete from Redis", key=key, error=str(e))

    @beartype
    def exists(self, key: str) -> bool:
        """Check if key exists in Redis synchronously."""
        try:
            return bool(self._sync_client.exists(key))
        except Exception as e:
            logger.error("Failed to check existence in Redis", key=key, error=str(e))
            return False
