from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Literal

from beartype import beartype
from pydantic import BaseModel, ConfigDict

from relayer_core.persistence.cache.base import Cache


@beartype
class MemoryConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    type: Literal["memory"] = "memory"


class MemoryCache(Cache):
    """In-process cache keeping entries with their save timestamp."""

    @beartype
    def __init__(self, config: MemoryConfig | None = None) -> None:
        self.config = config or MemoryConfig()
        # key -> (saved_at, expires_at, data)
        self._entries: dict[str, tuple[float, float | None, Any]] = {}

    def _entry(self, key: str) -> tuple[float, float | None, Any] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        _, expires_at, _ = entry
        if expires_at is not None and time.time() >= expires_at:
            del self._entries[key]
            return None
        return entry

    @beartype
    async def save(self, key: str, data: Any, ttl: timedelta | None = None) -> None:
        """Store data in memory, dropping every entry that has already expired."""
        now = time.time()
        expired = [k for k, (_, exp, _) in self._entries.items() if exp is not None and exp <= now]
        for k in expired:
            del self._entries[k]
        expires_at = now + ttl.total_seconds() if ttl is not None else None
        self._entries[key] = (now, expires_at, data)

    @beartype
    async def load(self, key: str) -> Any | None:
        """Load data from memory."""
        entry = self._entry(key)
        if entry is None:
            return None
        return entry[2]

    @beartype
    async def load_if_recent(self, key: str, max_age: timedelta) -> Any | None:
        """Load data if it was saved less than max_age ago."""
        entry = self._entry(key)
        if entry is None:
            return None
        saved_at, _, data = entry
        if time.time() - saved_at > max_age.total_seconds():
            return None
        return data

    @beartype
    async def delete(self, key: str) -> None:
        """Drop an entry."""
        self._entries.pop(key, None)

    @beartype
    def exists(self, key: str) -> bool:
        """Check if an unexpired entry exists."""
        return self._entry(key) is not None
