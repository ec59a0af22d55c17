from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

from relayer_core.persistence.cache.disk import DiskConfig
from relayer_core.persistence.cache.memory import MemoryConfig
from relayer_core.persistence.cache.redis import RedisConfig

CacheConfig = Annotated[Union[MemoryConfig, RedisConfig, DiskConfig], Field(discriminator="type")]
