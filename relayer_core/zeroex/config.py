from __future__ import annotations

from pathlib import Path

from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from relayer_core.config import ConfigError, load_from_yaml
from relayer_core.persistence.cache.config import CacheConfig
from relayer_core.persistence.cache.memory import MemoryConfig
from relayer_core.zeroex.models import TxOptions


@beartype
class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    rpc_url: str = Field(min_length=1)
    account: str | None = None  # defaults to the first account managed by the node
    tx_options: TxOptions = Field(default_factory=TxOptions)
    cache: CacheConfig = Field(default_factory=MemoryConfig)
    log_level: str = "INFO"


@beartype
def load_client_config(path: str | Path) -> ClientConfig:
    """
    Load and validate a ClientConfig from a YAML file.

    Raises:
        ConfigError: If the file cannot be loaded or does not describe a valid client.
    """
    data = load_from_yaml(path)
    try:
        return ClientConfig.model_validate(data)
    except ValidationError as err:
        raise ConfigError(f"Invalid client config: {err}") from err
