from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from beartype import beartype
from yaml import MappingNode, ScalarNode
from yaml.loader import SafeLoader

# ${NAME} or ${NAME:-fallback}
_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def _interpolate(value: str) -> str:
    def substitute(match: re.Match[str]) -> str:
        name, fallback = match.group(1), match.group(2)
        env_value = os.environ.get(name)
        if env_value is not None:
            return env_value
        if fallback is not None:
            return fallback
        raise ConfigError(f"Environment variable {name} is not set")

    return _ENV_VAR_PATTERN.sub(substitute, value)


class EnvVarLoader(SafeLoader):
    """YAML loader expanding ${VAR} and ${VAR:-fallback} in scalars; unset variables without a fallback are errors."""

    def construct_scalar(self, node: ScalarNode | MappingNode) -> str:
        value: str = super().construct_scalar(node)
        if isinstance(value, str):
            value = _interpolate(value)
        return value


@beartype
def load_from_yaml(path: str | Path) -> dict[str, object]:
    """
    Load a YAML config file with environment variable interpolation.

    Raises:
        ConfigError: If the file does not exist, the YAML is invalid, the root is
            not a mapping, or a referenced environment variable is unset.
    """
    config_path: Path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data: dict[str, object] = yaml.load(f, Loader=EnvVarLoader)
    except yaml.YAMLError as err:
        raise ConfigError(f"YAML parsing error: {err}") from err
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping (dict).")
    return data
