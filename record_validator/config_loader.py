"""Configuration loading: bundled defaults plus an optional override file."""

import logging
from pathlib import Path
from typing import Any, Dict, NamedTuple, Optional
from importlib.resources import files

import yaml
from jsonschema import Draft7Validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "default-config.yaml"

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "tag_key": {"type": "string", "minLength": 1},
        "max_workers": {
            "oneOf": [{"type": "integer", "minimum": 1}, {"type": "null"}]
        },
        "thread_name_prefix": {"type": "string"},
    },
    "required": ["tag_key", "max_workers", "thread_name_prefix"],
    "additionalProperties": False,
}


class ValidatorConfig(NamedTuple):
    """Settings for one Validator."""

    tag_key: str = "validate"
    max_workers: Optional[int] = None
    thread_name_prefix: str = "record-validator"


class ConfigLoader:
    """Loads the bundled config and merges an optional override file over it."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to a YAML file whose keys override
                the bundled defaults

        Raises:
            ConfigError: If a file cannot be read or the merged config is invalid
        """
        config_file = files('record_validator').joinpath(DEFAULT_CONFIG_FILE)
        with config_file.open('r') as f:
            self.raw_config = self._parse(f.read(), str(config_file))
        self.sources = [str(config_file)]

        if config_path:
            override = self._load_yaml(config_path)
            self.raw_config = {**self.raw_config, **override}
            self.sources.append(str(config_path))

        self._check(self.raw_config)
        logger.info(f"Validator config loaded from {', '.join(self.sources)}")

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file from disk."""
        try:
            text = Path(path).read_text()
        except OSError as e:
            raise ConfigError(f"Failed to read config from {path}: {e}") from e
        return self._parse(text, path)

    def _parse(self, text: str, source: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse config from {source}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config in {source} must be a mapping, got {type(data).__name__}")
        return data

    def _check(self, data: Dict[str, Any]) -> None:
        """Validate the merged config against CONFIG_SCHEMA."""
        errors = sorted(Draft7Validator(CONFIG_SCHEMA).iter_errors(data), key=lambda e: list(e.path))
        if errors:
            details = "; ".join(
                f"{' -> '.join(str(p) for p in e.path) or 'root'}: {e.message}"
                for e in errors
            )
            raise ConfigError(f"Invalid validator config: {details}")

    def get_config(self) -> ValidatorConfig:
        """Return the merged configuration."""
        return ValidatorConfig(**self.raw_config)


def load_config(config_path: Optional[str] = None) -> ValidatorConfig:
    """
    Load validator configuration.

    Args:
        config_path: Optional YAML file overriding the bundled defaults

    Returns:
        ValidatorConfig

    Raises:
        ConfigError: If loading or schema validation fails
    """
    return ConfigLoader(config_path).get_config()
