"""Loading of parallint settings from YAML files and the environment."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .config_models import ParallintConfig
from ...domain.exceptions import ConfigurationError


# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "PARALLINT_MAX_WORKERS": ("parallel", "max_workers"),
    "PARALLINT_EXECUTOR": ("parallel", "executor"),
    "PARALLINT_FAIL_ON_WORKER_ERROR": ("parallel", "fail_on_worker_error"),
    "PARALLINT_LOG_LEVEL": ("logging", "level"),
    "PARALLINT_LOG_FILE": ("logging", "file"),
    "PARALLINT_COLOR": ("output", "color"),
}


class ConfigLoader:
    """
    Loads configuration with layered precedence.

    Lowest to highest: built-in defaults, the user config, the project
    config in the working directory, an explicit path, then environment
    variables.
    """

    USER_CONFIG = Path.home() / ".parallint" / "config.yaml"
    PROJECT_CONFIG_NAME = ".parallint.yaml"

    @classmethod
    def default_paths(cls) -> List[Path]:
        return [cls.USER_CONFIG, Path.cwd() / cls.PROJECT_CONFIG_NAME]

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> ParallintConfig:
        """
        Load configuration.

        Args:
            config_path: Optional explicit config file path

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a file is unreadable or settings are invalid
        """
        merged: Dict[str, Any] = {}

        for path in cls.default_paths():
            if path.is_file():
                cls._merge(merged, cls._read_yaml(path))

        if config_path:
            path = Path(config_path)
            if not path.is_file():
                raise ConfigurationError(f"Config file not found: {config_path}")
            cls._merge(merged, cls._read_yaml(path))

        cls._merge(merged, cls._env_overrides())

        try:
            return ParallintConfig(**merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def get_config_info(cls) -> Dict[str, List[str]]:
        """Describe which config sources are present."""
        return {
            "existing_configs": [str(p) for p in cls.default_paths() if p.is_file()],
            "env_overrides": [name for name in ENV_OVERRIDES if name in os.environ],
            "default_paths": [str(p) for p in cls.default_paths()],
        }

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Could not read config file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def _env_overrides() -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        for name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(name)
            if value is None or value == "":
                continue
            # pydantic coerces "4" and "false" to the field types
            overrides.setdefault(section, {})[key] = value
        return overrides

    @classmethod
    def _merge(cls, base: Dict[str, Any], update: Dict[str, Any]):
        """Recursively merge update into base."""
        for key, value in update.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                cls._merge(base[key], value)
            else:
                base[key] = value
