"""
Configuration loader for sparsevec.
Loads YAML config with optional per-environment overrides.
"""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/sparsevec.yaml"


class Config:
    """
    Singleton config loader.

    Usage:
        config = Config.load("config/sparsevec.yaml")
        precision = config.get("vectors.precision")
        encoder = config.get_section("encoder")
    """

    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH, env: str = None) -> "Config":
        """
        Load config from YAML file.

        Args:
            config_path: Path to main config file
            env: Environment name (loads environments/{env}.yaml next to
                the main file as override)

        Returns:
            Config instance
        """
        instance = cls()

        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(path, "r") as f:
            instance._config = yaml.safe_load(f) or {}

        logger.info(f"Loaded config from {config_path}")

        if env:
            env_path = path.parent / "environments" / f"{env}.yaml"
            if env_path.exists():
                with open(env_path, "r") as f:
                    env_config = yaml.safe_load(f) or {}
                instance._config = instance._merge_configs(instance._config, env_config)
                logger.info(f"Applied environment override: {env}")
            else:
                logger.warning(f"Environment override not found: {env_path}")

        return instance

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build config from an in-memory dict (no file)."""
        instance = cls()
        instance._config = dict(data)
        return instance

    def _merge_configs(self, base: dict, override: dict) -> dict:
        """Deep merge override into base config."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.

        Example:
            config.get("vectors.precision")  # Returns "f64"
            config.get("vectors.missing", 100)  # Returns 100
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section as dict."""
        return self.get(section, {})

    @property
    def raw(self) -> Dict[str, Any]:
        """Get raw config dict."""
        return self._config

    @classmethod
    def reset(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None
        cls._config = {}
