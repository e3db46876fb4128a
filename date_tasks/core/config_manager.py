"""
Configuration Manager for date_tasks

Handles configuration defaults, optional config files and environment
overrides. Nothing is read from disk unless a config directory is given,
either directly or through DATE_TASKS_CONFIG_DIR.

Python 3.9+ compatible.
"""

import copy
import json
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml


ENV_PREFIX = "DATE_TASKS_"
CONFIG_DIR_ENV = "DATE_TASKS_CONFIG_DIR"


class ConfigManager:
    """
    Centralized configuration management for date_tasks.

    Supports JSON and YAML configuration files, environment variable
    overrides and dot-separated key lookups.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Optional config directory path
        """
        self.logger = logging.getLogger(__name__)

        if config_dir is None:
            config_dir = os.environ.get(CONFIG_DIR_ENV)

        self.config_dir: Optional[Path] = Path(config_dir) if config_dir else None

        # Configuration cache
        self._config_cache: Dict[str, Dict[str, Any]] = {}

        self._defaults = self._load_default_config()

    def _load_default_config(self) -> Dict[str, Any]:
        """Load default configuration values."""
        return {
            "parsing": {
                "naive_timezone": "UTC",
                "rfc2822_zones": {}
            },
            "logging": {
                "level": "WARNING",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def load_config(self, config_name: str, required: bool = False) -> Dict[str, Any]:
        """
        Load configuration with caching.

        Args:
            config_name: Configuration file name (without extension)
            required: Whether a config file for this name must exist

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If required config file not found
        """
        if config_name in self._config_cache:
            return self._config_cache[config_name]

        config_data: Dict[str, Any] = {}

        if self.config_dir is not None:
            for extension in ['.json', '.yaml', '.yml']:
                config_path = self.config_dir / f"{config_name}{extension}"

                if config_path.exists():
                    try:
                        if extension == '.json':
                            loaded = self._load_json(config_path)
                        else:
                            loaded = self._load_yaml(config_path)

                        if not isinstance(loaded, dict):
                            raise ValueError(f"expected a mapping, got {type(loaded).__name__}")

                        config_data = loaded
                        self.logger.info(f"Loaded configuration from {config_path}")
                        break

                    except Exception as e:
                        self.logger.error(f"Error loading config from {config_path}: {e}")
                        continue

        if not config_data and required:
            raise FileNotFoundError(f"Required configuration '{config_name}' not found in {self.config_dir}")

        if config_name in self._defaults:
            config_data = self._deep_merge(self._defaults[config_name], config_data)

        config_data = self._apply_env_overrides(config_name, config_data)

        self._config_cache[config_name] = config_data

        return config_data

    def _load_json(self, path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def _deep_merge(self, default: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = copy.deepcopy(default)

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_name: str, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        # DATE_TASKS_<CONFIG>_<KEY>, with "__" between nested keys
        prefix = f"{ENV_PREFIX}{config_name.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix) or env_var == CONFIG_DIR_ENV:
                continue

            key_path = env_var[len(prefix):].lower().split('__')

            current = config
            for key in key_path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            current[key_path[-1]] = self._convert_env_value(value)
            self.logger.debug(f"Applied environment override {env_var}")

        return config

    def _convert_env_value(self, value: str) -> Union[str, int, bool, float]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ['true', 'yes']:
            return True
        elif value.lower() in ['false', 'no']:
            return False

        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            pass

        return value

    def get(self, config_name: str, key: Optional[str] = None, default: Any = None) -> Any:
        """
        Get configuration value with optional key path.

        Args:
            config_name: Configuration name
            key: Optional dot-separated key path (e.g., "naive_timezone")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        config = self.load_config(config_name)

        if key is None:
            return config

        current: Any = config
        for key_part in key.split('.'):
            if isinstance(current, dict) and key_part in current:
                current = current[key_part]
            else:
                return default

        return current
