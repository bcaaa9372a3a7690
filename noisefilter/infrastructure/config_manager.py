#!/usr/bin/env python3
"""Layered configuration manager for NoiseFilter.

This module provides configuration management with:
- 4-level precedence hierarchy
- YAML configuration files
- Environment variable overrides
- Validation of the merged result
- Thread-safe operations

Example:
    >>> config = ConfigManager()
    >>> config.load_file("noisefilter.yaml")
    >>> config.get("noisefilter.ignore_file")
    '.noiseignore'
"""

import copy
import os
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from noisefilter.core.constants import DEFAULT_CONFIG, ErrorCode
from noisefilter.core.validators import ValidationError, validate_config

ENV_PREFIX = "NOISEFILTER_"
ENV_NESTING_SEPARATOR = "__"


class ConfigSource(Enum):
    """Configuration source precedence levels."""

    COMPILED_DEFAULTS = 1  # Lowest precedence
    USER_CONFIG = 2
    ENVIRONMENT = 3
    RUNTIME = 4  # Highest precedence


@dataclass
class ConfigValue:
    """Configuration value with metadata."""

    value: Any
    source: ConfigSource
    timestamp: float = field(default_factory=time.time)


class ConfigError(Exception):
    """Configuration error."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class ConfigManager:
    """Thread-safe layered configuration manager.

    Manages configuration from multiple sources with precedence:
    1. Compiled defaults (lowest)
    2. User config file (YAML)
    3. Environment variables (NOISEFILTER_*)
    4. Runtime updates (highest)
    """

    def __init__(self, config_file: Optional[str] = None, load_environment: bool = True):
        """Initialize configuration manager.

        Args:
            config_file: Optional config file to load
            load_environment: Whether to read NOISEFILTER_* variables
        """
        self._config: Dict[ConfigSource, Dict[str, Any]] = {}
        self._lock = threading.RLock()

        self._config[ConfigSource.COMPILED_DEFAULTS] = copy.deepcopy(DEFAULT_CONFIG)

        if config_file:
            self.load_file(config_file)

        if load_environment:
            self._load_environment()

    def load_file(self, file_path: str, source: ConfigSource = ConfigSource.USER_CONFIG) -> None:
        """Load configuration from YAML file.

        Args:
            file_path: Path to YAML config file
            source: Configuration source level

        Raises:
            ConfigError: If file cannot be loaded or parsed
        """
        path = Path(file_path).expanduser().resolve()

        if not path.exists():
            raise ConfigError(f"Config file not found: {file_path}", ErrorCode.NOT_FOUND)

        try:
            with open(path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML parse error in {file_path}: {e}", ErrorCode.INVALID_INPUT)
        except OSError as e:
            raise ConfigError(f"Error loading config {file_path}: {e}", ErrorCode.INTERNAL_ERROR)

        if not isinstance(config_data, dict):
            raise ConfigError(f"Invalid config format in {file_path}", ErrorCode.INVALID_INPUT)

        with self._lock:
            self._config[source] = config_data

    def load_dict(self, config_data: Dict[str, Any], source: ConfigSource = ConfigSource.RUNTIME) -> None:
        """Load configuration from dictionary.

        Args:
            config_data: Configuration dictionary
            source: Configuration source level
        """
        with self._lock:
            self._config[source] = copy.deepcopy(config_data)

    def _load_environment(self) -> None:
        """Load configuration from environment variables.

        Environment variables in format: NOISEFILTER_SECTION__KEY=value
        Example: NOISEFILTER_LOGGING__LEVEL=DEBUG
        """
        env_config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            parts = key[len(ENV_PREFIX):].lower().split(ENV_NESTING_SEPARATOR)
            if not all(parts):
                continue

            current = env_config
            for part in parts[:-1]:
                current = current.setdefault(part, {})
                if not isinstance(current, dict):
                    break
            else:
                current[parts[-1]] = self._parse_env_value(value)

        if env_config:
            with self._lock:
                self._config[ConfigSource.ENVIRONMENT] = {"noisefilter": env_config}

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value.

        Args:
            value: String value from environment

        Returns:
            Parsed value (None, bool, int, float, or str)
        """
        lowered = value.lower()
        if lowered in ("none", "null", ""):
            return None
        if lowered in ("true", "yes"):
            return True
        if lowered in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Dot-separated key path (e.g., "noisefilter.logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        with self._lock:
            for source in sorted(self._config.keys(), key=lambda s: s.value, reverse=True):
                value = self._get_nested(self._config[source], key)
                if value is not None:
                    return value

            return default

    def get_value(self, key: str) -> Optional[ConfigValue]:
        """Get configuration value with the source that supplied it.

        Returns:
            ConfigValue, or None if no source defines the key
        """
        with self._lock:
            for source in sorted(self._config.keys(), key=lambda s: s.value, reverse=True):
                value = self._get_nested(self._config[source], key)
                if value is not None:
                    return ConfigValue(value=value, source=source)
            return None

    def _get_nested(self, config: Dict[str, Any], key: str) -> Optional[Any]:
        """Get value from nested dictionary using dot notation."""
        current: Any = config

        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]

        return current

    def set(self, key: str, value: Any, source: ConfigSource = ConfigSource.RUNTIME) -> None:
        """Set configuration value.

        Args:
            key: Dot-separated key path
            value: Value to set
            source: Configuration source level
        """
        with self._lock:
            if source not in self._config:
                self._config[source] = {}

            parts = key.split(".")
            current = self._config[source]

            for part in parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]

            current[parts[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        """Get merged configuration from all sources.

        Returns:
            Merged configuration dictionary
        """
        with self._lock:
            merged: Dict[str, Any] = {}

            # Lowest to highest precedence; None never overrides a value
            for source in sorted(self._config.keys(), key=lambda s: s.value):
                merged = self._deep_merge(merged, self._config[source])

            return merged

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            elif value is not None or key not in result:
                result[key] = copy.deepcopy(value)

        return result

    def validate(self) -> bool:
        """Validate the merged configuration.

        Returns:
            True if valid

        Raises:
            ConfigError: If validation fails
        """
        try:
            return validate_config(self.get_all())
        except ValidationError as e:
            raise ConfigError(str(e), e.error_code)

    def clear(self, source: Optional[ConfigSource] = None) -> None:
        """Clear configuration.

        Args:
            source: Specific source to clear, or None for all except defaults
        """
        with self._lock:
            if source:
                if source in self._config and source != ConfigSource.COMPILED_DEFAULTS:
                    del self._config[source]
            else:
                for s in [s for s in self._config if s != ConfigSource.COMPILED_DEFAULTS]:
                    del self._config[s]


# Global config manager instance
_global_config: Optional[ConfigManager] = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigManager:
    """Get or create global configuration manager.

    Args:
        config_file: Optional config file to load

    Returns:
        Global configuration manager
    """
    global _global_config
    if _global_config is None:
        _global_config = ConfigManager(config_file)
    return _global_config


def set_global_config(config: Optional[ConfigManager]) -> None:
    """Set the global configuration manager.

    Args:
        config: Configuration manager to use globally, or None to reset
    """
    global _global_config
    _global_config = config
