"""Configuration management for cronparse.

Configuration is merged from an optional file and from environment
variables, higher priority sources overriding lower ones.

Architecture:
    ConfigSource[] (ordered by priority)
         |
         +---> FileConfigSource (YAML, JSON)
         +---> EnvConfigSource (CRONPARSE_* environment variables)
         |
         v
    ConfigProfile (typed access)

Usage:
    >>> from cronparse.infrastructure.config import load_config
    >>>
    >>> config = load_config(config_path="cronparse.yaml")
    >>> config.get_str("output.format", default="console")
    >>> config.get_bool("output.color", default=True)
"""

from __future__ import annotations

import copy
import json
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml


DEFAULT_ENV_PREFIX = "CRONPARSE"

DEFAULTS: dict[str, Any] = {
    "logging": {"level": "INFO", "format": "console"},
    "output": {"format": "console", "color": True},
    "demo": {"expression": "*/15 0 1,2,3,15 */2 1-5 /usr/bin/find"},
}


# =============================================================================
# Exceptions
# =============================================================================


class ConfigError(Exception):
    """Base configuration error."""

    pass


class ConfigSourceError(ConfigError):
    """Configuration source error."""

    pass


# =============================================================================
# Configuration Sources
# =============================================================================


class ConfigSource(ABC):
    """Abstract base class for configuration sources.

    Sources are merged in priority order; a higher priority overrides
    values loaded from a lower one.
    """

    def __init__(self, priority: int = 0) -> None:
        """Initialize config source.

        Args:
            priority: Source priority (higher = merged later).
        """
        self._priority = priority

    @property
    def priority(self) -> int:
        """Get source priority."""
        return self._priority

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration from source.

        Returns:
            Dictionary of configuration values.
        """
        pass


class EnvConfigSource(ConfigSource):
    """Environment variable configuration source.

    Example:
        CRONPARSE_OUTPUT_FORMAT=json
        CRONPARSE_LOGGING_LEVEL=debug

        Will produce:
        {"output": {"format": "json"}, "logging": {"level": "debug"}}
    """

    def __init__(
        self,
        prefix: str = DEFAULT_ENV_PREFIX,
        separator: str = "_",
        priority: int = 100,
    ) -> None:
        """Initialize environment source.

        Args:
            prefix: Environment variable prefix.
            separator: Separator for nested keys.
            priority: Source priority.
        """
        super().__init__(priority)
        self._prefix = prefix
        self._separator = separator

    def load(self) -> dict[str, Any]:
        """Load configuration from environment."""
        result: dict[str, Any] = {}
        prefix = f"{self._prefix}{self._separator}"

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            parts = key[len(prefix):].lower().split(self._separator)

            current = result
            for part in parts[:-1]:
                current = current.setdefault(part, {})
                if not isinstance(current, dict):
                    break
            else:
                current[parts[-1]] = self._parse_value(value)

        return result

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        lowered = value.lower()

        if lowered in ("true", "yes", "on"):
            return True
        if lowered in ("false", "no", "off"):
            return False
        if lowered in ("null", "none", ""):
            return None

        try:
            return int(value)
        except ValueError:
            pass

        if value.startswith(("[", "{")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value


class FileConfigSource(ConfigSource):
    """File-based configuration source.

    Supports YAML and JSON, detected from the file extension.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        required: bool = False,
        priority: int = 50,
    ) -> None:
        """Initialize file source.

        Args:
            path: Path to configuration file.
            required: Raise error if file not found.
            priority: Source priority.
        """
        super().__init__(priority)
        self._path = Path(path)
        self._required = required

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """Load configuration from file."""
        if not self._path.exists():
            if self._required:
                raise ConfigSourceError(f"Configuration file not found: {self._path}")
            return {}

        suffix = self._path.suffix.lower()
        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigSourceError(f"Cannot read config {self._path}: {e}") from e

        try:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif suffix == ".json":
                data = json.loads(content)
            else:
                raise ConfigSourceError(f"Unsupported file format: {suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigSourceError(f"Failed to load config {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigSourceError(
                f"Configuration file {self._path} must contain a mapping"
            )

        return data


# =============================================================================
# Configuration Profile
# =============================================================================


class ConfigProfile:
    """Typed configuration access.

    Example:
        >>> profile = ConfigProfile({"output": {"format": "json"}})
        >>> profile.get_str("output.format")
        'json'
        >>> profile.get_bool("output.color", default=True)
        True
    """

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize configuration profile.

        Args:
            config: Configuration dictionary.
        """
        self._config = config

    def get(
        self,
        key: str,
        default: Any = None,
        *,
        required: bool = False,
    ) -> Any:
        """Get configuration value.

        Args:
            key: Configuration key (dot-separated for nesting).
            default: Default value if not found.
            required: Raise error if not found.

        Returns:
            Configuration value.
        """
        value = self._get_nested(key)

        if value is None:
            if required:
                raise ConfigError(f"Required configuration '{key}' not found")
            return default

        return value

    def get_str(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        if isinstance(value, int):
            return value
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "1", "on")
        return bool(value)

    def _get_nested(self, key: str) -> Any:
        current: Any = self._config

        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
            if current is None:
                return None

        return current

    def to_dict(self) -> dict[str, Any]:
        """Get full configuration as dictionary."""
        return self._config.copy()

    def __contains__(self, key: str) -> bool:
        return self._get_nested(key) is not None

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value


# =============================================================================
# Loading
# =============================================================================


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def merge_sources(sources: list[ConfigSource]) -> ConfigProfile:
    """Merge sources in priority order on top of the defaults.

    Args:
        sources: Configuration sources.

    Returns:
        ConfigProfile with the merged values.
    """
    config = copy.deepcopy(DEFAULTS)
    for source in sorted(sources, key=lambda s: s.priority):
        config = _deep_merge(config, source.load())
    return ConfigProfile(config)


_lock = threading.Lock()
_global_config: ConfigProfile | None = None


def load_config(
    *,
    config_path: str | Path | None = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> ConfigProfile:
    """Load configuration and make it the global profile.

    Args:
        config_path: Optional YAML or JSON configuration file.
        env_prefix: Environment variable prefix.

    Returns:
        ConfigProfile instance.

    Raises:
        ConfigSourceError: If the file is missing or malformed.
    """
    global _global_config

    sources: list[ConfigSource] = [EnvConfigSource(prefix=env_prefix)]
    if config_path is not None:
        sources.append(FileConfigSource(config_path, required=True))

    profile = merge_sources(sources)

    with _lock:
        _global_config = profile
    return profile


def get_config() -> ConfigProfile:
    """Get the global configuration, loading defaults on first use."""
    with _lock:
        profile = _global_config

    if profile is None:
        return load_config()
    return profile


def reset_config() -> None:
    """Forget the global configuration."""
    global _global_config

    with _lock:
        _global_config = None
