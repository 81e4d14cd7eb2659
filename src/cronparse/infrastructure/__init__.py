"""Infrastructure for cronparse: configuration and logging."""

from cronparse.infrastructure.config import (
    ConfigError,
    ConfigProfile,
    ConfigSource,
    ConfigSourceError,
    EnvConfigSource,
    FileConfigSource,
    get_config,
    load_config,
    reset_config,
)
from cronparse.infrastructure.logging import (
    LogConfig,
    LogLevel,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    # Config
    "ConfigError",
    "ConfigProfile",
    "ConfigSource",
    "ConfigSourceError",
    "EnvConfigSource",
    "FileConfigSource",
    "get_config",
    "load_config",
    "reset_config",
    # Logging
    "LogConfig",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
