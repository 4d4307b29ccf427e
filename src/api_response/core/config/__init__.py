"""Configuration models and loaders."""

from api_response.core.config.app_config import (
    AppConfig,
    LoggingConfig,
    LogLevel,
    ResponseConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "LogLevel",
    "LoggingConfig",
    "ResponseConfig",
    "load_config",
]
