from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator

from api_response.core.common.exceptions import ConfigurationError
from api_response.core.common.logging_utils import get_logger
from api_response.core.constants import (
    CONTENT_TYPE_JSON,
    ENCODING_FAILURE_MESSAGE,
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
)
from api_response.core.interfaces.model_bases import DomainModel

logger = get_logger(__name__)


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_to_int(name: str, default: int, env: Mapping[str, str]) -> int:
    """Return an environment variable parsed as an integer."""
    value = env.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(
            "Ignoring non-integer environment value", name=name, value=value
        )
        return default


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class ResponseConfig(DomainModel):
    """Defaults applied when shaping success and error responses."""

    success_status_code: int = HTTP_200_OK
    error_status_code: int = HTTP_400_BAD_REQUEST
    default_content_type: str = CONTENT_TYPE_JSON
    encoding_failure_message: str = ENCODING_FAILURE_MESSAGE
    # Use the framework JSONResponse instead of encoding the body ourselves
    prefer_framework_json: bool = True
    pretty_print: bool = False

    @field_validator("success_status_code", "error_status_code")
    @classmethod
    def validate_status_code(cls, v: int) -> int:
        if not 100 <= v <= 599:
            raise ValueError(f"HTTP status code out of range: {v}")
        return v

    @field_validator("default_content_type")
    @classmethod
    def validate_content_type(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_content_type must not be empty")
        return v


class AppConfig(DomainModel):
    """Top-level configuration for the response helpers."""

    response: ResponseConfig = Field(default_factory=ResponseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create a configuration from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``

        Returns:
            AppConfig instance
        """
        env = os.environ if environ is None else environ
        defaults = ResponseConfig()

        response = {
            "success_status_code": _env_to_int(
                "API_RESPONSE_SUCCESS_STATUS", defaults.success_status_code, env
            ),
            "error_status_code": _env_to_int(
                "API_RESPONSE_ERROR_STATUS", defaults.error_status_code, env
            ),
            "default_content_type": env.get(
                "API_RESPONSE_CONTENT_TYPE", defaults.default_content_type
            ),
            "prefer_framework_json": _env_to_bool(
                "API_RESPONSE_PREFER_FRAMEWORK_JSON",
                defaults.prefer_framework_json,
                env,
            ),
            "pretty_print": _env_to_bool(
                "API_RESPONSE_PRETTY_PRINT", defaults.pretty_print, env
            ),
        }
        logging_config = {
            "level": env.get("LOG_LEVEL", LogLevel.INFO.value),
            "log_file": env.get("LOG_FILE"),
        }

        try:
            return cls.model_validate(
                {"response": response, "logging": logging_config}
            )
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid configuration in environment",
                details={"errors": exc.errors(include_url=False)},
            ) from exc


# Environment variables that override file values, by config path
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "API_RESPONSE_SUCCESS_STATUS": ("response", "success_status_code"),
    "API_RESPONSE_ERROR_STATUS": ("response", "error_status_code"),
    "API_RESPONSE_CONTENT_TYPE": ("response", "default_content_type"),
    "API_RESPONSE_PREFER_FRAMEWORK_JSON": ("response", "prefer_framework_json"),
    "API_RESPONSE_PRETTY_PRINT": ("response", "pretty_print"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "log_file"),
}


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if isinstance(v, dict) and isinstance(d1.get(k), dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _read_config_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in [".yaml", ".yml"]:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {path}",
            details={"path": str(path), "error": str(exc)},
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping: {path}",
            details={"path": str(path)},
        )
    return file_config


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, a YAML file and the environment.

    Environment variables win over file values, which win over defaults.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Optional environment mapping; defaults to ``os.environ``

    Returns:
        AppConfig instance
    """
    env = os.environ if environ is None else environ
    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found", path=str(config_path))
        else:
            _merge_dicts(config_data, _read_config_file(path))

    env_config = AppConfig.from_env(environ=env).model_dump(mode="json")
    for name, (section, key) in _ENV_OVERRIDES.items():
        if name in env:
            config_data[section][key] = env_config[section][key]

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        logger.error("Invalid configuration", error_count=exc.error_count())
        raise ConfigurationError(
            "Invalid configuration",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
