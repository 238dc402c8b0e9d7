from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import pydantic
from pydantic import Field, field_validator

from srfax.constants import DEFAULT_TIMEOUT, DEFAULT_URL
from srfax.core.common.exceptions import ConfigurationError
from srfax.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


def _to_int(value: str, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _to_float(value: str, fallback: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


def _env_to_bool(name: str, default: bool, env: Mapping[str, str]) -> bool:
    """Return an environment variable parsed as a boolean flag."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    default: Any,
    *,
    transform: Callable[[str], Any] | None = None,
) -> Any:
    """Return an environment variable value, transformed when present."""
    if name in env:
        raw_value = env[name]
        return transform(raw_value) if transform is not None else raw_value
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
    # Log redacted request payloads / response envelopes at DEBUG
    request_logging: bool = False
    response_logging: bool = False


class ClientConfig(DomainModel):
    """Credentials and transport settings for an SRFax account."""

    access_id: int
    access_pwd: str
    url: str = DEFAULT_URL
    timeout: float = DEFAULT_TIMEOUT
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("access_id")
    @classmethod
    def validate_access_id(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must specify access id (the account's user number)")
        return v

    @field_validator("access_pwd")
    @classmethod
    def validate_access_pwd(cls, v: str) -> str:
        if not v:
            raise ValueError("must specify access pwd (the account's password)")
        return v

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    def __repr__(self) -> str:
        return f'<ClientConfig access_id="{self.access_id}" url="{self.url}">'

    @classmethod
    def create(cls, **data: Any) -> ClientConfig:
        """Build a config, reporting invalid values as ConfigurationError."""
        try:
            return cls(**data)
        except pydantic.ValidationError as exc:
            fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
            raise ConfigurationError(
                f"invalid SRFax configuration: {', '.join(fields)}",
                details={"errors": [err["msg"] for err in exc.errors()]},
            ) from exc

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Create ClientConfig from environment variables.

        Reads SRFAX_ACCESS_ID, SRFAX_ACCESS_PWD, SRFAX_URL, SRFAX_TIMEOUT,
        SRFAX_LOG_LEVEL, SRFAX_LOG_FILE, SRFAX_REQUEST_LOGGING and
        SRFAX_RESPONSE_LOGGING.

        Returns:
            ClientConfig instance
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ

        level = _get_env_value(env, "SRFAX_LOG_LEVEL", LogLevel.INFO.value)
        if level.upper() not in LogLevel.__members__:
            logger.warning("Ignoring unknown SRFAX_LOG_LEVEL %r", level)
            level = LogLevel.INFO.value

        config: dict[str, Any] = {
            "access_id": _get_env_value(
                env, "SRFAX_ACCESS_ID", 0, transform=lambda value: _to_int(value, 0)
            ),
            "access_pwd": _get_env_value(env, "SRFAX_ACCESS_PWD", ""),
            "url": _get_env_value(env, "SRFAX_URL", DEFAULT_URL) or DEFAULT_URL,
            "timeout": _get_env_value(
                env,
                "SRFAX_TIMEOUT",
                DEFAULT_TIMEOUT,
                transform=lambda value: _to_float(value, DEFAULT_TIMEOUT),
            ),
            "logging": {
                "level": level.upper(),
                "log_file": _get_env_value(env, "SRFAX_LOG_FILE", None),
                "request_logging": _env_to_bool("SRFAX_REQUEST_LOGGING", False, env),
                "response_logging": _env_to_bool(
                    "SRFAX_RESPONSE_LOGGING", False, env
                ),
            },
        }
        return cls.create(**config)
