"""
Logging utilities for the SRFax client.

This module provides utilities for logging, including:
- Redaction of account passwords and fax file content
- A logging filter that strips known passwords from records
- Console/file handler setup driven by LoggingConfig
"""

from __future__ import annotations

import logging
import re
from typing import Any

import structlog

from srfax.core.config.app_config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d %(message)s"

# Default set of fields to redact
DEFAULT_REDACTED_FIELDS = {
    "access_pwd",
    "password",
    "secret",
    "authorization",
}

# Base64 payloads are replaced by a size marker instead of being logged
FILE_CONTENT_PREFIX = "sfilecontent_"


def _stdlib_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.render_to_log_kwargs,
    ]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    The logger always wraps the stdlib logger ``name``, so its events obey
    stdlib levels and handlers whether or not :func:`configure_logging` ran.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        processors=_stdlib_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def redact(value: str, mask: str = "***") -> str:
    """Redact a sensitive value.

    Args:
        value: The value to redact
        mask: The mask to use

    Returns:
        The redacted value
    """
    if not value:
        return value

    # Keep first and last two characters of long values
    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    else:
        return mask


def redact_dict(
    data: dict[str, Any], redacted_fields: set[str] | None = None, mask: str = "***"
) -> dict[str, Any]:
    """Redact sensitive fields in a dictionary.

    Args:
        data: The dictionary to redact
        redacted_fields: The fields to redact
        mask: The mask to use

    Returns:
        The redacted dictionary
    """
    if redacted_fields is None:
        redacted_fields = DEFAULT_REDACTED_FIELDS

    result: dict[str, Any] = {}

    for key, value in data.items():
        lowered = key.lower()
        if lowered in redacted_fields:
            if isinstance(value, str):
                result[key] = redact(value, mask)
            else:
                result[key] = mask
        elif lowered.startswith(FILE_CONTENT_PREFIX) and isinstance(value, str):
            result[key] = f"<{len(value)} base64 chars>"
        elif isinstance(value, dict):
            result[key] = redact_dict(value, redacted_fields, mask)
        elif isinstance(value, list):
            result[key] = [
                (
                    redact_dict(item, redacted_fields, mask)
                    if isinstance(item, dict)
                    else item
                )
                for item in value
            ]
        else:
            result[key] = value

    return result


class PasswordRedactionFilter(logging.Filter):
    """Logging filter that redacts known account passwords from log records.

    Records with arguments are formatted first and the finished message is
    sanitized, so ``%(name)s`` placeholders are never rewritten. Any
    occurrence of the passwords is replaced with a mask.
    """

    def __init__(
        self, passwords: list[str] | set[str] | None = None, mask: str = "***"
    ) -> None:
        super().__init__()
        self.mask = mask
        secrets = {p for p in (passwords or []) if p}
        self.pattern: re.Pattern | None = None
        if secrets:
            # Prefer longer matches when one password contains another
            escaped = sorted((re.escape(p) for p in secrets), key=len, reverse=True)
            self.pattern = re.compile("|".join(escaped))

    def _sanitize(self, text: str) -> str:
        if self.pattern is None:
            return text
        return self.pattern.sub(self.mask, text)

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if self.pattern is None:
            return True

        if record.args:
            try:
                message = record.getMessage()
            except (TypeError, ValueError, KeyError):
                # Format string and args disagree; keep the bare format string
                message = str(record.msg)
            record.msg = self._sanitize(message)
            record.args = ()
        elif isinstance(record.msg, str):
            record.msg = self._sanitize(record.msg)

        for attr in ("message", "exc_text"):
            val = getattr(record, attr, None)
            if isinstance(val, str):
                setattr(record, attr, self._sanitize(val))
        return True


def install_password_redaction_filter(
    passwords: list[str] | set[str] | None, mask: str = "***"
) -> PasswordRedactionFilter:
    """Install the password redaction filter on the root logger and its handlers.

    Safe to call multiple times; every call adds a new filter instance.
    """
    root = logging.getLogger()
    filter_instance = PasswordRedactionFilter(passwords or [], mask=mask)
    root.addFilter(filter_instance)

    # Filters on the root logger do not see records from child loggers
    for handler in list(root.handlers):
        handler.addFilter(filter_instance)
    return filter_instance


def configure_logging(
    config: LoggingConfig | None = None,
    *,
    passwords: list[str] | set[str] | None = None,
    log_format: str | None = None,
) -> None:
    """Configure root logging for applications using the client.

    Args:
        config: Logging configuration; defaults to INFO on the console
        passwords: Passwords to strip from every log record
        log_format: Optional log format string
    """
    config = config or LoggingConfig()
    formatter = logging.Formatter(fmt=log_format or LOG_FORMAT)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, config.level.value),
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    # Route structlog events through the stdlib handlers configured above
    structlog.configure(
        processors=_stdlib_processors(),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if passwords:
        install_password_redaction_filter(passwords)

    # httpx logs every request URL at INFO
    logging.getLogger("httpx").setLevel(
        max(logging.WARNING, getattr(logging, config.level.value))
    )
