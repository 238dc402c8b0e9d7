"""Async client for the SRFax fax-over-HTTP API."""

from srfax.client import SRFaxClient
from srfax.core.common.exceptions import (
    ConfigurationError,
    DecodeError,
    MalformedEnvelopeError,
    ResultError,
    SRFaxError,
    TransportError,
    ValidationError,
)
from srfax.core.common.utils import id_from_name
from srfax.core.config.app_config import ClientConfig, LoggingConfig
from srfax.core.domain.options import (
    FaxConfig,
    ForwardOptions,
    InboxOptions,
    OutboxOptions,
    QueuedFile,
    QueueFaxOptions,
    RetrieveOptions,
    UsageOptions,
)

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "FaxConfig",
    "ForwardOptions",
    "InboxOptions",
    "LoggingConfig",
    "MalformedEnvelopeError",
    "OutboxOptions",
    "QueueFaxOptions",
    "QueuedFile",
    "ResultError",
    "RetrieveOptions",
    "SRFaxClient",
    "SRFaxError",
    "TransportError",
    "UsageOptions",
    "ValidationError",
    "id_from_name",
]
