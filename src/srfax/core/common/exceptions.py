"""
Common exception classes for the SRFax client.

This module defines the error taxonomy shared by the transport, the envelope
classifier, the structural decoder and the operation layer.
"""

from __future__ import annotations

from typing import Any


class SRFaxError(Exception):
    """Base exception class for all SRFax client errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class MalformedEnvelopeError(SRFaxError):
    """Raised when a response violates the generic {Status, Result} contract."""

    def __init__(
        self,
        message: str = "Malformed response envelope",
        details: dict | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)


class ResultError(SRFaxError):
    """Raised when SRFax explicitly reports a failed operation.

    ``status`` keeps the remote Status value in its original case and ``raw``
    the unformatted Result message.
    """

    def __init__(self, status: str, raw: str, details: dict | None = None):
        super().__init__(f"{status}: {raw}", details)
        self.status = status
        self.raw = raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultError):
            return NotImplemented
        return (self.status, self.raw) == (other.status, other.raw)

    def __hash__(self) -> int:
        return hash((self.status, self.raw))


class DecodeError(SRFaxError):
    """Raised when a Result value cannot be coerced into its declared field type."""

    def __init__(
        self,
        field: str,
        expected: str,
        actual: Any,
        details: dict | None = None,
    ):
        super().__init__(
            f"cannot decode field {field!r}: expected {expected}, "
            f"got {type(actual).__name__} {actual!r}",
            details,
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class ValidationError(SRFaxError):
    """Raised when operation input is rejected before a request is sent."""

    def __init__(
        self, message: str = "Validation failed", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)


class ConfigurationError(SRFaxError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class TransportError(SRFaxError):
    """Raised when the HTTP exchange with SRFax fails."""

    def __init__(
        self,
        message: str = "Transport error",
        details: dict | None = None,
        *,
        status_code: int | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
        self.status_code = status_code
