"""Envelope classification for SRFax responses.

Every SRFax operation answers with a ``{"Status": ..., "Result": ...}``
object. On success ``Result`` holds operation-specific data; on failure it is
a single descriptive string. Classification looks at ``Status`` only and
reads ``Result`` just to extract failure text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from srfax.core.common.exceptions import (
    MalformedEnvelopeError,
    ResultError,
    SRFaxError,
)

STATUS_KEY = "Status"
RESULT_KEY = "Result"
SUCCESS = "success"


def is_success(status: str) -> bool:
    """SRFax is inconsistent about casing, so compare case-insensitively."""
    return status.lower() == SUCCESS


def classify_envelope(envelope: Mapping[str, Any]) -> SRFaxError | None:
    """Classify a parsed response without raising.

    Returns:
        None when the call succeeded, a ResultError for a well-formed remote
        failure, or a MalformedEnvelopeError when the envelope itself is broken.
    """
    if STATUS_KEY not in envelope:
        return MalformedEnvelopeError("missing Status key")

    status = envelope[STATUS_KEY]
    if not isinstance(status, str):
        return MalformedEnvelopeError(
            f"Status not a string, got {type(status).__name__}"
        )

    if is_success(status):
        return None

    result = envelope.get(RESULT_KEY)
    if not isinstance(result, str):
        return MalformedEnvelopeError(
            "Result missing or not a string", details={"status": status}
        )

    return ResultError(status=status, raw=result)


def check_status(envelope: Mapping[str, Any]) -> None:
    """Raise the classification error of ``envelope``, if any."""
    error = classify_envelope(envelope)
    if error is not None:
        raise error
