"""HTTP transport for the SRFax web service.

Sends one JSON-encoded operation per POST and hands back the parsed body as
an untyped mapping. Classification and decoding happen above this layer.
"""

from __future__ import annotations

from typing import Any

import httpx

from srfax.constants import DEFAULT_TIMEOUT, DEFAULT_URL
from srfax.core.common.exceptions import MalformedEnvelopeError, TransportError
from srfax.core.common.logging_utils import get_logger, redact_dict

logger = get_logger(__name__)


class HttpTransport:
    """POSTs JSON payloads to a fixed SRFax endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = DEFAULT_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        request_logging: bool = False,
        response_logging: bool = False,
    ) -> None:
        self.client = client
        self.url = url
        self.timeout = timeout
        self.request_logging = request_logging
        self.response_logging = response_logging

    async def post(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Send ``payload`` and return the decoded JSON object.

        Raises:
            TransportError: on network failure or a non-200 HTTP status.
            MalformedEnvelopeError: when the body is not a JSON object.
        """
        if self.request_logging:
            logger.debug("SRFax request: %s", redact_dict(payload))

        try:
            response = await self.client.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            raise TransportError(
                message=f"Could not connect to SRFax ({e})",
                details={"url": self.url},
            ) from e

        if response.status_code != httpx.codes.OK:
            raise TransportError(
                message=f"unexpected status: {response.status_code} {response.reason_phrase}",
                details={"url": self.url, "body": response.text[:500]},
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and oversized integers
            raise MalformedEnvelopeError(
                f"failed decoding response body ({e})",
                details={"body": response.text[:500]},
            ) from e

        if not isinstance(body, dict):
            raise MalformedEnvelopeError(
                f"response body is not a JSON object, got {type(body).__name__}"
            )

        if self.response_logging:
            logger.debug("SRFax response: %s", _summarize(body))

        return body


def _summarize(body: dict[str, Any]) -> dict[str, Any]:
    """Shorten long string Results (base64 fax content) for logging."""
    result = body.get("Result")
    if isinstance(result, str) and len(result) > 200:
        return {**body, "Result": f"<{len(result)} chars>"}
    return body
