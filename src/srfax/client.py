"""SRFax API client.

Every operation follows the same pipeline: validate input, build the POST
payload, send it, classify the response envelope and, on success, decode it
into the operation's result model.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from types import TracebackType
from typing import Any, TypeVar

import httpx

from srfax import constants
from srfax.core.common.exceptions import ValidationError
from srfax.core.config.app_config import ClientConfig
from srfax.core.domain.base import ResultModel
from srfax.core.domain.decoding import decode_envelope
from srfax.core.domain.envelope import check_status
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
from srfax.core.domain.results import (
    DeletedFax,
    FaxInbox,
    FaxOutbox,
    FaxStatus,
    FaxUsage,
    ForwardedFax,
    MultiFaxStatus,
    QueuedFax,
    RetrievedFax,
    StoppedFax,
    ViewedStatusUpdate,
)
from srfax.core.transport.http_transport import HttpTransport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ResultModel)


def _check_direction(direction: str) -> None:
    if direction not in constants.DIRECTIONS:
        raise ValidationError(
            'direction must be one of either "IN" or "OUT"',
            details={"direction": direction},
        )


def _check_positive_id(fax_id: int) -> None:
    if fax_id <= 0:
        raise ValidationError(
            "id (sFaxDetailsID) cannot be zero or negative",
            details={"id": fax_id},
        )


def _identify(ident: str | int) -> dict[str, Any]:
    """Map a fax file name or details id onto the matching POST variable.

    Names contain a pipe (``"20180101230101-8812-34_0|31524120"``); anything
    else must be a numeric sFaxDetailsID.
    """
    text = str(ident)
    if "|" in text:
        return {"sFaxFileName": text}
    try:
        return {"sFaxDetailsID": int(text)}
    except ValueError:
        raise ValidationError(
            f"identifier {text!r} is neither a fax file name nor a numeric id",
            details={"ident": text},
        ) from None


class SRFaxClient:
    """Async client for the SRFax web service.

    The client either owns an ``httpx.AsyncClient`` (use it as an async
    context manager or call :meth:`aclose`) or borrows one from the caller.
    It keeps no per-call state, so one instance may serve concurrent tasks.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient()
        self.transport = HttpTransport(
            self.client,
            url=config.url,
            timeout=config.timeout,
            request_logging=config.logging.request_logging,
            response_logging=config.logging.response_logging,
        )

    async def __aenter__(self) -> SRFaxClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def _base_payload(self, action: str) -> dict[str, Any]:
        return {
            "action": action,
            "access_id": self.config.access_id,
            "access_pwd": self.config.access_pwd,
        }

    async def _run(self, payload: dict[str, Any], model: type[R]) -> R:
        """Send a payload, classify the envelope and decode the result."""
        action = payload["action"]
        logger.info("SRFax %s", action)

        envelope = await self.transport.post(payload)
        check_status(envelope)

        decoded = decode_envelope(envelope, model)
        if decoded.unused_keys:
            logger.debug(
                "SRFax %s returned undocumented keys: %s",
                action,
                ", ".join(decoded.unused_keys),
            )
        return decoded.value

    async def queue_fax(
        self,
        files: Sequence[QueuedFile],
        fax: FaxConfig,
        options: QueueFaxOptions | None = None,
    ) -> QueuedFax:
        """Add a fax to the queue of items to send.

        ``files`` may be empty when a cover page is requested through the
        options; SRFax otherwise answers "No Files to Fax".
        """
        payload = self._base_payload(constants.ACTION_QUEUE_FAX)
        payload.update(fax.to_payload())
        if options is not None:
            payload.update(options.to_payload())

        for index, queued in enumerate(files):
            if not queued.name or not queued.content:
                logger.warning("Skipping empty file, check name or content: %r", queued)
                continue
            payload[f"sFileName_{index}"] = queued.name
            payload[f"sFileContent_{index}"] = queued.content

        return await self._run(payload, QueuedFax)

    async def get_fax_status(self, fax_id: int) -> FaxStatus:
        """Retrieve the status of a single sent fax (outbound only)."""
        _check_positive_id(fax_id)
        payload = self._base_payload(constants.ACTION_GET_FAX_STATUS)
        payload["sFaxDetailsID"] = fax_id
        return await self._run(payload, FaxStatus)

    async def get_multi_fax_status(self, fax_ids: Iterable[int | str]) -> MultiFaxStatus:
        """Retrieve the status of several sent faxes (outbound only)."""
        ids = [str(i) for i in fax_ids]
        if not ids:
            raise ValidationError("must supply one or more fax details ids")
        payload = self._base_payload(constants.ACTION_GET_MULTI_FAX_STATUS)
        payload["sFaxDetailsID"] = "|".join(ids)
        return await self._run(payload, MultiFaxStatus)

    async def get_fax_inbox(self, options: InboxOptions | None = None) -> FaxInbox:
        """List faxes received for a period (all time by default)."""
        payload = self._base_payload(constants.ACTION_GET_FAX_INBOX)
        if options is not None:
            payload.update(options.to_payload())
        return await self._run(payload, FaxInbox)

    async def get_fax_outbox(self, options: OutboxOptions | None = None) -> FaxOutbox:
        """List faxes sent for a period (all time by default)."""
        payload = self._base_payload(constants.ACTION_GET_FAX_OUTBOX)
        if options is not None:
            payload.update(options.to_payload())
        return await self._run(payload, FaxOutbox)

    async def forward_fax(
        self,
        ident: str | int,
        direction: str,
        fax: FaxConfig,
        options: ForwardOptions | None = None,
    ) -> ForwardedFax:
        """Forward a received or sent fax to other fax numbers.

        ``ident`` is the sFaxDetailsID or sFaxFileName from the inbox/outbox.
        """
        _check_direction(direction)
        payload = self._base_payload(constants.ACTION_FORWARD_FAX)
        payload.update(_identify(ident))
        payload["sDirection"] = direction
        payload.update(fax.to_payload())
        if options is not None:
            payload.update(options.to_payload())
        return await self._run(payload, ForwardedFax)

    async def retrieve_fax(
        self,
        ident: str | int,
        direction: str,
        options: RetrieveOptions | None = None,
    ) -> RetrievedFax:
        """Fetch a sent or received fax file (PDF or TIFF).

        The file format defaults to the account setting when no ``fax_format``
        option is given. Use :meth:`RetrievedFax.content` for the bytes.
        """
        _check_direction(direction)
        payload = self._base_payload(constants.ACTION_RETRIEVE_FAX)
        payload.update(_identify(ident))
        payload["sDirection"] = direction
        if options is not None:
            payload.update(options.to_payload())
        return await self._run(payload, RetrievedFax)

    async def update_viewed_status(
        self, ident: str | int, direction: str, viewed: str
    ) -> ViewedStatusUpdate:
        """Mark a fax as read (``"Y"``) or unread (``"N"``).

        A file name must be passed whole, including the pipe and id.
        """
        _check_direction(direction)
        if viewed not in (constants.YES, constants.NO):
            raise ValidationError(
                'viewed must be "Y" (read) or "N" (unread)', details={"viewed": viewed}
            )
        payload = self._base_payload(constants.ACTION_UPDATE_VIEWED_STATUS)
        payload.update(_identify(ident))
        payload["sDirection"] = direction
        payload["sMarkasViewed"] = viewed
        return await self._run(payload, ViewedStatusUpdate)

    async def delete_fax(
        self, idents: Sequence[str | int], direction: str
    ) -> DeletedFax:
        """Delete one or more received or sent faxes.

        SRFax reports Success even for unknown ids, so a successful result
        does not prove that anything was deleted.
        """
        _check_direction(direction)
        if not idents:
            raise ValidationError(
                "must supply one or more fax file names or ids when deleting faxes"
            )
        payload = self._base_payload(constants.ACTION_DELETE_FAX)
        payload["sDirection"] = direction
        for index, ident in enumerate(idents):
            text = str(ident)
            if "|" in text:
                payload[f"sFaxFileName_{index}"] = text
            else:
                payload[f"sFaxDetailsID_{index}"] = text
        return await self._run(payload, DeletedFax)

    async def stop_fax(self, fax_id: int) -> StoppedFax:
        """Stop a queued fax that has not been processed yet."""
        _check_positive_id(fax_id)
        payload = self._base_payload(constants.ACTION_STOP_FAX)
        payload["sFaxDetailsID"] = fax_id
        return await self._run(payload, StoppedFax)

    async def get_fax_usage(self, options: UsageOptions | None = None) -> FaxUsage:
        """Report usage for the account over a period."""
        payload = self._base_payload(constants.ACTION_GET_FAX_USAGE)
        if options is not None:
            payload.update(options.to_payload())
        return await self._run(payload, FaxUsage)

    async def check_auth(self) -> bool:
        """Check that the configured credentials are accepted.

        Raises:
            ResultError: when SRFax rejects the credentials.
        """
        await self.get_fax_usage()
        return True
