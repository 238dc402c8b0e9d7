"""Typed results for SRFax operations.

Each model describes one operation's response envelope. Field aliases are the
SRFax wire keys; the structural decoder uses them (and the declared Python
types) as the decode descriptor. Types follow what the service actually
sends rather than its documentation, e.g. ``RemoteID`` is text and
``Get_MultiFaxStatus`` reports every numeric field as text because it sends
empty strings for failed faxes.
"""

from __future__ import annotations

import base64
import binascii

from pydantic import Field

from srfax.core.common.exceptions import DecodeError, ValidationError
from srfax.core.common.utils import id_from_name
from srfax.core.domain.base import ResultModel
from srfax.core.domain.envelope import is_success


class OperationResult(ResultModel):
    """Envelope whose Result is a plain message or identifier."""

    status: str = Field("", alias="Status")
    result: str = Field("", alias="Result")


class QueuedFax(OperationResult):
    """Result of Queue_Fax; Result holds the new FaxDetailsID."""

    @property
    def fax_details_id(self) -> int:
        return id_from_name(self.result)


class ForwardedFax(OperationResult):
    """Result of Forward_Fax; Result holds the FaxDetailsID of the new fax."""

    @property
    def fax_details_id(self) -> int:
        return id_from_name(self.result)


class StoppedFax(OperationResult):
    pass


class DeletedFax(OperationResult):
    pass


class ViewedStatusUpdate(OperationResult):
    pass


class RetrievedFax(OperationResult):
    """Result of Retrieve_Fax; Result holds the base64-encoded file."""

    def content(self) -> bytes:
        """Decode the fax file (PDF or TIFF) carried in Result."""
        if not is_success(self.status):
            raise ValidationError(f"cannot decode content of a [{self.status}] result")
        try:
            return base64.b64decode(self.result, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError("Result", "base64 content", self.result[:64]) from e


class FaxStatusRecord(ResultModel):
    file_name: str = Field("", alias="FileName")
    sent_status: str = Field("", alias="SentStatus")
    date_queued: str = Field("", alias="DateQueued")
    date_sent: str = Field("", alias="DateSent")
    epoch_time: str = Field("", alias="EpochTime")
    to_fax_number: str = Field("", alias="ToFaxNumber")
    pages: int = Field(0, alias="Pages")
    duration: int = Field(0, alias="Duration")
    remote_id: str = Field("", alias="RemoteID")
    error_code: str = Field("", alias="ErrorCode")
    size: int = Field(0, alias="Size")
    account_code: str = Field("", alias="AccountCode")


class FaxStatus(ResultModel):
    """Status of a single outbound fax."""

    status: str = Field("", alias="Status")
    result: FaxStatusRecord | None = Field(None, alias="Result")


class MultiFaxStatusRecord(ResultModel):
    file_name: str = Field("", alias="FileName")
    sent_status: str = Field("", alias="SentStatus")
    date_queued: str = Field("", alias="DateQueued")
    date_sent: str = Field("", alias="DateSent")
    epoch_time: str = Field("", alias="EpochTime")
    to_fax_number: str = Field("", alias="ToFaxNumber")
    pages: str = Field("", alias="Pages")
    duration: str = Field("", alias="Duration")
    remote_id: str = Field("", alias="RemoteID")
    error_code: str = Field("", alias="ErrorCode")
    size: str = Field("", alias="Size")
    account_code: str = Field("", alias="AccountCode")


class MultiFaxStatus(ResultModel):
    """Status of several outbound faxes."""

    status: str = Field("", alias="Status")
    result: list[MultiFaxStatusRecord] = Field(default_factory=list, alias="Result")


class FaxInboxItem(ResultModel):
    file_name: str = Field("", alias="FileName")
    receive_status: str = Field("", alias="ReceiveStatus")
    date: str = Field("", alias="Date")
    epoch_time: int = Field(0, alias="EpochTime")
    caller_id: str = Field("", alias="CallerID")
    remote_id: str = Field("", alias="RemoteID")
    pages: int = Field(0, alias="Pages")
    size: int = Field(0, alias="Size")
    viewed_status: str = Field("", alias="ViewedStatus")
    # Only present when sub users were included in the request
    user_id: str | None = Field(None, alias="User_ID")
    user_fax_number: str | None = Field(None, alias="User_FaxNumber")


class FaxInbox(ResultModel):
    """Faxes received over a period."""

    status: str = Field("", alias="Status")
    result: list[FaxInboxItem] = Field(default_factory=list, alias="Result")

    def total(self) -> int:
        return len(self.result)

    def all_ids(self) -> list[int]:
        """Return the FaxDetailsID of every inbox item."""
        return [id_from_name(item.file_name) for item in self.result]


class FaxOutboxItem(ResultModel):
    file_name: str = Field("", alias="FileName")
    sent_status: str = Field("", alias="SentStatus")
    date_queued: str = Field("", alias="DateQueued")
    date_sent: str = Field("", alias="DateSent")
    epoch_time: str = Field("", alias="EpochTime")
    to_fax_number: str = Field("", alias="ToFaxNumber")
    pages: int = Field(0, alias="Pages")
    duration: int = Field(0, alias="Duration")
    remote_id: str = Field("", alias="RemoteID")
    error_code: str = Field("", alias="ErrorCode")
    size: int = Field(0, alias="Size")
    account_code: str = Field("", alias="AccountCode")
    subject: str = Field("", alias="Subject")
    user_id: str | None = Field(None, alias="User_ID")
    user_fax_number: str | None = Field(None, alias="User_FaxNumber")


class FaxOutbox(ResultModel):
    """Faxes sent over a period."""

    status: str = Field("", alias="Status")
    result: list[FaxOutboxItem] = Field(default_factory=list, alias="Result")

    def total(self) -> int:
        return len(self.result)

    def all_ids(self) -> list[int]:
        return [id_from_name(item.file_name) for item in self.result]


class FaxUsageRecord(ResultModel):
    period: str = Field("", alias="Period")
    client_name: str = Field("", alias="ClientName")
    billing_number: str = Field("", alias="BillingNumber")
    user_id: int = Field(0, alias="UserID")
    sub_user_id: int = Field(0, alias="SubUserID")
    number_of_faxes: int = Field(0, alias="NumberOfFaxes")
    number_of_pages: int = Field(0, alias="NumberOfPages")


class FaxUsage(ResultModel):
    """Usage report for an account and, optionally, its sub users."""

    status: str = Field("", alias="Status")
    result: list[FaxUsageRecord] = Field(default_factory=list, alias="Result")
