"""Request-side models for SRFax operations.

Optional arguments are declared as fields whose aliases are the SRFax POST
variable names; ``to_payload()`` dumps only the fields that were set. Input
checks run at construction time and raise
:class:`~srfax.core.common.exceptions.ValidationError`.
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Any

import pydantic
from pydantic import ConfigDict, Field, model_validator

from srfax import constants
from srfax.core.common.exceptions import ValidationError
from srfax.core.common.utils import is_n_digits, is_valid_datetime
from srfax.core.domain.base import ValueObject


class RequestInput(ValueObject):
    """Base for caller-supplied request input.

    Type errors, unknown keywords and missing fields are reported as
    :class:`ValidationError` like every other rejected input.
    """

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except pydantic.ValidationError as exc:
            fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
            raise ValidationError(
                f"invalid {type(self).__name__}: {', '.join(fields)}",
                details={"errors": [err["msg"] for err in exc.errors()]},
            ) from exc


class RequestOptions(RequestInput):
    """Base for optional request arguments."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _check_choice(name: str, value: str | None, choices: tuple[str, ...]) -> None:
    if value is not None and value not in choices:
        raise ValidationError(
            f"{name} must be omitted or one of {', '.join(choices)}",
            details={name: value},
        )


def _check_period(period: str | None, start_date: str | None, end_date: str | None) -> None:
    _check_choice("period", period, constants.PERIODS)
    if period == constants.PERIOD_RANGE:
        if not is_valid_datetime(
            constants.RANGE_DATE_FORMAT, start_date or "", end_date or ""
        ):
            raise ValidationError(
                "when period is RANGE, start_date and end_date are required; "
                "format must be YYYYMMDD"
            )
    elif start_date is not None or end_date is not None:
        raise ValidationError("start_date and end_date are only used when period is RANGE")


def _check_schedule(queue_fax_date: str | None, queue_fax_time: str | None) -> None:
    if queue_fax_date is not None and not is_valid_datetime(
        constants.QUEUE_DATE_FORMAT, queue_fax_date
    ):
        raise ValidationError("queue_fax_date format must be YYYY-MM-DD")
    if queue_fax_time is not None and not is_valid_datetime(
        constants.QUEUE_TIME_FORMAT, queue_fax_time
    ):
        raise ValidationError("queue_fax_time format must be HH:MM (24 hour)")


def _check_retries(retries: int | None) -> None:
    if retries is not None and not 0 <= retries <= constants.MAX_RETRIES:
        raise ValidationError(f"retries must be between 0 and {constants.MAX_RETRIES}")


class PeriodOptions(RequestOptions):
    """Reporting period shared by inbox, outbox and usage requests."""

    period: str | None = Field(None, alias="sPeriod")
    start_date: str | None = Field(None, alias="sStartDate")
    end_date: str | None = Field(None, alias="sEndDate")
    include_sub_users: str | None = Field(None, alias="sIncludeSubUsers")

    @model_validator(mode="after")
    def _validate_period(self) -> PeriodOptions:
        _check_period(self.period, self.start_date, self.end_date)
        _check_choice("include_sub_users", self.include_sub_users, (constants.YES,))
        return self


class InboxOptions(PeriodOptions):
    viewed_status: str | None = Field(None, alias="sViewedStatus")

    @model_validator(mode="after")
    def _validate_viewed_status(self) -> InboxOptions:
        _check_choice("viewed_status", self.viewed_status, constants.VIEWED_STATUSES)
        return self


class OutboxOptions(PeriodOptions):
    pass


class UsageOptions(PeriodOptions):
    pass


class RetrieveOptions(RequestOptions):
    sub_user_id: int | None = Field(None, alias="sSubUserID")
    fax_format: str | None = Field(None, alias="sFaxFormat")
    mark_as_viewed: str | None = Field(None, alias="sMarkasViewed")

    @model_validator(mode="after")
    def _validate(self) -> RetrieveOptions:
        _check_choice("fax_format", self.fax_format, constants.FAX_FORMATS)
        _check_choice("mark_as_viewed", self.mark_as_viewed, (constants.YES, constants.NO))
        return self


class ForwardOptions(RequestOptions):
    sub_user_id: int | None = Field(None, alias="sSubUserID")
    account_code: str | None = Field(None, alias="sAccountCode")
    retries: int | None = Field(None, alias="sRetries")
    fax_from_header: str | None = Field(None, alias="sFaxFromHeader")
    notify_url: str | None = Field(None, alias="sNotifyURL")
    queue_fax_date: str | None = Field(None, alias="sQueueFaxDate")
    queue_fax_time: str | None = Field(None, alias="sQueueFaxTime")

    @model_validator(mode="after")
    def _validate(self) -> ForwardOptions:
        _check_retries(self.retries)
        _check_schedule(self.queue_fax_date, self.queue_fax_time)
        return self


class QueueFaxOptions(RequestOptions):
    """Optional arguments for Queue_Fax.

    Cover page fields are ignored by SRFax unless ``cover_page`` is set, and
    no cover page is generated when the account default is "Attachments ONLY".
    """

    retries: int | None = Field(None, alias="sRetries")
    response_format: str | None = Field(None, alias="sResponseFormat")
    account_code: str | None = Field(None, alias="sAccountCode")
    fax_from_header: str | None = Field(None, alias="sFaxFromHeader")
    cover_page: str | None = Field(None, alias="sCoverPage")
    cp_from_name: str | None = Field(None, alias="sCPFromName")
    cp_to_name: str | None = Field(None, alias="sCPToName")
    cp_organization: str | None = Field(None, alias="sCPOrganization")
    cp_subject: str | None = Field(None, alias="sCPSubject")
    cp_comments: str | None = Field(None, alias="sCPComments")
    notify_url: str | None = Field(None, alias="sNotifyURL")
    queue_fax_date: str | None = Field(None, alias="sQueueFaxDate")
    queue_fax_time: str | None = Field(None, alias="sQueueFaxTime")

    @model_validator(mode="after")
    def _validate(self) -> QueueFaxOptions:
        _check_retries(self.retries)
        _check_choice("cover_page", self.cover_page, constants.COVER_PAGES)
        _check_schedule(self.queue_fax_date, self.queue_fax_time)
        return self


class FaxConfig(RequestInput):
    """Mandatory sender and recipient arguments for queueing or forwarding."""

    caller_id: int
    sender_email: str
    to_fax_numbers: list[str]
    fax_type: str = constants.SINGLE

    @model_validator(mode="after")
    def _validate(self) -> FaxConfig:
        if not is_n_digits(str(self.caller_id), constants.CALLER_ID_DIGITS):
            raise ValidationError(
                f"caller_id must be {constants.CALLER_ID_DIGITS} digits",
                details={"caller_id": self.caller_id},
            )
        if not self.sender_email:
            raise ValidationError("sender_email cannot be empty")
        if self.fax_type not in constants.FAX_TYPES:
            raise ValidationError(
                f"fax_type must be one of {', '.join(constants.FAX_TYPES)}"
            )
        if not self.to_fax_numbers:
            raise ValidationError("to_fax_numbers must contain at least one number")
        for number in self.to_fax_numbers:
            if not is_n_digits(number, constants.FAX_NUMBER_DIGITS):
                raise ValidationError(
                    f"each fax number must be {constants.FAX_NUMBER_DIGITS} digits",
                    details={"number": number},
                )
        if len(self.to_fax_numbers) > 1 and self.fax_type != constants.BROADCAST:
            raise ValidationError(
                "when supplying several fax numbers the fax_type must be BROADCAST"
            )
        return self

    def to_payload(self) -> dict[str, Any]:
        return {
            "sCallerID": self.caller_id,
            "sSenderEmail": self.sender_email,
            "sFaxType": self.fax_type,
            "sToFaxNumber": "|".join(self.to_fax_numbers),
        }


class QueuedFile(RequestInput):
    """A file to fax. ``content`` must already be base64-encoded."""

    name: str
    content: str

    @classmethod
    def from_path(cls, path: str | Path) -> QueuedFile:
        """Read a file from disk and base64-encode it."""
        p = Path(path)
        return cls(name=p.name, content=base64.b64encode(p.read_bytes()).decode("ascii"))

    def __repr__(self) -> str:
        return f'<QueuedFile name="{self.name}" size={len(self.content)}>'
