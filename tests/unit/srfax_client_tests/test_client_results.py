"""
Tests that client operations return decoded, typed results.
"""

import base64
import logging

import pytest
from pytest_httpx import HTTPXMock
from srfax.client import SRFaxClient
from srfax.core.domain.options import FaxConfig, QueuedFile
from srfax.core.domain.results import (
    FaxInbox,
    FaxOutbox,
    FaxStatus,
    FaxUsage,
    QueuedFax,
    RetrievedFax,
)

from tests.conftest import success


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_queue_fax_returns_fax_details_id(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(json=success(30294755))

    queued = await srfax_client.queue_fax(
        [QueuedFile(name="a.pdf", content="QUJD")],
        FaxConfig(
            caller_id=4161112222,
            sender_email="email@example.com",
            to_fax_numbers=["14165550000"],
        ),
    )

    assert isinstance(queued, QueuedFax)
    assert queued.result == "30294755"
    assert queued.fax_details_id == 30294755


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_get_fax_inbox_decodes_records(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(
        json=success(
            [
                {
                    "FileName": "20180101230101-8812-34_0|31524120",
                    "ReceiveStatus": "Ok",
                    "EpochTime": "1514847661",
                    "Pages": "2",
                    "Size": 18420,
                    "ViewedStatus": "N",
                }
            ]
        )
    )

    inbox = await srfax_client.get_fax_inbox()

    assert isinstance(inbox, FaxInbox)
    assert inbox.total() == 1
    assert inbox.result[0].pages == 2
    assert inbox.result[0].epoch_time == 1514847661
    assert inbox.all_ids() == [31524120]


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_get_fax_outbox_decodes_records(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(
        json=success(
            [
                {"FileName": "a|1", "SentStatus": "Sent", "Pages": 1, "EpochTime": 1},
                {"FileName": "b|2", "SentStatus": "Failed", "Pages": "0"},
            ]
        )
    )

    outbox = await srfax_client.get_fax_outbox()

    assert isinstance(outbox, FaxOutbox)
    assert [item.sent_status for item in outbox.result] == ["Sent", "Failed"]
    assert outbox.result[0].epoch_time == "1"
    assert outbox.all_ids() == [1, 2]


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_get_fax_status_decodes_single_record(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(
        json=success({"FileName": "a|30294755", "SentStatus": "In Progress", "Pages": "1"})
    )

    status = await srfax_client.get_fax_status(30294755)

    assert isinstance(status, FaxStatus)
    assert status.result is not None
    assert status.result.sent_status == "In Progress"
    assert status.result.pages == 1


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_retrieve_fax_content(srfax_client: SRFaxClient, httpx_mock: HTTPXMock):
    httpx_mock.add_response(json=success(base64.b64encode(b"%PDF-1.4").decode()))

    fax = await srfax_client.retrieve_fax("a|31524120", "IN")

    assert isinstance(fax, RetrievedFax)
    assert fax.content() == b"%PDF-1.4"


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_get_fax_usage_decodes_numbers(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(
        json=success([{"Period": "ALL", "UserID": "925", "NumberOfFaxes": 3}])
    )

    usage = await srfax_client.get_fax_usage()

    assert isinstance(usage, FaxUsage)
    assert usage.result[0].user_id == 925
    assert usage.result[0].number_of_faxes == 3


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_simple_operations_return_result_message(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(json=success("Fax Cancelled"))

    stopped = await srfax_client.stop_fax(30294755)

    assert stopped.status == "Success"
    assert stopped.result == "Fax Cancelled"


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_lowercase_success_is_accepted(
    srfax_client: SRFaxClient, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(json={"Status": "success", "Result": ""})

    deleted = await srfax_client.delete_fax([31524120], "IN")

    assert deleted.status == "success"


@pytest.mark.asyncio
@pytest.mark.httpx_mock()
async def test_undocumented_keys_are_logged(
    srfax_client: SRFaxClient,
    httpx_mock: HTTPXMock,
    caplog: pytest.LogCaptureFixture,
):
    httpx_mock.add_response(
        json={"Status": "Success", "Result": [{"FileName": "a|1", "Unexpected": 1}]}
    )

    with caplog.at_level(logging.DEBUG, logger="srfax.client"):
        await srfax_client.get_fax_inbox()

    assert "Result[0].Unexpected" in caplog.text
