"""
Tests for classifying SRFax response envelopes.
"""

from typing import Any

import pytest
from srfax.core.common.exceptions import MalformedEnvelopeError, ResultError
from srfax.core.domain.envelope import check_status, classify_envelope


@pytest.mark.parametrize(
    "envelope",
    [
        {"Status": "Success", "Result": ""},
        {"Status": "success", "Result": "123"},
        {"Status": "SUCCESS", "Result": [{"FileName": "a|1"}]},
        {"Status": "Success", "Result": {"FileName": "a|1"}},
        {"Status": "sUcCeSs"},
        {"Status": "Success", "Result": None},
    ],
)
def test_success_in_any_case_proceeds(envelope: dict[str, Any]) -> None:
    assert classify_envelope(envelope) is None
    check_status(envelope)


def test_failed_envelope_yields_result_error() -> None:
    error = classify_envelope({"Status": "Failed", "Result": "Invalid Fax Type / "})

    assert isinstance(error, ResultError)
    assert error.status == "Failed"
    assert error.raw == "Invalid Fax Type / "
    assert str(error) == "Failed: Invalid Fax Type / "


def test_failure_keeps_original_status_case() -> None:
    error = classify_envelope({"Status": "FAILED", "Result": "nope"})

    assert error == ResultError(status="FAILED", raw="nope")


def test_empty_status_string_is_a_remote_failure() -> None:
    error = classify_envelope({"Status": "", "Result": ""})

    assert error == ResultError(status="", raw="")


def test_empty_envelope_is_malformed() -> None:
    error = classify_envelope({})

    assert isinstance(error, MalformedEnvelopeError)
    assert error.message == "missing Status key"


@pytest.mark.parametrize(
    ("status", "type_name"),
    [(123, "int"), (None, "NoneType"), (["Success"], "list"), (True, "bool")],
)
def test_non_string_status_is_malformed(status: Any, type_name: str) -> None:
    error = classify_envelope({"Status": status, "Result": "Success"})

    assert isinstance(error, MalformedEnvelopeError)
    assert not isinstance(error, ResultError)
    assert error.message == f"Status not a string, got {type_name}"


@pytest.mark.parametrize(
    "envelope",
    [
        {"Status": "Failed"},
        {"Status": "Failed", "Result": 123},
        {"Status": "Failed", "Result": []},
        {"Status": "", "Result": 123},
    ],
)
def test_failure_without_string_result_is_malformed(envelope: dict[str, Any]) -> None:
    error = classify_envelope(envelope)

    assert isinstance(error, MalformedEnvelopeError)
    assert error.message == "Result missing or not a string"


def test_missing_status_with_result_is_malformed() -> None:
    error = classify_envelope({"Result": []})

    assert isinstance(error, MalformedEnvelopeError)


def test_check_status_raises_classification() -> None:
    with pytest.raises(ResultError) as exc_info:
        check_status({"Status": "Failed", "Result": "Invalid CallerID provided / "})
    assert exc_info.value.raw == "Invalid CallerID provided / "

    with pytest.raises(MalformedEnvelopeError):
        check_status({})


def test_classifier_does_not_mutate_envelope() -> None:
    envelope = {"Status": "Failed", "Result": "x"}
    snapshot = dict(envelope)

    classify_envelope(envelope)

    assert envelope == snapshot
