from srfax.core.common.exceptions import (
    ConfigurationError,
    DecodeError,
    MalformedEnvelopeError,
    ResultError,
    SRFaxError,
    TransportError,
    ValidationError,
)


def test_all_errors_share_base() -> None:
    for error in (
        MalformedEnvelopeError(),
        ResultError("Failed", "x"),
        DecodeError("Pages", "integer", "many"),
        ValidationError(),
        ConfigurationError(),
        TransportError(),
    ):
        assert isinstance(error, SRFaxError)


def test_validation_error_is_not_value_error() -> None:
    assert not isinstance(ValidationError(), ValueError)


def test_base_error_to_dict_includes_extra_attributes() -> None:
    error = SRFaxError("boom", details={"a": 1}, code="E1")

    assert error.to_dict() == {
        "error": {
            "message": "boom",
            "type": "SRFaxError",
            "details": {"a": 1},
            "code": "E1",
        }
    }


def test_result_error_message_and_equality() -> None:
    error = ResultError("Failed", "Invalid Access Code")

    assert str(error) == "Failed: Invalid Access Code"
    assert error == ResultError("Failed", "Invalid Access Code")
    assert error != ResultError("failed", "Invalid Access Code")
    assert len({error, ResultError("Failed", "Invalid Access Code")}) == 1


def test_decode_error_message() -> None:
    error = DecodeError("Result[0].Pages", "integer", "many")

    assert error.field == "Result[0].Pages"
    assert error.expected == "integer"
    assert error.actual == "many"
    assert str(error) == (
        "cannot decode field 'Result[0].Pages': expected integer, got str 'many'"
    )


def test_transport_error_keeps_status_code() -> None:
    error = TransportError("unexpected status: 502 Bad Gateway", status_code=502)

    assert error.status_code == 502
    assert error.to_dict()["error"]["status_code"] == 502
