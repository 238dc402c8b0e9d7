import pytest
from srfax.core.common.exceptions import ValidationError
from srfax.core.common.utils import id_from_name, is_n_digits, is_valid_datetime


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("20180101230101-8812-34_0|31524120", 31524120),
        ("|31524120", 31524120),
        ("20180101230101", 20180101230101),
        ("20180101230101-8812-34_0|31524120|9999", 9999),
    ],
)
def test_id_from_name(name: str, expected: int) -> None:
    assert id_from_name(name) == expected


@pytest.mark.parametrize(
    "name",
    [
        "20180101230101-8812-34_0|31524120|2222|",
        "31524120|",
        "|",
        "20180101230101-|",
        "",
        "report.pdf",
    ],
)
def test_id_from_name_rejects_names_without_trailing_id(name: str) -> None:
    with pytest.raises(ValidationError, match="could not get ID from filename"):
        id_from_name(name)


@pytest.mark.parametrize(
    ("layout", "values", "expected"),
    [
        ("%Y-%m-%d", ["1987-02-20"], True),
        ("%Y%m%d", ["19870220"], True),
        ("%H:%M", ["10:20"], True),
        ("%Y-%m-%d", ["1987-02-20", "2017-01-15"], True),
        ("%Y-%m-%d", [], False),
        ("%Y%m%d", ["198702-20"], False),
        ("%H:%M", ["25:00"], False),
    ],
)
def test_is_valid_datetime(layout: str, values: list[str], expected: bool) -> None:
    assert is_valid_datetime(layout, *values) is expected


@pytest.mark.parametrize(
    ("value", "length", "expected"),
    [
        ("4161112222", 10, True),
        ("416111222", 10, False),
        ("416111222a", 10, False),
        ("", 0, False),
    ],
)
def test_is_n_digits(value: str, length: int, expected: bool) -> None:
    assert is_n_digits(value, length) is expected


def test_id_from_name_rejects_id_past_conversion_limit() -> None:
    with pytest.raises(ValidationError, match="could not get ID from filename"):
        id_from_name("20180101230101-8812-34_0|" + "9" * 5000)
