from __future__ import annotations

import re
from datetime import datetime

from srfax.core.common.exceptions import ValidationError

_INTEGER_RE = re.compile(r"[+-]?\d+")


def id_from_name(name: str) -> int:
    """
    Extracts the fax details ID from an SRFax file name.

    File names look like ``"20180101230101-8812-34_0|31524120"`` where the ID
    follows the last pipe. A name without a pipe is parsed whole.

    Args:
        name: The SRFax file name.

    Returns:
        The fax details ID.

    Raises:
        ValidationError: If the text after the last pipe is not an integer.
    """
    tail = name.rsplit("|", 1)[-1]
    error = ValidationError(
        f"could not get ID from filename {name[:64]!r}", details={"name": name[:64]}
    )
    if not _INTEGER_RE.fullmatch(tail):
        raise error
    try:
        return int(tail)
    except ValueError as e:
        # Past the interpreter's int string conversion limit
        raise error from e


def is_valid_datetime(layout: str, *values: str) -> bool:
    """Return True if every value parses with ``layout``; False for no values."""
    if not values:
        return False
    for value in values:
        try:
            datetime.strptime(value, layout)
        except (TypeError, ValueError):
            return False
    return True


def is_n_digits(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isdigit()
