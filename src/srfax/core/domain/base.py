from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from srfax.core.interfaces.model_bases import DomainModel


class ValueObject(DomainModel):
    """Base class for value objects.

    Value objects are immutable and compared by their values,
    not their identities.
    """

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert this value object to a dictionary."""
        return self.model_dump()


class ResultModel(ValueObject):
    """Destination shape for a decoded SRFax record.

    Field aliases carry the wire keys (``"EpochTime"``, ``"User_ID"``) and
    every field must have a default so that conditionally present keys can be
    left out of a response.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Dump the record back using SRFax key names."""
        return self.model_dump(by_alias=True)
