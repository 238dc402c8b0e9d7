"""Structural decoding of SRFax responses into typed result models.

SRFax is not consistent about the JSON type of a field: ``Pages`` may arrive
as ``3`` from one operation and ``"3"`` from another, and ``EpochTime`` has
switched representation over time. Instead of special-casing fields, every
destination field is declared with a :class:`FieldKind` and values are run
through a small coercion table keyed by that kind.

The descriptor for a result model is a :class:`RecordSpec`, an explicit table
of :class:`FieldSpec` entries built once from the model's declared fields.
"""

from __future__ import annotations

import logging
import re
import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Generic, TypeVar, Union, get_args, get_origin

import pydantic

from srfax.core.common.exceptions import DecodeError
from srfax.core.domain.base import ResultModel
from srfax.core.interfaces.model_bases import InternalDTO

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ResultModel)

_INTEGER_RE = re.compile(r"[+-]?\d+")


class FieldKind(str, Enum):
    """Semantic type of a destination field."""

    STRING = "string"
    INTEGER = "integer"
    RECORD = "record"
    RECORDS = "list of records"


@dataclass(frozen=True)
class FieldSpec(InternalDTO):
    """One destination field: model attribute, wire key and declared kind."""

    name: str
    wire_key: str
    kind: FieldKind
    record: type[ResultModel] | None = None


@dataclass(frozen=True)
class RecordSpec(InternalDTO):
    """Field table for one result model."""

    model: type[ResultModel]
    fields: tuple[FieldSpec, ...]

    def lookup(self, source: Mapping[str, Any]) -> dict[str, FieldSpec]:
        """Map source keys to fields.

        Exact wire-key matches win; otherwise keys are matched ignoring case.
        """
        by_key = {f.wire_key: f for f in self.fields}
        by_lower = {f.wire_key.lower(): f for f in self.fields}
        matched: dict[str, FieldSpec] = {}
        claimed: set[str] = set()
        for key in source:
            if key in by_key:
                matched[key] = by_key[key]
                claimed.add(key)
        for key in source:
            if key in matched or not isinstance(key, str):
                continue
            spec = by_lower.get(key.lower())
            if spec is not None and spec.wire_key not in claimed:
                matched[key] = spec
                claimed.add(spec.wire_key)
        return matched


@dataclass(frozen=True)
class Decoded(InternalDTO, Generic[T]):
    """A decoded result plus the source keys that had no destination field."""

    value: T
    unused_keys: tuple[str, ...] = ()


def _unwrap_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_result_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, ResultModel)


def _field_spec(name: str, info: Any, owner: type[ResultModel]) -> FieldSpec:
    annotation = _unwrap_optional(info.annotation)
    wire_key = info.alias or name

    if annotation is str:
        return FieldSpec(name, wire_key, FieldKind.STRING)
    if annotation is int:
        return FieldSpec(name, wire_key, FieldKind.INTEGER)
    if _is_result_model(annotation):
        return FieldSpec(name, wire_key, FieldKind.RECORD, annotation)
    if get_origin(annotation) is list:
        (item,) = get_args(annotation) or (None,)
        if _is_result_model(item):
            return FieldSpec(name, wire_key, FieldKind.RECORDS, item)

    raise TypeError(
        f"{owner.__name__}.{name}: unsupported field type {info.annotation!r}"
    )


@lru_cache(maxsize=None)
def record_spec(model: type[ResultModel]) -> RecordSpec:
    """Build (and cache) the field table of ``model``."""
    fields = tuple(
        _field_spec(name, info, model) for name, info in model.model_fields.items()
    )
    return RecordSpec(model=model, fields=fields)


# --- coercion table ---------------------------------------------------------

Coercer = Callable[[Any, FieldSpec, str, list[str]], Any]


def _to_string(value: Any, field: FieldSpec, path: str, unused: list[str]) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    raise DecodeError(path, FieldKind.STRING.value, value)


def _to_integer(value: Any, field: FieldSpec, path: str, unused: list[str]) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise DecodeError(path, FieldKind.INTEGER.value, value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if _INTEGER_RE.fullmatch(text):
            try:
                return int(text)
            except ValueError as e:
                # Past the interpreter's int string conversion limit
                raise DecodeError(path, FieldKind.INTEGER.value, value) from e
    raise DecodeError(path, FieldKind.INTEGER.value, value)


def _to_record(
    value: Any, field: FieldSpec, path: str, unused: list[str]
) -> ResultModel:
    if not isinstance(value, Mapping) or field.record is None:
        raise DecodeError(path, FieldKind.RECORD.value, value)
    return _decode_record(value, record_spec(field.record), path, unused)


def _to_records(
    value: Any, field: FieldSpec, path: str, unused: list[str]
) -> list[ResultModel]:
    # A lone object where a list is declared is lifted to a one-element list.
    if isinstance(value, Mapping):
        value = [value]
    if not isinstance(value, list) or field.record is None:
        raise DecodeError(path, FieldKind.RECORDS.value, value)

    spec = record_spec(field.record)
    records: list[ResultModel] = []
    for index, item in enumerate(value):
        item_path = f"{path}[{index}]"
        if not isinstance(item, Mapping):
            raise DecodeError(item_path, FieldKind.RECORD.value, item)
        records.append(_decode_record(item, spec, item_path, unused))
    return records


COERCERS: dict[FieldKind, Coercer] = {
    FieldKind.STRING: _to_string,
    FieldKind.INTEGER: _to_integer,
    FieldKind.RECORD: _to_record,
    FieldKind.RECORDS: _to_records,
}


def _decode_record(
    source: Mapping[str, Any], spec: RecordSpec, path: str, unused: list[str]
) -> ResultModel:
    prefix = f"{path}." if path else ""
    matched = spec.lookup(source)
    values: dict[str, Any] = {}

    for key, raw in source.items():
        field = matched.get(key)
        if field is None:
            unused.append(f"{prefix}{key}")
            continue
        if raw is None:
            # Leave the model default in place.
            continue
        values[field.name] = COERCERS[field.kind](raw, field, f"{prefix}{key}", unused)

    try:
        return spec.model.model_validate(values)
    except pydantic.ValidationError as exc:
        raise DecodeError(path or spec.model.__name__, spec.model.__name__, dict(source)) from exc


def decode_envelope(envelope: Mapping[str, Any], model: type[T]) -> Decoded[T]:
    """Decode a successful SRFax envelope into ``model``.

    The envelope must already have been classified as a success. Keys with no
    destination field are reported in :attr:`Decoded.unused_keys`; declared
    fields missing from the envelope keep their defaults.

    Raises:
        DecodeError: when a present value cannot be coerced to its field kind.
    """
    unused: list[str] = []
    value = _decode_record(envelope, record_spec(model), "", unused)

    if unused:
        logger.debug(
            "Unused keys decoding %s: %s", model.__name__, ", ".join(unused)
        )

    return Decoded(value=value, unused_keys=tuple(unused))  # type: ignore[arg-type]
