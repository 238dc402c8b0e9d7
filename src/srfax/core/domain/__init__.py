# Domain package

from .decoding import Decoded, FieldKind, FieldSpec, RecordSpec, decode_envelope
from .envelope import check_status, classify_envelope

__all__ = [
    "Decoded",
    "FieldKind",
    "FieldSpec",
    "RecordSpec",
    "check_status",
    "classify_envelope",
    "decode_envelope",
]
