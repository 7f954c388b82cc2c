"""Error taxonomy shared by the decoder and the encoder."""
from __future__ import annotations

__all__ = [
    "JSONCodecError",
    "JSONDecodeError",
    "JSONEncodeError",
    "UnsupportedValueError",
    "NestedTableError",
]


class JSONCodecError(RuntimeError):
    """Base class; ``str(err)`` is the message handed back to scripts."""
    pass


class JSONDecodeError(JSONCodecError):
    """Raised when JSON text cannot be parsed."""
    pass


class JSONEncodeError(JSONCodecError):
    """Raised when a value cannot be serialized."""
    pass


class UnsupportedValueError(JSONEncodeError):
    def __init__(self, kind: str):
        super().__init__(f"cannot encode {kind} to JSON")
        self.kind = kind


class NestedTableError(JSONEncodeError):
    def __init__(self):
        super().__init__("cannot encode recursively nested tables to JSON")
