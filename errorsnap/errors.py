from __future__ import annotations

from enum import Enum
from typing import Optional

from errorsnap.formats import SnapshotFormat


class DecodeFailure(str, Enum):
    TRUNCATED = "truncated"
    MALFORMED = "malformed"
    WRONG_ENCODING = "wrong_encoding"
    INVALID_STRUCTURE = "invalid_structure"


class ErrorSnapError(Exception):
    """Base error for snapshot operations."""


class RecordError(ErrorSnapError, ValueError):
    """Raised when a decoded value is not a snapshot record."""


class EncodeError(ErrorSnapError):
    """Raised when a codec fails to serialize a snapshot."""

    def __init__(self, format: SnapshotFormat, detail: str):
        self.format = format
        self.detail = detail
        super().__init__(f"Failed to encode {format.value} snapshot: {detail}")


class DecodeError(ErrorSnapError):
    """Raised when a payload does not decode to a snapshot.

    ``reason`` tells truncated input apart from malformed data, a payload of
    the wrong encoding, and well-formed data of the wrong shape.
    """

    def __init__(
        self,
        format: SnapshotFormat,
        reason: DecodeFailure,
        detail: Optional[str] = None,
    ):
        self.format = format
        self.reason = reason
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        text = f"Failed to decode {self.format.value} snapshot ({self.reason.value})"
        if self.detail:
            return f"{text}: {self.detail}"
        return text
