from __future__ import annotations

from typing import Any, Optional, Protocol, Union

from errorsnap.config import SnapshotSettings
from errorsnap.formats import SnapshotFormat
from errorsnap.snapshot import ErrorSnapshot

Payload = Union[bytes, str]


class SnapshotCodec(Protocol):
    format: SnapshotFormat

    def encode(
        self,
        snapshot: ErrorSnapshot,
        settings: Optional[SnapshotSettings] = None,
    ) -> Payload:
        ...

    def decode(self, payload: Any) -> ErrorSnapshot:
        ...


def ensure_snapshot(value: Any) -> ErrorSnapshot:
    if not isinstance(value, ErrorSnapshot):
        raise TypeError(f"Codecs encode ErrorSnapshot values, got {type(value).__name__}")
    return value

