from __future__ import annotations

from enum import Enum


class SnapshotFormat(str, Enum):
    JSON = "json"
    MSGPACK = "msgpack"

    @property
    def is_binary(self) -> bool:
        return self is SnapshotFormat.MSGPACK
