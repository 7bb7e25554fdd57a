from __future__ import annotations

from errorsnap.codecs.base import Payload, SnapshotCodec
from errorsnap.codecs.binary import BinaryCodec
from errorsnap.codecs.text import TextCodec
from errorsnap.formats import SnapshotFormat

_CODECS: dict[SnapshotFormat, SnapshotCodec] = {}


def register_codec(codec: SnapshotCodec) -> None:
    _CODECS[codec.format] = codec


def get_codec(format: SnapshotFormat | str) -> SnapshotCodec:
    key = SnapshotFormat(format)
    if key not in _CODECS:
        raise KeyError(f"Codec not registered for {key.value}")
    return _CODECS[key]


def _register_defaults() -> None:
    register_codec(TextCodec())
    register_codec(BinaryCodec())


_register_defaults()

__all__ = [
    "Payload",
    "SnapshotCodec",
    "register_codec",
    "get_codec",
    "TextCodec",
    "BinaryCodec",
]
