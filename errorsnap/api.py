"""
One-call helpers that pair capture with a registered codec.
"""

from __future__ import annotations

from typing import Any, Optional

from errorsnap.capture import capture
from errorsnap.codecs import Payload, get_codec
from errorsnap.config import SnapshotSettings, normalize_settings
from errorsnap.formats import SnapshotFormat
from errorsnap.snapshot import ErrorSnapshot


def encode(
    snapshot: ErrorSnapshot,
    format: SnapshotFormat | str,
    *,
    settings: Optional[SnapshotSettings] = None,
) -> Payload:
    """Encode a snapshot with the codec registered for ``format``.

    Raises:
        EncodeError: If the underlying encoder fails.
    """
    return get_codec(format).encode(snapshot, normalize_settings(settings))


def decode(payload: Any, format: SnapshotFormat | str) -> ErrorSnapshot:
    """Decode a payload produced by :func:`encode` with the same format.

    Raises:
        DecodeError: If the payload is not a complete, valid snapshot.
    """
    return get_codec(format).decode(payload)


def capture_to_bytes(error: Any, *, settings: Optional[SnapshotSettings] = None) -> bytes:
    """Capture ``error`` and encode it as MessagePack."""
    settings = normalize_settings(settings)
    snapshot = capture(error, follow_context=settings.follow_context)
    return encode(snapshot, SnapshotFormat.MSGPACK, settings=settings)


def capture_to_text(error: Any, *, settings: Optional[SnapshotSettings] = None) -> str:
    """Capture ``error`` and encode it as JSON text."""
    settings = normalize_settings(settings)
    snapshot = capture(error, follow_context=settings.follow_context)
    return encode(snapshot, SnapshotFormat.JSON, settings=settings)


def decode_bytes(data: bytes) -> ErrorSnapshot:
    return decode(data, SnapshotFormat.MSGPACK)


def decode_text(text: str) -> ErrorSnapshot:
    return decode(text, SnapshotFormat.JSON)
