"""Capture errors and their cause chains as serializable snapshots."""

from loguru import logger

from .api import capture_to_bytes, capture_to_text, decode, decode_bytes, decode_text, encode
from .capture import capture
from .codecs import BinaryCodec, SnapshotCodec, TextCodec, get_codec, register_codec
from .config import SnapshotSettings, apply_logging, load_settings, normalize_settings, settings_from_env
from .contract import ErrorLike, ExceptionView, as_error_like
from .errors import DecodeError, DecodeFailure, EncodeError, ErrorSnapError, RecordError
from .formats import SnapshotFormat
from .snapshot import ErrorSnapshot, RestoredError

logger.disable("errorsnap")

__all__ = [
    # Capture
    "capture",
    "ErrorLike",
    "ExceptionView",
    "as_error_like",
    # Snapshot
    "ErrorSnapshot",
    "RestoredError",
    # Codecs
    "SnapshotFormat",
    "SnapshotCodec",
    "TextCodec",
    "BinaryCodec",
    "get_codec",
    "register_codec",
    "encode",
    "decode",
    "capture_to_bytes",
    "capture_to_text",
    "decode_bytes",
    "decode_text",
    # Errors
    "ErrorSnapError",
    "EncodeError",
    "DecodeError",
    "DecodeFailure",
    "RecordError",
    # Settings
    "SnapshotSettings",
    "normalize_settings",
    "load_settings",
    "settings_from_env",
    "apply_logging",
]
