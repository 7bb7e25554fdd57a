from __future__ import annotations

from typing import Any, Optional

import msgpack
from loguru import logger
from msgpack.exceptions import BufferFull, OutOfData

from errorsnap.codecs.base import ensure_snapshot
from errorsnap.config import SnapshotSettings
from errorsnap.errors import DecodeError, DecodeFailure, EncodeError, RecordError
from errorsnap.formats import SnapshotFormat
from errorsnap.snapshot import ErrorSnapshot

# A record map holds three keys; larger containers are refused before the
# unpacker allocates them.
MAX_CONTAINER_LEN = 64


class BinaryCodec:
    """MessagePack encoding of a snapshot record.

    Each node is packed as a map of ``description``, ``display`` and
    ``cause``; strings use the UTF-8 ``str`` family so they unpack as text.
    """

    format = SnapshotFormat.MSGPACK

    def encode(
        self,
        snapshot: ErrorSnapshot,
        settings: Optional[SnapshotSettings] = None,
    ) -> bytes:
        snapshot = ensure_snapshot(snapshot)
        try:
            data = msgpack.packb(snapshot.to_record(), use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodeError(self.format, str(exc)) from exc
        logger.debug("Encoded snapshot as MessagePack ({} bytes)", len(data))
        return data

    def decode(self, payload: Any) -> ErrorSnapshot:
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise self._failure(
                DecodeFailure.WRONG_ENCODING,
                f"expected bytes, got {type(payload).__name__}",
            )
        data = bytes(payload)
        # String limits default to the buffer size, so any string that fits
        # in the payload is accepted.
        unpacker = msgpack.Unpacker(
            raw=False,
            max_buffer_size=len(data),
            max_array_len=MAX_CONTAINER_LEN,
            max_map_len=MAX_CONTAINER_LEN,
        )
        try:
            unpacker.feed(data)
            record = unpacker.unpack()
        except OutOfData as exc:
            raise self._failure(DecodeFailure.TRUNCATED, "input ended inside a record") from exc
        except UnicodeDecodeError as exc:
            raise self._failure(DecodeFailure.WRONG_ENCODING, str(exc)) from exc
        except (BufferFull, ValueError, TypeError) as exc:
            # FormatError and StackError are ValueError subclasses.
            raise self._failure(DecodeFailure.MALFORMED, str(exc) or type(exc).__name__) from exc

        consumed = unpacker.tell()
        if consumed != len(data):
            raise self._failure(
                DecodeFailure.MALFORMED,
                f"{len(data) - consumed} trailing bytes after the record",
            )
        try:
            return ErrorSnapshot.from_record(record)
        except RecordError as exc:
            raise self._failure(DecodeFailure.INVALID_STRUCTURE, str(exc)) from exc

    def _failure(self, reason: DecodeFailure, detail: str) -> DecodeError:
        logger.debug("MessagePack snapshot rejected: {} ({})", reason.value, detail)
        return DecodeError(self.format, reason, detail)
