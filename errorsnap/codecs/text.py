from __future__ import annotations

import json
from typing import Any, Optional

from loguru import logger

from errorsnap.codecs.base import ensure_snapshot
from errorsnap.config import SnapshotSettings, normalize_settings
from errorsnap.errors import DecodeError, DecodeFailure, EncodeError, RecordError
from errorsnap.formats import SnapshotFormat
from errorsnap.snapshot import ErrorSnapshot


class TextCodec:
    """JSON text encoding of a snapshot record."""

    format = SnapshotFormat.JSON

    def encode(
        self,
        snapshot: ErrorSnapshot,
        settings: Optional[SnapshotSettings] = None,
    ) -> str:
        snapshot = ensure_snapshot(snapshot)
        settings = normalize_settings(settings)
        try:
            text = json.dumps(
                snapshot.to_record(),
                ensure_ascii=settings.ensure_ascii,
                indent=settings.text_indent,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise EncodeError(self.format, str(exc)) from exc
        logger.debug("Encoded snapshot as JSON ({} chars)", len(text))
        return text

    def decode(self, payload: Any) -> ErrorSnapshot:
        text = self._as_text(payload)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            reason = DecodeFailure.TRUNCATED if _is_truncation(exc) else DecodeFailure.MALFORMED
            raise self._failure(reason, str(exc)) from exc
        except RecursionError as exc:
            raise self._failure(DecodeFailure.MALFORMED, "nesting too deep") from exc
        try:
            return ErrorSnapshot.from_record(data)
        except RecordError as exc:
            raise self._failure(DecodeFailure.INVALID_STRUCTURE, str(exc)) from exc

    def _as_text(self, payload: Any) -> str:
        if isinstance(payload, str):
            return payload
        if isinstance(payload, (bytes, bytearray, memoryview)):
            try:
                return bytes(payload).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise self._failure(DecodeFailure.WRONG_ENCODING, str(exc)) from exc
        raise self._failure(
            DecodeFailure.WRONG_ENCODING,
            f"expected str or UTF-8 bytes, got {type(payload).__name__}",
        )

    def _failure(self, reason: DecodeFailure, detail: str) -> DecodeError:
        logger.debug("JSON snapshot rejected: {} ({})", reason.value, detail)
        return DecodeError(self.format, reason, detail)


def _is_truncation(exc: json.JSONDecodeError) -> bool:
    if exc.msg.startswith("Unterminated string"):
        return True
    return exc.pos >= len(exc.doc.rstrip())

