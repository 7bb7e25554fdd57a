from __future__ import annotations

from itertools import zip_longest
from typing import Any, Dict, Iterator, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from errorsnap.errors import RecordError


class ErrorSnapshot(BaseModel):
    """Owned, serializable copy of an error and its cause chain.

    A snapshot exposes the same surface as the error it was captured from:
    ``description``, ``cause`` and ``str()`` (the display text), so a decoded
    snapshot can stand in wherever that surface is expected.

    Conversion to and from plain records, equality, hashing and ``repr()``
    walk the chain iteratively, so their cost does not grow the call stack
    with the chain depth.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: StrictStr
    display: StrictStr
    cause: Optional["ErrorSnapshot"] = None

    @classmethod
    def from_error(cls, error: Any, *, follow_context: bool = True) -> "ErrorSnapshot":
        from errorsnap.capture import capture

        return capture(error, follow_context=follow_context)

    @classmethod
    def from_record(cls, record: Any) -> "ErrorSnapshot":
        """Build a snapshot from nested ``{description, display, cause}`` mappings.

        Raises:
            RecordError: If any level of ``record`` is not a snapshot record.
        """
        levels: list[_NodeRecord] = []
        current = record
        while True:
            try:
                level = _NodeRecord.model_validate(current)
            except ValidationError as exc:
                raise RecordError(_summarize(exc, depth=len(levels))) from exc
            levels.append(level)
            if level.cause is None:
                break
            current = level.cause

        node: Optional[ErrorSnapshot] = None
        for level in reversed(levels):
            node = cls(description=level.description, display=level.display, cause=node)
        assert node is not None
        return node

    def to_record(self) -> dict[str, Any]:
        record: Optional[dict[str, Any]] = None
        for node in reversed(list(self.chain())):
            record = {"description": node.description, "display": node.display, "cause": record}
        assert record is not None
        return record

    def chain(self) -> Iterator["ErrorSnapshot"]:
        """Yield this node, then each cause down to the root."""
        node: Optional[ErrorSnapshot] = self
        while node is not None:
            yield node
            node = node.cause

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.chain())

    @property
    def root_cause(self) -> "ErrorSnapshot":
        node = self
        while node.cause is not None:
            node = node.cause
        return node

    def as_exception(self) -> "RestoredError":
        restored = [RestoredError(node) for node in self.chain()]
        for outer, inner in zip(restored, restored[1:]):
            outer.__cause__ = inner
        return restored[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorSnapshot):
            return NotImplemented
        for left, right in zip_longest(self.chain(), other.chain()):
            if left is None or right is None:
                return False
            if left.description != right.description or left.display != right.display:
                return False
        return True

    def __hash__(self) -> int:
        return hash(tuple((node.description, node.display) for node in self.chain()))

    def __repr__(self) -> str:
        return (
            f"ErrorSnapshot(description={self.description!r}, "
            f"display={self.display!r}, depth={self.depth})"
        )

    def __str__(self) -> str:
        return self.display


class _NodeRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: StrictStr
    display: StrictStr
    cause: Optional[Dict[StrictStr, Any]] = None


def _summarize(exc: ValidationError, depth: int) -> str:
    prefix = ["cause"] * depth
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in [*prefix, *error.get("loc", ())]) or "<root>"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


class RestoredError(Exception):
    """A raisable exception rebuilt from a snapshot, chained through ``__cause__``."""

    def __init__(self, snapshot: ErrorSnapshot):
        self.snapshot = snapshot
        super().__init__(snapshot.display)

    @property
    def description(self) -> str:
        return self.snapshot.description

    @property
    def cause(self) -> Optional["RestoredError"]:
        nested = self.__cause__
        return nested if isinstance(nested, RestoredError) else None

    def __str__(self) -> str:
        return self.snapshot.display
