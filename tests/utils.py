from __future__ import annotations

from typing import Any, Optional

from errorsnap import ErrorSnapshot


class LesserError:
    description = "Lesser description"
    cause = None

    def __str__(self) -> str:
        return "Lesser display"


class GreaterError:
    description = "Greater description"

    def __init__(self, inner: Optional[Any] = None) -> None:
        self.cause = inner if inner is not None else LesserError()

    def __str__(self) -> str:
        return "Greater display"


class NamedError:
    def __init__(self, name: str, cause: Optional[Any] = None) -> None:
        self.description = f"{name} description"
        self.cause = cause
        self._name = name

    def __str__(self) -> str:
        return f"{self._name} display"


def make_chain(depth: int) -> NamedError:
    error: Optional[NamedError] = None
    for level in reversed(range(depth)):
        error = NamedError(f"level-{level}", error)
    assert error is not None
    return error


def make_snapshot(*pairs: tuple[str, str]) -> ErrorSnapshot:
    node: Optional[ErrorSnapshot] = None
    for description, display in reversed(pairs):
        node = ErrorSnapshot(description=description, display=display, cause=node)
    assert node is not None
    return node


def assert_matches_without_cause(error: Any, restored: Any) -> None:
    assert error.cause is None, "source error unexpectedly has a cause"
    assert restored.cause is None, "restored error gained a cause"
    assert restored.description == error.description
    assert str(restored) == str(error)


def assert_matches_with_cause(error: Any, restored: Any) -> None:
    assert error.cause is not None, "source error lacks a cause"
    assert restored.cause is not None, "restored error lost its cause"
    assert restored.description == error.description
    assert str(restored) == str(error)
    assert_matches_without_cause(error.cause, restored.cause)
