from __future__ import annotations

import traceback
from typing import Any, FrozenSet, Optional, Protocol, runtime_checkable


@runtime_checkable
class ErrorLike(Protocol):
    """Minimal error surface: a description, a display string and an optional cause."""

    @property
    def description(self) -> str:
        ...

    @property
    def cause(self) -> Optional["ErrorLike"]:
        ...

    def __str__(self) -> str:
        ...


class ExceptionView:
    """Presents a Python exception through the ``ErrorLike`` surface.

    The cause is ``__cause__`` when set, otherwise ``__context__`` unless the
    context was suppressed with ``raise ... from None``. Exceptions already
    seen on the way down end the chain, so cyclic contexts stay finite.
    """

    __slots__ = ("_exc", "_follow_context", "_seen")

    def __init__(
        self,
        exc: BaseException,
        *,
        follow_context: bool = True,
        _seen: FrozenSet[int] = frozenset(),
    ) -> None:
        self._exc = exc
        self._follow_context = follow_context
        self._seen = _seen | {id(exc)}

    @property
    def exception(self) -> BaseException:
        return self._exc

    @property
    def description(self) -> str:
        message = str(self._exc)
        return message or type(self._exc).__name__

    @property
    def cause(self) -> Optional[ErrorLike]:
        exc = self._exc
        nested = exc.__cause__
        if nested is None and self._follow_context and not exc.__suppress_context__:
            nested = exc.__context__
        if nested is None or id(nested) in self._seen:
            return None
        return as_error_like(nested, follow_context=self._follow_context, _seen=self._seen)

    def __str__(self) -> str:
        lines = traceback.format_exception_only(type(self._exc), self._exc)
        return "".join(lines).strip()

    def __repr__(self) -> str:
        return f"ExceptionView({self._exc!r})"


def as_error_like(
    value: Any,
    *,
    follow_context: bool = True,
    _seen: FrozenSet[int] = frozenset(),
) -> ErrorLike:
    if isinstance(value, ErrorLike):
        return value
    if isinstance(value, BaseException):
        return ExceptionView(value, follow_context=follow_context, _seen=_seen)
    raise TypeError(
        f"{type(value).__name__} is neither an exception nor exposes description/cause"
    )
