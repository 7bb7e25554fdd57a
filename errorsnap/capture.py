from __future__ import annotations

from typing import Any

from loguru import logger

from errorsnap.contract import ErrorLike, as_error_like
from errorsnap.snapshot import ErrorSnapshot


def capture(error: Any, *, follow_context: bool = True) -> ErrorSnapshot:
    """Capture ``error`` and its cause chain into an owned snapshot.

    Args:
        error: An exception, or any object exposing ``description``, ``cause``
            and ``str()``.
        follow_context: For exceptions, also follow implicit ``__context__``
            chaining when no explicit ``__cause__`` is set.

    Returns:
        The snapshot of ``error``, whose ``cause`` holds the snapshot of the
        next error in the chain.

    Raises:
        TypeError: If a level of the chain is not an error, or its
            description is not text.
    """
    snapshot = _capture_node(as_error_like(error, follow_context=follow_context), follow_context)
    logger.debug("Captured error chain of depth {}", snapshot.depth)
    return snapshot


def _capture_node(error: ErrorLike, follow_context: bool) -> ErrorSnapshot:
    description = error.description
    if not isinstance(description, str):
        raise TypeError(
            f"{type(error).__name__}.description must be str, got {type(description).__name__}"
        )
    display = str(error)

    nested = error.cause
    cause = None
    if nested is not None:
        cause = _capture_node(as_error_like(nested, follow_context=follow_context), follow_context)
    return ErrorSnapshot(description=description, display=display, cause=cause)
