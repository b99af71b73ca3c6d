"""Error kinds raised by the topic services.

The HTTP layer maps these onto status codes in ``thread_stage.main``; the
services themselves never deal with transport concerns.
"""

from __future__ import annotations


class ThreadStageError(Exception):
    """Base class for all domain errors."""


class NotFoundError(ThreadStageError):
    """A topic or reply does not exist, or the caller may not know it exists."""


class UnimplementedError(ThreadStageError):
    """The request targets a topic type this service does not support yet.

    This is a client-visible "not supported" answer, not a server fault.
    """


class ConsistencyViolationError(ThreadStageError):
    """Stored data breaks an invariant, e.g. a topic without a top post.

    Never retry on this error; it points at corrupted rows.
    """


class InvalidPageError(ThreadStageError, ValueError):
    """Pagination bounds are out of range."""
