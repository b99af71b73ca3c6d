# src/thread_stage/db/time.py
"""Time utilities for database models."""

from datetime import UTC, datetime


def unix_now() -> int:
    """Return the current UTC time as whole unix seconds."""
    return int(datetime.now(UTC).timestamp())
