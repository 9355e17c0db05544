"""
Clock helpers shared by models and services.
"""

import time
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def next_version(current: int | None) -> int:
    """
    Produce a new recommendation version strictly greater than current.

    The version is a millisecond timestamp, bumped by one when two writes
    land within the same millisecond so the token always changes.
    """
    return max(now_ms(), (current or 0) + 1)
