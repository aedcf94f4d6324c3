"""Common types and helpers shared across models."""

import math
from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def local_time_string(now: datetime | None = None) -> str:
    """Wall-clock time in the host locale's time format, e.g. '14:05:09'."""
    if now is None:
        now = datetime.now().astimezone()
    return now.strftime("%X")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    21.5 -> 22, -0.5 -> 0, -1.5 -> -1. Python's round() would give 22, 0, -2.
    """
    f = math.floor(value)
    return f + 1 if value - f >= 0.5 else f
