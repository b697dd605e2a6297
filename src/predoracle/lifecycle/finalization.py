"""Question finalization - when a Reality answer becomes authoritative."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from fractions import Fraction

from predoracle.models import Question

Instant = int | datetime

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)


def as_timestamp(now: Instant) -> int | Fraction:
    """
    Exact unix seconds for an explicit instant. Integers pass through unchanged
    (finalize timestamps span the full u64 range); aware datetimes keep their
    microseconds as a Fraction. Naive datetimes and other types are rejected.
    """
    if isinstance(now, datetime):
        if now.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return Fraction((now - _EPOCH) // _MICROSECOND, 10**6)
    if isinstance(now, int) and not isinstance(now, bool):
        return now
    raise TypeError(f"now must be int unix seconds or an aware datetime, got {type(now).__name__}")


def is_finalized(question: Question, now: Instant) -> bool:
    """True once answered, not in arbitration, and now is strictly past finalize_ts."""
    if question.finalize_ts == 0 or question.is_pending_arbitration:
        return False
    return as_timestamp(now) > question.finalize_ts
