"""Human-readable countdowns and timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

from predoracle.lifecycle.finalization import Instant, as_timestamp
from predoracle.models import Market

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def time_left(target_ts: int, now: Instant) -> str:
    """Time until target_ts in its coarsest unit: "2 days", "5 hours", "0 minutes"."""
    remaining = max(0, int(target_ts - as_timestamp(now)))
    if remaining >= _DAY:
        return _plural(remaining // _DAY, "day")
    if remaining >= _HOUR:
        return _plural(remaining // _HOUR, "hour")
    return _plural(remaining // _MINUTE, "minute")


def format_opening_time(market: Market) -> str:
    """Opening time as e.g. "March 05, 2024 14:00 UTC"."""
    opening = datetime.fromtimestamp(market.opening_time, tz=timezone.utc)
    return opening.strftime("%B %d, %Y %H:%M UTC")
