"""Market lifecycle stage - a pure reduction over opening time, questions and payout flag."""

from __future__ import annotations

from enum import Enum

import structlog

from predoracle.lifecycle.finalization import Instant, as_timestamp, is_finalized
from predoracle.models import Market

log = structlog.get_logger(__name__)


class MarketStatus(str, Enum):
    NOT_OPEN = "not_open"
    OPEN = "open"
    ANSWER_NOT_FINAL = "answer_not_final"
    PENDING_EXECUTION = "pending_execution"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        return STATUS_TEXTS[self]


STATUS_TEXTS: dict[MarketStatus, str] = {
    MarketStatus.NOT_OPEN: "Market not open yet",
    MarketStatus.OPEN: "Market open",
    MarketStatus.ANSWER_NOT_FINAL: "Waiting for answer",
    MarketStatus.PENDING_EXECUTION: "Pending execution",
    MarketStatus.CLOSED: "Closed",
}


def get_market_status(
    market: Market,
    now: Instant,
    payout_reported: bool | None = None,
) -> MarketStatus:
    """
    Derive the market's stage at `now`. Checks run in priority order:
    not open, no answers yet, some answer not final, payout not reported, closed.
    payout_reported overrides market.payout_reported when given.
    """
    if as_timestamp(now) < market.opening_time:
        status = MarketStatus.NOT_OPEN
    elif all(q.finalize_ts == 0 for q in market.questions):
        status = MarketStatus.OPEN
    elif not all(is_finalized(q, now) for q in market.questions):
        status = MarketStatus.ANSWER_NOT_FINAL
    elif not (market.payout_reported if payout_reported is None else payout_reported):
        status = MarketStatus.PENDING_EXECUTION
    else:
        status = MarketStatus.CLOSED
    log.debug("market_status", market_id=market.id, status=status.value)
    return status
