"""Finalization predicate and market lifecycle status."""

from datetime import datetime, timedelta, timezone

import pytest

from predoracle.lifecycle.finalization import is_finalized
from predoracle.lifecycle.status import MarketStatus, get_market_status
from predoracle.models import Market, Question

T0 = 1_700_000_000
T1 = T0 + 86_400


def _market(*questions: Question, payout_reported: bool = False) -> Market:
    return Market(
        id="m1",
        outcomes=["Yes", "No"],
        questions=list(questions),
        template_id=2,
        opening_time=T0,
        payout_reported=payout_reported,
    )


def test_finalization_is_strictly_after_finalize_ts():
    q = Question(id="q", finalize_ts=T1)
    for now in (T0, T1 - 1, T1):
        assert not is_finalized(q, now)
    for now in (T1 + 1, T1 + 10**6):
        assert is_finalized(q, now)


def test_unanswered_or_arbitrated_never_final():
    assert not is_finalized(Question(id="q", finalize_ts=0), T1 * 10)
    assert not is_finalized(Question(id="q", finalize_ts=T1, is_pending_arbitration=True), T1 * 10)


def test_finalization_accepts_aware_datetime():
    q = Question(id="q", finalize_ts=T1)
    assert is_finalized(q, datetime.fromtimestamp(T1 + 1, tz=timezone.utc))
    with pytest.raises(ValueError):
        is_finalized(q, datetime(2030, 1, 1))


def test_status_priority_chain():
    unanswered = _market(Question(id="q", finalize_ts=0))
    assert get_market_status(unanswered, T0 + 1) is MarketStatus.OPEN

    answered = _market(Question(id="q", finalize_ts=T1))
    assert get_market_status(answered, T1 - 10) is MarketStatus.ANSWER_NOT_FINAL
    assert get_market_status(answered, T1 + 1) is MarketStatus.PENDING_EXECUTION

    closed = _market(Question(id="q", finalize_ts=T1), payout_reported=True)
    assert get_market_status(closed, T1 + 1) is MarketStatus.CLOSED


def test_not_open_dominates_question_state():
    closed = _market(Question(id="q", finalize_ts=T0 - 100), payout_reported=True)
    assert get_market_status(closed, T0 - 1) is MarketStatus.NOT_OPEN


def test_opening_instant_is_open():
    assert get_market_status(_market(Question(id="q")), T0) is MarketStatus.OPEN


def test_multi_question_market_waits_for_every_question():
    market = _market(
        Question(id="q1", finalize_ts=T1),
        Question(id="q2", finalize_ts=0),
    )
    assert get_market_status(market, T1 + 1) is MarketStatus.ANSWER_NOT_FINAL


def test_arbitration_holds_market():
    market = _market(
        Question(id="q1", finalize_ts=T1),
        Question(id="q2", finalize_ts=T1, is_pending_arbitration=True),
    )
    assert get_market_status(market, T1 + 10**8) is MarketStatus.ANSWER_NOT_FINAL


def test_payout_override():
    market = _market(Question(id="q", finalize_ts=T1))
    assert get_market_status(market, T1 + 1, payout_reported=True) is MarketStatus.CLOSED


def test_status_labels():
    assert MarketStatus.ANSWER_NOT_FINAL.label == "Waiting for answer"
    assert MarketStatus.NOT_OPEN.label == "Market not open yet"


def test_finalization_exact_for_large_timestamps():
    q = Question(id="q", finalize_ts=2**60)
    assert not is_finalized(q, 2**60)
    assert is_finalized(q, 2**60 + 1)


def test_status_exact_for_large_timestamps():
    market = Market(
        id="m1",
        outcomes=["Yes", "No"],
        questions=[Question(id="q", finalize_ts=2**60 + 10)],
        template_id=2,
        opening_time=2**60 + 1,
    )
    assert get_market_status(market, 2**60) is MarketStatus.NOT_OPEN
    assert get_market_status(market, 2**60 + 1) is MarketStatus.ANSWER_NOT_FINAL
    assert get_market_status(market, 2**60 + 11) is MarketStatus.PENDING_EXECUTION


def test_fractional_datetime_is_strictly_after():
    q = Question(id="q", finalize_ts=T1)
    assert is_finalized(q, datetime.fromtimestamp(T1, tz=timezone.utc) + timedelta(microseconds=1))
    assert not is_finalized(q, datetime.fromtimestamp(T1, tz=timezone.utc))


def test_float_instants_rejected():
    with pytest.raises(TypeError):
        is_finalized(Question(id="q", finalize_ts=T1), float(T1 + 1))
