"""Reality answer codec - outcome selections <-> 32-byte big-endian answers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

import structlog

from predoracle.config.settings import DEFAULT_NO_ANSWER_TEXT
from predoracle.errors import EmptySelectionError, InvalidSelectionError
from predoracle.models import ConcreteAnswer, Market, Question, Selection, Sentinel, SentinelAnswer
from predoracle.models.answer import (
    ANSWER_SIZE,
    ANSWERED_TOO_SOON,
    INVALID_RESULT,
    MAX_ANSWER,
    answer_from_hex,
    answer_to_hex,
)
from predoracle.reality.templates import InterpretationKind, classify_market

log = structlog.get_logger(__name__)

__all__ = [
    "ANSWERED_TOO_SOON",
    "INVALID_RESULT",
    "answer_from_hex",
    "answer_to_hex",
    "decode_answer",
    "decode_answer_value",
    "encode_answer",
    "format_fixed",
    "get_answer_text",
    "multi_select_indices",
    "parse_fixed",
    "to_selection",
]

ETHER_DECIMALS = 18
MAX_MULTI_SELECT_OUTCOMES = 8 * ANSWER_SIZE

_DECIMAL_RE = re.compile(r"^\d+(\.\d+)?$")


def _sentinel(raw: Any) -> Sentinel | None:
    if isinstance(raw, Sentinel):
        return raw
    if isinstance(raw, str):
        try:
            return Sentinel(raw.lower())
        except ValueError:
            return None
    return None


def _index(raw: Any) -> int:
    """Coerce one selected value to a non-negative int."""
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        try:
            value = int(raw.strip())
        except ValueError:
            raise InvalidSelectionError(f"Outcome must be a non-negative integer, got {raw!r}") from None
    else:
        raise InvalidSelectionError(f"Outcome must be a non-negative integer, got {raw!r}")
    if value < 0:
        raise InvalidSelectionError(f"Outcome must be non-negative, got {value}", {"index": value})
    return value


def to_selection(raw: Any, kind: InterpretationKind) -> Selection:
    """
    Build the tagged selection for raw form input.
    Sentinels win over concrete indices: INVALID_RESULT, then ANSWERED_TOO_SOON.
    A scalar passed for a multi-select question selects that single outcome.
    """
    if isinstance(raw, (SentinelAnswer, ConcreteAnswer)):
        return raw
    if raw is None or raw == "":
        raise EmptySelectionError()

    sentinel = _sentinel(raw)
    if sentinel is not None:
        return SentinelAnswer(sentinel=sentinel)

    if isinstance(raw, Iterable) and not isinstance(raw, (str, bytes)):
        members = list(raw)
        if not members:
            raise EmptySelectionError()
        if kind is not InterpretationKind.MULTI_SELECT:
            raise InvalidSelectionError(
                f"{kind.value} answers take a single outcome, got {len(members)}",
                {"kind": kind.value},
            )
        sentinels = {s for s in (_sentinel(m) for m in members) if s is not None}
        # INVALID_RESULT and ANSWERED_TOO_SOON are incompatible with multi-select
        if Sentinel.INVALID_RESULT in sentinels:
            return SentinelAnswer(sentinel=Sentinel.INVALID_RESULT)
        if Sentinel.ANSWERED_TOO_SOON in sentinels:
            return SentinelAnswer(sentinel=Sentinel.ANSWERED_TOO_SOON)
        return ConcreteAnswer(indices=tuple(sorted({_index(m) for m in members})))

    return ConcreteAnswer(indices=(_index(raw),))


def encode_answer(raw: Any, kind: InterpretationKind) -> bytes:
    """Encode an outcome selection as the 32-byte answer Reality expects."""
    selection = to_selection(raw, kind)
    if isinstance(selection, SentinelAnswer):
        return selection.sentinel.answer

    if kind is InterpretationKind.MULTI_SELECT:
        too_large = [i for i in selection.indices if i >= MAX_MULTI_SELECT_OUTCOMES]
        if too_large:
            raise InvalidSelectionError(
                f"Multi-select supports at most {MAX_MULTI_SELECT_OUTCOMES} outcomes",
                {"indices": too_large},
            )
        value = sum(1 << i for i in set(selection.indices))
    else:
        if len(selection.indices) != 1:
            raise InvalidSelectionError(
                f"{kind.value} answers take a single outcome, got {len(selection.indices)}",
                {"kind": kind.value},
            )
        value = selection.indices[0]
        if value > MAX_ANSWER:
            raise InvalidSelectionError("Answer does not fit in 32 bytes", {"value": value})

    answer = value.to_bytes(ANSWER_SIZE, "big")
    log.debug("answer_encoded", kind=kind.value, answer=answer_to_hex(answer))
    return answer


def multi_select_indices(value: int) -> list[int]:
    """Bit positions set in value, ascending (bit 0 = outcome 0)."""
    return [i for i in range(value.bit_length()) if value >> i & 1]


def format_fixed(value: int, decimals: int = ETHER_DECIMALS) -> str:
    """Render an integer scaled by `decimals` places, trimming trailing zeros ("1.5", "0", "42")."""
    whole, fraction = divmod(value, 10**decimals)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{whole}.{fraction_text}" if fraction_text else str(whole)


def parse_fixed(text: str, decimals: int = ETHER_DECIMALS) -> int:
    """Inverse of format_fixed: "1.5" -> 1500000000000000000."""
    text = text.strip()
    if not _DECIMAL_RE.match(text):
        raise InvalidSelectionError(f"Not a non-negative decimal number: {text!r}")
    whole, _, fraction = text.partition(".")
    if len(fraction) > decimals:
        raise InvalidSelectionError(
            f"At most {decimals} decimal places allowed", {"value": text}
        )
    return int(whole) * 10**decimals + int(fraction.ljust(decimals, "0") or 0)


def _label(outcomes: list[str], index: int, no_answer_text: str) -> str:
    if index < len(outcomes):
        return outcomes[index]
    log.warning("answer_index_out_of_range", index=index, outcome_count=len(outcomes))
    return no_answer_text


def decode_answer_value(
    value: bytes | str,
    kind: InterpretationKind,
    outcomes: list[str],
    no_answer_text: str = DEFAULT_NO_ANSWER_TEXT,
) -> str:
    """Display text for a stored answer. Sentinels take precedence over any template."""
    if isinstance(value, str):
        value = answer_from_hex(value)
    sentinel = Sentinel.from_answer(value)
    if sentinel is not None:
        return sentinel.text

    number = int.from_bytes(value, "big")
    if kind.is_scalar:
        return format_fixed(number)
    if kind is InterpretationKind.MULTI_SELECT:
        return ", ".join(_label(outcomes, i, no_answer_text) for i in multi_select_indices(number))
    return _label(outcomes, number, no_answer_text)


def decode_answer(
    question: Question,
    outcomes: list[str],
    kind: InterpretationKind,
    no_answer_text: str = DEFAULT_NO_ANSWER_TEXT,
) -> str:
    """Display text for a question's best answer, or no_answer_text while unanswered."""
    if not question.is_answered:
        return no_answer_text
    return decode_answer_value(question.best_answer, kind, outcomes, no_answer_text)


def get_answer_text(
    question: Question,
    market: Market,
    no_answer_text: str = DEFAULT_NO_ANSWER_TEXT,
) -> str:
    """Decode a question's answer using the market's template and outcome labels."""
    return decode_answer(question, market.outcomes, classify_market(market), no_answer_text)
