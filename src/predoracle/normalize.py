"""Contract-read / subgraph payloads -> canonical Market and Question."""

from __future__ import annotations

from typing import Any

from predoracle.models import Market, Question


def _int(v: Any, default: int = 0) -> int:
    """uint values arrive as int, decimal string, hex string or bigint-like."""
    if v is None or v == "":
        return default
    if isinstance(v, str) and v[:2].lower() == "0x":
        return int(v, 16)
    return int(v)


def _bool(v: Any) -> bool:
    """Flags may arrive as bool, 0/1 or "true"/"false" strings."""
    if isinstance(v, str):
        text = v.strip().lower()
        if text in ("true", "1", "yes"):
            return True
        if text in ("false", "0", "no", ""):
            return False
        raise ValueError(f"not a boolean flag: {v!r}")
    return bool(v)


def _first(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def parse_question(raw: dict[str, Any]) -> Question:
    """Convert a Reality question struct (snake_case or camelCase keys) to Question."""
    return Question(
        id=str(_first(raw, "id", "question_id", "questionId") or ""),
        opening_ts=_int(_first(raw, "opening_ts", "openingTs")),
        timeout=_int(_first(raw, "timeout")),
        finalize_ts=_int(_first(raw, "finalize_ts", "finalizeTs")),
        is_pending_arbitration=_bool(_first(raw, "is_pending_arbitration", "isPendingArbitration")),
        best_answer=_first(raw, "best_answer", "bestAnswer") or "0x0",
        bond=_int(_first(raw, "bond")),
        min_bond=_int(_first(raw, "min_bond", "minBond")),
    )


def parse_market(raw: dict[str, Any]) -> Market:
    """Convert a market payload to canonical Market. Questions may be raw dicts or Question."""
    questions = [
        q if isinstance(q, Question) else parse_question(q)
        for q in (raw.get("questions") or [])
    ]
    index = _first(raw, "index")
    return Market(
        id=str(raw.get("id") or ""),
        market_name=str(_first(raw, "market_name", "marketName") or ""),
        outcomes=[str(o) for o in (raw.get("outcomes") or [])],
        questions=questions,
        template_id=_int(_first(raw, "template_id", "templateId"), default=-1),
        opening_time=_int(_first(raw, "opening_time", "openingTime")),
        index=_int(index) if index is not None else None,
        outcomes_supply=_int(_first(raw, "outcomes_supply", "outcomesSupply")),
        payout_reported=_bool(_first(raw, "payout_reported", "payoutReported")),
    )
