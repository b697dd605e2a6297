"""Reality question text: wording, outcomes, category and language joined by U+241F."""

from __future__ import annotations

import json

from predoracle.config.settings import DEFAULT_LANGUAGE
from predoracle.reality.templates import QuestionType

QUESTION_DELIMITER = "\u241f"


def encode_outcomes(outcomes: list[str] | None) -> str:
    """JSON array body without the surrounding brackets: '"Yes","No"'."""
    return json.dumps(outcomes, ensure_ascii=False, separators=(",", ":"))[1:-1] if outcomes else ""


def encode_question_text(
    question_type: QuestionType | str,
    text: str,
    outcomes: list[str] | None,
    category: str,
    language: str | None = None,
) -> str:
    """Build the question string Reality stores for a template. Outcomes only go in for select types."""
    qtype = QuestionType(question_type)
    parts = [json.dumps(text, ensure_ascii=False)[1:-1]]
    if qtype.is_select:
        parts.append(encode_outcomes(outcomes))
    parts.append(category)
    parts.append(language or DEFAULT_LANGUAGE)
    return QUESTION_DELIMITER.join(parts)


def decode_question_text(question_type: QuestionType | str, encoded: str) -> dict[str, object]:
    """Split an encoded question back into text, outcomes, category and language."""
    qtype = QuestionType(question_type)
    parts = encoded.split(QUESTION_DELIMITER)
    expected = 4 if qtype.is_select else 3
    if len(parts) != expected:
        raise ValueError(f"Expected {expected} segments for {qtype.value}, got {len(parts)}")
    text = json.loads(f'"{parts[0]}"')
    outcomes = json.loads(f"[{parts[1]}]") if qtype.is_select else None
    return {"text": text, "outcomes": outcomes, "category": parts[-2], "language": parts[-1]}
