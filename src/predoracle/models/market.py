"""Question, Market - Reality-backed market entities."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from predoracle.models.answer import ANSWER_SIZE, ZERO_ANSWER, answer_from_hex, answer_to_hex


class Question(BaseModel):
    """Single Reality question backing (part of) a market."""

    id: str
    opening_ts: int = Field(0, ge=0)
    timeout: int = Field(0, ge=0)  # seconds
    finalize_ts: int = Field(0, ge=0, lt=2**64)  # 0 = not answered yet
    is_pending_arbitration: bool = False
    best_answer: bytes = ZERO_ANSWER
    bond: int = Field(0, ge=0)  # wei
    min_bond: int = Field(0, ge=0)

    @field_validator("best_answer", mode="before")
    @classmethod
    def _parse_best_answer(cls, value: Any) -> Any:
        if isinstance(value, str):
            return answer_from_hex(value)
        return value

    @field_validator("best_answer")
    @classmethod
    def _check_answer_size(cls, value: bytes) -> bytes:
        if len(value) != ANSWER_SIZE:
            raise ValueError(f"best_answer must be {ANSWER_SIZE} bytes, got {len(value)}")
        return value

    @field_serializer("best_answer")
    def _dump_best_answer(self, value: bytes) -> str:
        return answer_to_hex(value)

    @property
    def is_answered(self) -> bool:
        return self.finalize_ts > 0


class Market(BaseModel):
    """Prediction market resolved by one or more Reality questions."""

    id: str
    market_name: str = ""
    outcomes: list[str] = Field(default_factory=list)  # index is the answer encoding
    questions: list[Question] = Field(..., min_length=1)
    template_id: int = Field(..., ge=0)
    opening_time: int = Field(0, ge=0)  # unix seconds
    index: int | None = None  # display ordinal
    outcomes_supply: int = Field(0, ge=0)  # wei
    payout_reported: bool = False  # resolved on-chain

    @field_validator("outcomes")
    @classmethod
    def _unique_outcomes(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("outcome labels must be unique")
        return value

    @property
    def question_id(self) -> str:
        return self.questions[0].id
