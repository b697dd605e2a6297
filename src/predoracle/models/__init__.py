"""Canonical schema (Pydantic) - Market, Question, answer selections."""

from predoracle.models.answer import (
    ANSWERED_TOO_SOON,
    INVALID_RESULT,
    ConcreteAnswer,
    Selection,
    Sentinel,
    SentinelAnswer,
)
from predoracle.models.market import Market, Question

__all__ = [
    "Market",
    "Question",
    "Sentinel",
    "SentinelAnswer",
    "ConcreteAnswer",
    "Selection",
    "INVALID_RESULT",
    "ANSWERED_TOO_SOON",
]
