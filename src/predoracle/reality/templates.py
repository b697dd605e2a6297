"""Reality template ids -> answer interpretation kinds and market types."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from predoracle.errors import UnrecognizedTemplateError

if TYPE_CHECKING:
    from predoracle.models import Market

REALITY_TEMPLATE_BOOL = 0
REALITY_TEMPLATE_UINT = 1
REALITY_TEMPLATE_SINGLE_SELECT = 2
REALITY_TEMPLATE_MULTIPLE_SELECT = 3
REALITY_TEMPLATE_DATETIME = 4


class QuestionType(str, Enum):
    """Question type tag used when posting a question to Reality."""

    BOOL = "bool"
    SINGLE_SELECT = "single-select"
    MULTIPLE_SELECT = "multiple-select"
    UINT = "uint"
    DATETIME = "datetime"

    @property
    def is_select(self) -> bool:
        return self in (QuestionType.SINGLE_SELECT, QuestionType.MULTIPLE_SELECT)


class InterpretationKind(str, Enum):
    """How a 32-byte answer is read back."""

    BOOLEAN = "boolean"
    UNSIGNED_INTEGER = "unsigned-integer"
    SINGLE_SELECT = "single-select"
    MULTI_SELECT = "multi-select"
    MULTI_SCALAR = "multi-scalar"

    @property
    def is_scalar(self) -> bool:
        return self in (InterpretationKind.UNSIGNED_INTEGER, InterpretationKind.MULTI_SCALAR)


class MarketType(str, Enum):
    CATEGORICAL = "categorical"
    SCALAR = "scalar"
    MULTI_SCALAR = "multi-scalar"


_TEMPLATE_IDS: dict[QuestionType, int] = {
    QuestionType.BOOL: REALITY_TEMPLATE_BOOL,
    QuestionType.UINT: REALITY_TEMPLATE_UINT,
    QuestionType.SINGLE_SELECT: REALITY_TEMPLATE_SINGLE_SELECT,
    QuestionType.MULTIPLE_SELECT: REALITY_TEMPLATE_MULTIPLE_SELECT,
    QuestionType.DATETIME: REALITY_TEMPLATE_DATETIME,
}

# Datetime questions can be posted but no market kind reads them back.
_KINDS: dict[int, InterpretationKind] = {
    REALITY_TEMPLATE_BOOL: InterpretationKind.BOOLEAN,
    REALITY_TEMPLATE_UINT: InterpretationKind.UNSIGNED_INTEGER,
    REALITY_TEMPLATE_SINGLE_SELECT: InterpretationKind.SINGLE_SELECT,
    REALITY_TEMPLATE_MULTIPLE_SELECT: InterpretationKind.MULTI_SELECT,
}


def template_id_for(question_type: QuestionType | str) -> int:
    """Reality template id for a question type tag."""
    return _TEMPLATE_IDS[QuestionType(question_type)]


def classify_template(
    template_id: int,
    question_type: QuestionType | str | None = None,
    question_count: int = 1,
) -> InterpretationKind:
    """
    Classify a template id into an interpretation kind.
    A uint template shared by several questions (one per outcome) is multi-scalar.
    Raises UnrecognizedTemplateError for unknown ids or a contradicting question type.
    """
    template_id = int(template_id)
    kind = _KINDS.get(template_id)
    if kind is None:
        raise UnrecognizedTemplateError(template_id)
    if question_type is not None:
        try:
            tagged = QuestionType(question_type)
        except ValueError:
            raise UnrecognizedTemplateError(
                template_id, f"Unknown question type {question_type!r} for template {template_id}"
            ) from None
        if _TEMPLATE_IDS[tagged] != template_id:
            raise UnrecognizedTemplateError(
                template_id, f"Question type {tagged.value} does not match template {template_id}"
            )
    if kind is InterpretationKind.UNSIGNED_INTEGER and question_count > 1:
        return InterpretationKind.MULTI_SCALAR
    return kind


def classify_market(market: Market) -> InterpretationKind:
    return classify_template(market.template_id, question_count=len(market.questions))


def get_market_type(market: Market) -> MarketType:
    """Categorical for select/bool markets, scalar or multi-scalar for uint ones."""
    kind = classify_market(market)
    if kind is InterpretationKind.MULTI_SCALAR:
        return MarketType.MULTI_SCALAR
    if kind is InterpretationKind.UNSIGNED_INTEGER:
        return MarketType.SCALAR
    return MarketType.CATEGORICAL
