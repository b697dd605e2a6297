"""Template classification and market types."""

import pytest

from predoracle.errors import UnrecognizedTemplateError
from predoracle.models import Market, Question
from predoracle.reality.templates import (
    InterpretationKind,
    MarketType,
    QuestionType,
    classify_template,
    get_market_type,
    template_id_for,
)


def _market(template_id: int, n_questions: int = 1) -> Market:
    return Market(
        id="m",
        outcomes=["A", "B"],
        questions=[Question(id=f"q{i}") for i in range(n_questions)],
        template_id=template_id,
    )


def test_classify_known_templates():
    assert classify_template(0) is InterpretationKind.BOOLEAN
    assert classify_template(1) is InterpretationKind.UNSIGNED_INTEGER
    assert classify_template(2) is InterpretationKind.SINGLE_SELECT
    assert classify_template(3) is InterpretationKind.MULTI_SELECT


def test_uint_with_several_questions_is_multi_scalar():
    assert classify_template(1, question_count=3) is InterpretationKind.MULTI_SCALAR
    assert classify_template(2, question_count=3) is InterpretationKind.SINGLE_SELECT


@pytest.mark.parametrize("template_id", [4, 5, 99])
def test_unrecognized_template_is_surfaced(template_id):
    with pytest.raises(UnrecognizedTemplateError) as exc:
        classify_template(template_id)
    assert exc.value.code == "unrecognized_template"
    assert exc.value.template_id == template_id


def test_question_type_must_match_template():
    assert classify_template(3, question_type="multiple-select") is InterpretationKind.MULTI_SELECT
    with pytest.raises(UnrecognizedTemplateError):
        classify_template(2, question_type=QuestionType.UINT)
    with pytest.raises(UnrecognizedTemplateError):
        classify_template(2, question_type="ranked-choice")


def test_template_id_for_question_type():
    assert template_id_for("bool") == 0
    assert template_id_for(QuestionType.DATETIME) == 4


def test_market_type():
    assert get_market_type(_market(2)) is MarketType.CATEGORICAL
    assert get_market_type(_market(3)) is MarketType.CATEGORICAL
    assert get_market_type(_market(1)) is MarketType.SCALAR
    assert get_market_type(_market(1, n_questions=2)) is MarketType.MULTI_SCALAR
