"""CLI commands over local market files."""

import json
import logging

import pytest
import structlog
from typer.testing import CliRunner

from predoracle.cli.app import app

runner = CliRunner()

T0 = 1_700_000_000
T1 = T0 + 86_400


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Warnings only, and no cached loggers bound to the runner's streams."""

    def configure(settings):
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
            cache_logger_on_first_use=False,
        )

    monkeypatch.setattr("predoracle.cli.app.configure_logging", configure)
    yield
    structlog.reset_defaults()


@pytest.fixture
def market_file(tmp_path):
    market = {
        "id": "0xmarket",
        "marketName": "Which teams qualify?",
        "outcomes": ["A", "B", "C"],
        "templateId": 3,
        "openingTime": T0,
        "questions": [
            {
                "id": "0xquestion",
                "finalize_ts": T1,
                "best_answer": "0x" + "00" * 31 + "05",
                "bond": 100,
                "min_bond": 100,
            }
        ],
    }
    path = tmp_path / "market.json"
    path.write_text(json.dumps(market))
    return path


def test_answer_encode_multi_select():
    result = runner.invoke(app, ["answer", "encode", "--template", "3", "0", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "0x" + "00" * 31 + "05"


def test_answer_encode_invalid_wins():
    result = runner.invoke(app, ["answer", "encode", "--template", "2", "--invalid", "1"])
    assert result.exit_code == 0
    assert result.output.strip() == "0x" + "ff" * 32


def test_answer_encode_scalar_value():
    result = runner.invoke(app, ["answer", "encode", "--template", "1", "--value", "1.5"])
    assert result.exit_code == 0
    assert int(result.output.strip(), 16) == 15 * 10**17


def test_answer_encode_empty_selection():
    result = runner.invoke(app, ["answer", "encode", "--template", "2"])
    assert result.exit_code == 1
    assert "empty_selection" in result.output


def test_answer_encode_unknown_template():
    result = runner.invoke(app, ["answer", "encode", "--template", "9", "0"])
    assert result.exit_code == 1
    assert "unrecognized_template" in result.output
    assert "template_id=9" in result.output


def test_answer_decode():
    value = "0x" + "00" * 31 + "05"
    result = runner.invoke(app, ["answer", "decode", value, "-t", "3", "-o", "A", "-o", "B", "-o", "C"])
    assert result.exit_code == 0
    assert result.output.strip() == "A, C"


def test_market_status(market_file):
    result = runner.invoke(app, ["market", "status", str(market_file), "--now", str(T1 - 60)])
    assert result.exit_code == 0
    assert result.output.startswith("answer_not_final")

    result = runner.invoke(app, ["market", "status", str(market_file), "--now", str(T1 + 1)])
    assert result.output.startswith("pending_execution")

    result = runner.invoke(app, ["market", "status", str(market_file), "--now", str(T0 - 1)])
    assert "not_open" in result.output
    assert "Opening at" in result.output


def test_market_answers(market_file):
    result = runner.invoke(app, ["market", "answers", str(market_file), "--now", str(T1 - 3 * 3600)])
    assert result.exit_code == 0
    assert "A, C" in result.output
    assert "correctable for 3 hours" in result.output
    assert "next bond 200" in result.output


def test_market_link(market_file):
    result = runner.invoke(app, ["market", "link", str(market_file), "--chain", "100"])
    assert result.exit_code == 0
    assert result.output.strip().endswith("/100/question/0xE78996A233895bE74a66F451f1019cA9734205cc-0xquestion")

    result = runner.invoke(app, ["market", "link", str(market_file), "--chain", "5"])
    assert result.exit_code == 1
    assert "unsupported_chain" in result.output


def test_bond_next():
    result = runner.invoke(app, ["bond", "next", "0", "100"])
    assert result.output.strip() == "100"
    result = runner.invoke(app, ["bond", "next", "100", "100"])
    assert result.output.strip() == "200"


def test_question_text():
    result = runner.invoke(
        app, ["question", "text", "Who wins?", "--type", "single-select", "-o", "Yes", "-o", "No", "-c", "sports"]
    )
    assert result.exit_code == 0
    assert "template: 2" in result.output
    assert "Who wins?\u241f\"Yes\",\"No\"\u241fsports\u241fen_US" in result.output


def test_answer_encode_non_ascii_digit():
    result = runner.invoke(app, ["answer", "encode", "--template", "2", "²"])
    assert result.exit_code == 1
    assert "invalid_selection" in result.output
