"""Answer subcommand: encode, decode."""

from __future__ import annotations

from typing import Any

import typer

from predoracle.cli.common import fail
from predoracle.errors import PredOracleError
from predoracle.models import Sentinel
from predoracle.reality.codec import answer_to_hex, decode_answer_value, encode_answer, parse_fixed
from predoracle.reality.templates import InterpretationKind, classify_template

app = typer.Typer(help="Encode and decode Reality answers")


@app.command("encode")
def encode(
    outcomes: list[str] | None = typer.Argument(None, help="Outcome index (several for multi-select)"),
    template: int = typer.Option(..., "--template", "-t", help="Reality template id"),
    questions: int = typer.Option(1, "--questions", "-q", help="Questions in the market (uint: >1 = multi-scalar)"),
    value: str | None = typer.Option(None, "--value", help="Scalar answer as a decimal, scaled by 18 decimals"),
    invalid: bool = typer.Option(False, "--invalid", help="Answer INVALID_RESULT"),
    too_soon: bool = typer.Option(False, "--too-soon", help="Answer ANSWERED_TOO_SOON"),
) -> None:
    """Print the 32-byte hex answer for a selection."""
    try:
        kind = classify_template(template, question_count=questions)
        members: list[Any] = list(outcomes or [])
        if invalid:
            members.append(Sentinel.INVALID_RESULT)
        if too_soon:
            members.append(Sentinel.ANSWERED_TOO_SOON)
        if value is not None:
            if not kind.is_scalar:
                typer.echo("--value only applies to uint templates", err=True)
                raise typer.Exit(1)
            members.append(parse_fixed(value))
        if kind is InterpretationKind.MULTI_SELECT:
            raw: Any = members
        elif len(members) == 1:
            raw = members[0]
        elif invalid:
            raw = Sentinel.INVALID_RESULT
        elif too_soon:
            raw = Sentinel.ANSWERED_TOO_SOON
        else:
            raw = members
        answer = encode_answer(raw, kind)
    except PredOracleError as e:
        fail(e)
    typer.echo(answer_to_hex(answer))


@app.command("decode")
def decode(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="0x-prefixed 32-byte answer"),
    template: int = typer.Option(..., "--template", "-t", help="Reality template id"),
    outcome: list[str] | None = typer.Option(None, "--outcome", "-o", help="Outcome label, in index order"),
    questions: int = typer.Option(1, "--questions", "-q", help="Questions in the market"),
) -> None:
    """Print the display text for a stored answer."""
    settings = ctx.obj["settings"]
    try:
        kind = classify_template(template, question_count=questions)
        text = decode_answer_value(value, kind, list(outcome or []), settings.no_answer_text)
    except (PredOracleError, ValueError) as e:
        fail(e)
    typer.echo(text)
