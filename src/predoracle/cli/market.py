"""Market subcommand: status, answers, link."""

from __future__ import annotations

from pathlib import Path

import typer

from predoracle.cli.common import fail, load_market, now_or_clock
from predoracle.errors import PredOracleError
from predoracle.lifecycle.countdown import format_opening_time, time_left
from predoracle.lifecycle.finalization import is_finalized
from predoracle.lifecycle.status import MarketStatus, get_market_status
from predoracle.reality.bonds import next_bond
from predoracle.reality.codec import get_answer_text
from predoracle.reality.links import reality_link
from predoracle.reality.templates import MarketType, get_market_type

app = typer.Typer(help="Market lifecycle from an already-fetched market (JSON)")


@app.command("status")
def status(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Market JSON file"),
    now: int | None = typer.Option(None, "--now", help="Unix seconds to evaluate at (default: now)"),
) -> None:
    """Show the market's lifecycle stage."""
    market = load_market(path)
    ts = now_or_clock(now)
    stage = get_market_status(market, ts)
    typer.echo(f"{stage.value}  {stage.label}")
    if stage is MarketStatus.NOT_OPEN:
        typer.echo(f"Opening at {format_opening_time(market)}")


@app.command("answers")
def answers(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Market JSON file"),
    now: int | None = typer.Option(None, "--now", help="Unix seconds to evaluate at (default: now)"),
) -> None:
    """Show each question's current answer, finality, countdown and next bond."""
    settings = ctx.obj["settings"]
    market = load_market(path)
    ts = now_or_clock(now)
    try:
        market_type = get_market_type(market)
        for i, question in enumerate(market.questions):
            prefix = ""
            if market_type is MarketType.MULTI_SCALAR and i < len(market.outcomes):
                prefix = f"{market.outcomes[i]} | "
            text = get_answer_text(question, market, settings.no_answer_text)
            if is_finalized(question, ts):
                state = "final"
            elif question.finalize_ts > 0:
                state = f"correctable for {time_left(question.finalize_ts, ts)}"
            else:
                state = "unanswered"
            bond = next_bond(question.bond, question.min_bond)
            typer.echo(f"  {question.id[:20]}  {prefix}{text}  ({state}, next bond {bond})")
    except PredOracleError as e:
        fail(e)
    typer.echo(f"Total: {len(market.questions)} questions")


@app.command("link")
def link(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Market JSON file"),
    chain: int = typer.Option(100, "--chain", help="Chain id"),
) -> None:
    """Print the Reality.eth link for the market's first question."""
    settings = ctx.obj["settings"]
    market = load_market(path)
    try:
        typer.echo(reality_link(chain, market.question_id, settings.reality_contracts))
    except PredOracleError as e:
        fail(e)
