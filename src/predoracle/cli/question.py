"""Question subcommand: text."""

from __future__ import annotations

import typer

from predoracle.reality.question_text import encode_question_text
from predoracle.reality.templates import QuestionType, template_id_for

app = typer.Typer(help="Reality question wording")


@app.command("text")
def text(
    ctx: typer.Context,
    wording: str = typer.Argument(..., help="Question wording"),
    qtype: QuestionType = typer.Option(QuestionType.SINGLE_SELECT, "--type", help="Question type"),
    outcome: list[str] | None = typer.Option(None, "--outcome", "-o", help="Outcome label (select types)"),
    category: str = typer.Option("misc", "--category", "-c", help="Reality category"),
    lang: str | None = typer.Option(None, "--lang", help="Language tag (default from config)"),
) -> None:
    """Print the template id and encoded question text."""
    settings = ctx.obj["settings"]
    if qtype.is_select and not outcome:
        typer.echo(f"{qtype.value} questions need at least one --outcome", err=True)
        raise typer.Exit(1)
    encoded = encode_question_text(qtype, wording, list(outcome or []), category, lang or settings.default_language)
    typer.echo(f"template: {template_id_for(qtype)}")
    typer.echo(encoded)
