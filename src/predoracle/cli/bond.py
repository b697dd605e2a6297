"""Bond subcommand: next."""

from __future__ import annotations

import typer

from predoracle.reality.bonds import next_bond

app = typer.Typer(help="Reality answer bonds")


@app.command("next")
def next_(
    current: int = typer.Argument(..., help="Current bond (wei), 0 if unanswered"),
    min_bond: int = typer.Argument(..., help="Question minimum bond (wei)"),
) -> None:
    """Print the bond required for the next answer."""
    try:
        typer.echo(str(next_bond(current, min_bond)))
    except ValueError as e:
        typer.echo(f"error [invalid_input]: {e}", err=True)
        raise typer.Exit(1)
