"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from predoracle.config import get_settings
from predoracle.config.settings import configure_logging

app = typer.Typer(
    name="predo",
    help="predoracle - Reality.eth answer encoding, decoding and market lifecycle.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. dev) to overlay on default.toml"
    ),
) -> None:
    """Configure logging and store options in context."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {"settings": settings, "config_dir": config_dir, "profile": profile}


# Subcommands registered from other modules
from predoracle.cli import answer, bond, market, question  # noqa: E402

app.add_typer(answer.app, name="answer")
app.add_typer(market.app, name="market")
app.add_typer(bond.app, name="bond")
app.add_typer(question.app, name="question")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
