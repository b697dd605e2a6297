"""Shared CLI helpers: error output, market file loading, clock."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError

from predoracle.errors import PredOracleError
from predoracle.models import Market
from predoracle.normalize import parse_market


def fail(err: PredOracleError | ValidationError | ValueError) -> NoReturn:
    """Print a consistent `error [code]: message (key=value ...)` line and exit 1."""
    if isinstance(err, PredOracleError):
        context = " ".join(f"{k}={v}" for k, v in err.details.items())
        suffix = f" ({context})" if context else ""
        typer.echo(f"error [{err.code}]: {err.message}{suffix}", err=True)
    else:
        typer.echo(f"error [invalid_input]: {err}", err=True)
    raise typer.Exit(1)


def load_market(path: Path) -> Market:
    """Read an already-fetched market (JSON) from disk."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return parse_market(raw)
    except (ValidationError, ValueError) as e:
        fail(e)


def now_or_clock(now: int | None) -> int:
    return int(time.time()) if now is None else now
