"""TOML config loading and profiles."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

# Default config search path (project root or cwd)
_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"
_CWD_CONFIG = Path.cwd() / "config"

DEFAULT_NO_ANSWER_TEXT = "Not answered yet"
DEFAULT_LANGUAGE = "en_US"

# Reality.eth v3 deployments; overridable via [reality.contracts]
DEFAULT_REALITY_CONTRACTS: dict[int, str] = {
    1: "0x5b7dD1E86623548AF054A4985F7fc8Ccbb554E2c",
    100: "0xE78996A233895bE74a66F451f1019cA9734205cc",
    11155111: "0xaf33DcB6E8c5c4D9dDF579f53031b514d19449CA",
}


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override values take precedence."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _find_config_dir(config_dir: Path | None = None) -> Path:
    if config_dir is not None:
        return config_dir
    if _CWD_CONFIG.exists():
        return _CWD_CONFIG
    return _CONFIG_DIR


def load_config(profile: str | None = None, config_dir: Path | None = None) -> dict[str, Any]:
    """Load merged config from default.toml and optional profile overlay."""
    config_dir = _find_config_dir(config_dir)
    default_path = config_dir / "default.toml"
    if not default_path.exists():
        return {}
    base = _load_toml(default_path)
    if profile:
        profile_path = config_dir / f"{profile}.toml"
        if profile_path.exists():
            overlay = _load_toml(profile_path)
            base = _deep_merge(base, overlay)
    return base


def get_settings(profile: str | None = None, config_dir: Path | None = None) -> Settings:
    """Return Settings instance from merged config."""
    raw = load_config(profile, config_dir)
    return Settings.from_dict(raw)


class Settings:
    """Application settings from TOML config."""

    def __init__(
        self,
        *,
        reality: dict[str, Any] | None = None,
        logging: dict[str, Any] | None = None,
    ):
        self.reality = reality or {}
        self.logging = logging or {}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Settings:
        return cls(
            reality=raw.get("reality"),
            logging=raw.get("logging"),
        )

    # Convenience accessors with defaults
    @property
    def no_answer_text(self) -> str:
        return self.reality.get("no_answer_text", DEFAULT_NO_ANSWER_TEXT)

    @property
    def default_language(self) -> str:
        return self.reality.get("default_language", DEFAULT_LANGUAGE)

    @property
    def reality_contracts(self) -> dict[int, str]:
        """Chain id -> Reality.eth contract address. TOML keys arrive as strings."""
        contracts = dict(DEFAULT_REALITY_CONTRACTS)
        for chain_id, address in (self.reality.get("contracts") or {}).items():
            contracts[int(chain_id)] = str(address)
        return contracts

    @property
    def logging_level(self) -> str:
        return self.logging.get("level", "INFO").upper()

    @property
    def logging_format(self) -> str:
        return self.logging.get("format", "console")

    @property
    def logging_level_num(self) -> int:
        return getattr(logging, self.logging_level, logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog with settings. Call once at application entry."""
    import sys

    import structlog

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.logging_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.logging_level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),  # stdout carries command output
        cache_logger_on_first_use=True,
    )
