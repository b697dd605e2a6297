"""Error types with machine-readable codes (e.g. empty_selection, unrecognized_template)."""

from __future__ import annotations

from typing import Any


class PredOracleError(Exception):
    """Base error with a code and human-readable message."""

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EmptySelectionError(PredOracleError):
    """Encode called with no chosen outcome."""

    def __init__(self, message: str = "No outcome selected") -> None:
        super().__init__(code="empty_selection", message=message)


class InvalidSelectionError(PredOracleError):
    """Selection is malformed for the interpretation kind (negative, too large, wrong shape)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(code="invalid_selection", message=message, details=details)


class UnrecognizedTemplateError(PredOracleError):
    """Template id outside the known set, or contradicting its question type."""

    def __init__(self, template_id: int, message: str | None = None) -> None:
        super().__init__(
            code="unrecognized_template",
            message=message or f"Unrecognized Reality template: {template_id}",
            details={"template_id": template_id},
        )
        self.template_id = template_id


class UnsupportedChainError(PredOracleError):
    """No Reality contract known for the chain."""

    def __init__(self, chain_id: int) -> None:
        super().__init__(
            code="unsupported_chain",
            message=f"No Reality contract configured for chain {chain_id}",
            details={"chain_id": chain_id},
        )
        self.chain_id = chain_id
