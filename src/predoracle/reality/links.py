"""Links to questions on the Reality.eth app."""

from __future__ import annotations

from predoracle.config.settings import DEFAULT_REALITY_CONTRACTS
from predoracle.errors import UnsupportedChainError

REALITY_APP_URL = "https://reality.eth.limo/app/#!/network"


def reality_link(chain_id: int, question_id: str, contracts: dict[int, str] | None = None) -> str:
    """URL of a question on the Reality.eth app for the chain's Reality contract."""
    contracts = contracts if contracts is not None else DEFAULT_REALITY_CONTRACTS
    address = contracts.get(int(chain_id))
    if not address:
        raise UnsupportedChainError(int(chain_id))
    return f"{REALITY_APP_URL}/{chain_id}/question/{address}-{question_id}"
