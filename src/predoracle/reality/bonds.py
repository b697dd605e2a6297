"""Bond required for the next Reality answer."""

from __future__ import annotations

from predoracle.models.answer import MAX_ANSWER


def next_bond(current_bond: int, min_bond: int) -> int:
    """min_bond for the first answer, then double the current bond (as Reality requires)."""
    if current_bond < 0 or min_bond < 0:
        raise ValueError("bonds must be non-negative")
    bond = min_bond if current_bond == 0 else current_bond * 2
    if bond > MAX_ANSWER:
        raise OverflowError("bond exceeds uint256")
    return bond
