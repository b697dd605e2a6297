"""Bond doubling."""

import pytest

from predoracle.reality.bonds import next_bond


def test_first_answer_uses_min_bond():
    assert next_bond(0, 10**17) == 10**17


def test_bond_doubles():
    m = 5 * 10**18
    assert next_bond(m, m) == 2 * m
    assert next_bond(2 * m, m) == 4 * m


def test_bond_bounds():
    with pytest.raises(ValueError):
        next_bond(-1, 1)
    with pytest.raises(OverflowError):
        next_bond(2**255, 1)
