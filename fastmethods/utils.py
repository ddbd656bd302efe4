"""Small numeric helpers shared by the solvers."""

import sys

COMP_MARGIN: float = sys.float_info.epsilon * 1e5
"""Margin used to compare doubles robustly: ``a + COMP_MARGIN < b``."""


def is_time_better_than(t1: float, t2: float) -> bool:
    """Return True if ``t1`` is lower than ``t2`` by more than the margin."""
    return t1 + COMP_MARGIN < t2


def abs_ui(a: int) -> int:
    """Absolute value of an integer."""
    return a if a > 0 else -a