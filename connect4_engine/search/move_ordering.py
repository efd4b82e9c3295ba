"""Static center-out column ordering."""

from __future__ import annotations

from typing import Sequence, Tuple


def center_out_order(cols: int) -> Tuple[int, ...]:
    """
    Columns sorted by distance from the center, left column first on ties.

    Center columns sit in more four-cell windows, so searching them first
    raises alpha early and prunes more of the remaining siblings.
    For 7 columns this is ``(3, 2, 4, 1, 5, 0, 6)``.
    """
    if cols < 1:
        raise ValueError(f"Number of columns must be >= 1, got {cols}")
    return tuple(sorted(range(cols), key=lambda c: (abs(2 * c - (cols - 1)), c)))


def validate_column_order(order: Sequence[int], cols: int) -> Tuple[int, ...]:
    """Return ``order`` as a tuple, raising ValueError unless it is a permutation of ``range(cols)``."""
    order = tuple(int(c) for c in order)
    if sorted(order) != list(range(cols)):
        raise ValueError(f"Column order {order} is not a permutation of range({cols})")
    return order
