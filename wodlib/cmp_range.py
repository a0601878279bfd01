"""Locate a value relative to a closed range."""

from __future__ import annotations

import enum
from typing import Any


class RangeOrdering(enum.Enum):
    """Where a value falls with respect to a range ``[lower, upper]``."""

    LESS = "less"
    """The value is less than ``lower``."""
    EQ_LOWER = "eq_lower"
    """The value equals ``lower`` and is less than ``upper``."""
    BETWEEN = "between"
    """The value is strictly between ``lower`` and ``upper``."""
    EQ_BOTH = "eq_both"
    """The value equals both ``lower`` and ``upper``."""
    EQ_UPPER = "eq_upper"
    """The value equals ``upper`` and is greater than ``lower``."""
    GREATER = "greater"
    """The value is greater than ``upper``."""


def cmp_range(value: Any, lower: Any, upper: Any) -> RangeOrdering:
    """Report where ``value`` falls with respect to ``lower`` and ``upper``.

    Raises ``ValueError`` if ``lower > upper``.
    """
    if lower > upper:
        raise ValueError(
            f"cmp_range: expected lower <= upper; got lower={lower!r}, upper={upper!r}"
        )
    if value < lower:
        return RangeOrdering.LESS
    if value == lower:
        return RangeOrdering.EQ_BOTH if value == upper else RangeOrdering.EQ_LOWER
    if value < upper:
        return RangeOrdering.BETWEEN
    if value == upper:
        return RangeOrdering.EQ_UPPER
    return RangeOrdering.GREATER