from __future__ import annotations

from typing import Final

from .amortization import MONTHS_IN_YEAR

MONTHS_IN_QUARTER: Final[int] = 3
WEEKS_IN_YEAR: Final[int] = 52


def quarterly_to_monthly(amount: float) -> float:
    """Spread a quarterly bill (strata, council, water) evenly over three months."""
    if amount < 0:
        raise ValueError(f"Fee amount must be non-negative, got {amount!r}")
    return amount / MONTHS_IN_QUARTER


def monthly_to_weekly(amount: float) -> float:
    """Convert a monthly cost to its weekly equivalent (12 months over 52 weeks)."""
    if amount < 0:
        raise ValueError(f"Cost must be non-negative, got {amount!r}")
    return amount * MONTHS_IN_YEAR / WEEKS_IN_YEAR
