"""Flat-rate tax calculations."""

from __future__ import annotations

__all__ = ["calculate_tax", "calculate_tiered_tax"]


def calculate_tax(amount: float) -> float:
    """Return 10.0 for amounts of 1000 or more, otherwise 5.0."""
    if amount >= 1000:
        return 10.0
    return 5.0


def calculate_tiered_tax(amount: float) -> float:
    """Return the tax for ``amount`` using three tiers.

    Amounts that are zero or negative carry no tax. Amounts from 1000 up to
    (not including) 20000 pay 10.0, amounts of 20000 or more pay 20.0 and
    everything else pays 5.0.
    """
    if amount <= 0:
        return 0.0
    if 1000 <= amount < 20000:
        return 10.0
    if amount >= 20000:
        return 20.0
    return 5.0