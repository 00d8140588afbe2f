# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Pie-chart projection of the ledger.

Each category with spending becomes a slice sized by its amount, plus one
slice for whatever is left of the ceiling. Percentages are relative to the
ceiling, not to total spending, so an overspent ledger has slices that add
up to more than 100%.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from budget_ledger.types import (
    REMAINING_LABEL,
    BreakdownSlice,
    SpendingBreakdown,
    TransactionCategory,
)

_ONE_PLACE = Decimal("0.1")


def percent_of(amount: Decimal, ceiling: Decimal) -> Decimal:
    """``amount`` as a percentage of ``ceiling``, rounded half-up to one place."""
    return (amount / ceiling * 100).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)


def build_breakdown(
    ceiling: Decimal,
    spending: dict[TransactionCategory, Decimal],
    remaining: Decimal,
) -> SpendingBreakdown:
    """
    Build the chart slices for a ceiling and its per-category spending.

    Returns an empty breakdown with ``has_budget=False`` when the ceiling is
    not positive. The remaining slice is only present while ``remaining`` is
    positive.
    """
    if ceiling <= 0:
        return SpendingBreakdown(has_budget=False, budget_ceiling=ceiling)

    slices = [
        BreakdownSlice(
            label=category.label(),
            category=category,
            amount=amount,
            percent_of_budget=percent_of(amount, ceiling),
        )
        for category, amount in spending.items()
    ]

    if remaining > 0:
        slices.append(
            BreakdownSlice(
                label=REMAINING_LABEL,
                category=None,
                amount=remaining,
                percent_of_budget=percent_of(remaining, ceiling),
            )
        )

    return SpendingBreakdown(has_budget=True, budget_ceiling=ceiling, slices=slices)
