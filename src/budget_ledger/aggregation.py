# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from budget_ledger.types import LedgerSummary, Transaction, TransactionCategory

ZERO = Decimal("0")

# Share of the ceiling at which the summary flags spending as close to the limit.
NEAR_LIMIT_PROGRESS = 0.9


def total_spent(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of all transaction amounts. Zero for an empty sequence."""
    return sum((transaction.amount for transaction in transactions), ZERO)


def remaining_balance(ceiling: Decimal, transactions: Iterable[Transaction]) -> Decimal:
    """Ceiling minus total spent. Negative when spending overshoots the ceiling."""
    return ceiling - total_spent(transactions)


def spending_by_category(
    transactions: Iterable[Transaction],
) -> dict[TransactionCategory, Decimal]:
    """
    Per-category spending totals.

    Only categories with at least one transaction appear, in order of first
    appearance. Values sum exactly to :func:`total_spent`.
    """
    totals: dict[TransactionCategory, Decimal] = {}
    for transaction in transactions:
        totals[transaction.category] = totals.get(transaction.category, ZERO) + transaction.amount
    return totals


def spending_progress(ceiling: Decimal, spent: Decimal) -> float:
    """Fraction of the ceiling spent, clamped to 0..1. Zero without a ceiling."""
    if ceiling <= 0:
        return 0.0
    return min(1.0, max(0.0, float(spent / ceiling)))


def utilization_percent(ceiling: Decimal, spent: Decimal) -> float:
    """Compute utilization as a percentage (0–100+)."""
    if ceiling == 0:
        return 100.0 if spent > 0 else 0.0
    return float(spent / ceiling * 100)


def build_summary(ceiling: Decimal, transactions: list[Transaction] | tuple[Transaction, ...]) -> LedgerSummary:
    """
    Derive a LedgerSummary snapshot from the ceiling and transaction list.

    The snapshot is point-in-time; it does not follow later mutations.
    """
    spent = total_spent(transactions)
    progress = spending_progress(ceiling, spent)
    return LedgerSummary(
        budget_ceiling=ceiling,
        total_spent=spent,
        remaining=ceiling - spent,
        progress=progress,
        utilization_percent=utilization_percent(ceiling, spent),
        near_limit=progress >= NEAR_LIMIT_PROGRESS,
        transaction_count=len(transactions),
    )
