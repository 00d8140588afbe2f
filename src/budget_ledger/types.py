# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator

# ─── Category ─────────────────────────────────────────────────────────────────


class TransactionCategory(str, Enum):
    """Closed set of tags classifying what a transaction was for."""

    FOOD = "food"
    TRANSPORTATION = "transportation"
    ENTERTAINMENT = "entertainment"
    TECH = "tech"
    OTHER = "other"

    def label(self) -> str:
        """Return a human-readable label for this category."""
        return self.value.capitalize()


# ─── Transaction ──────────────────────────────────────────────────────────────


class Transaction(BaseModel, frozen=True):
    """
    An immutable record of one purchase charged against the budget.

    Prefer :func:`budget_ledger.transaction.build_transaction`, which reports
    bad amounts as :class:`~budget_ledger.errors.InvalidAmountError`. Direct
    construction still validates and raises pydantic's ``ValidationError``.
    """

    title: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False)
    date: dt.date
    category: TransactionCategory

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def float_amount_via_str(cls, value: Any) -> Any:
        # Decimal(0.1) would carry the binary expansion; str() gives "0.1".
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @field_validator("date", mode="before")
    @classmethod
    def datetime_to_date(cls, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class TransactionFilter(BaseModel):
    """Optional filter applied to transaction queries. All fields are AND-ed."""

    category: Optional[TransactionCategory] = None
    since: Optional[dt.date] = None
    until: Optional[dt.date] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None


# ─── Check result ─────────────────────────────────────────────────────────────

CheckReason = Literal["within_budget", "exceeds_budget"]


class SpendCheckResult(BaseModel, frozen=True):
    """Result of a budget check. Does not record any spending."""

    permitted: bool
    requested: Decimal
    available: Decimal
    ceiling: Decimal
    spent: Decimal
    reason: CheckReason


# ─── Events ───────────────────────────────────────────────────────────────────

ChangeKind = Literal["budget_set", "transaction_added", "transaction_deleted", "reset"]


class LedgerEvent(BaseModel, frozen=True):
    """
    Notification delivered to subscribers after one completed mutation.

    ``transaction`` and ``index`` describe the affected entry for
    ``transaction_added`` and ``transaction_deleted``; they are None for
    ``budget_set`` and ``reset``. Listeners re-read whatever views they need
    from the ledger itself.
    """

    kind: ChangeKind
    transaction: Optional[Transaction] = None
    index: Optional[int] = None


# ─── Summary ──────────────────────────────────────────────────────────────────


class LedgerSummary(BaseModel, frozen=True):
    """
    Point-in-time totals for the budget summary card.

    ``near_limit`` is set once ``progress`` reaches
    :data:`~budget_ledger.aggregation.NEAR_LIMIT_PROGRESS`.
    """

    budget_ceiling: Decimal
    total_spent: Decimal
    remaining: Decimal
    progress: float = Field(..., ge=0.0, le=1.0)
    utilization_percent: float
    near_limit: bool = False
    transaction_count: int = Field(..., ge=0)


# ─── Breakdown ────────────────────────────────────────────────────────────────

REMAINING_LABEL = "Remaining"


class BreakdownSlice(BaseModel, frozen=True):
    """One pie-chart section: a category's spending or the unspent remainder."""

    label: str
    category: Optional[TransactionCategory] = None
    amount: Decimal
    percent_of_budget: Decimal

    @property
    def is_remaining(self) -> bool:
        return self.category is None


class SpendingBreakdown(BaseModel, frozen=True):
    """
    Spending by category expressed as shares of the budget ceiling.

    ``has_budget`` is False (and ``slices`` empty) while no positive ceiling
    has been set.
    """

    has_budget: bool
    budget_ceiling: Decimal
    slices: list[BreakdownSlice] = Field(default_factory=list)
