# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Union

from budget_ledger.errors import InvalidAmountError
from budget_ledger.types import Transaction, TransactionCategory, TransactionFilter

AmountLike = Union[Decimal, int, float, str]


def to_amount(value: AmountLike, *, allow_zero: bool = False) -> Decimal:
    """
    Convert a caller-supplied amount to a finite Decimal.

    Floats go through ``str()`` so ``12.5`` becomes ``Decimal("12.5")``.
    With ``allow_zero`` the amount may be zero (budget ceilings); otherwise it
    must be strictly positive (transaction amounts).

    Raises InvalidAmountError for booleans, unparseable text, NaN/infinity
    and amounts outside the allowed range.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidAmountError(value, "expected a number")

    try:
        amount = Decimal(str(value).strip()) if isinstance(value, (float, str)) else Decimal(value)
    except InvalidOperation:
        raise InvalidAmountError(value, "not a number") from None

    if not amount.is_finite():
        raise InvalidAmountError(value, "must be finite")
    if allow_zero:
        if amount < 0:
            raise InvalidAmountError(value, "must not be negative")
    elif amount <= 0:
        raise InvalidAmountError(value, "must be positive")
    return amount


def build_transaction(
    title: str,
    amount: AmountLike,
    date: date,
    category: TransactionCategory | str,
) -> Transaction:
    """
    Build a validated Transaction record.

    Raises InvalidAmountError if amount is not a positive finite number, and
    ValueError for a blank title or an unknown category.
    """
    checked_amount = to_amount(amount)

    if not isinstance(title, str) or not title.strip():
        raise ValueError("Transaction title must be a non-empty string")

    checked_category = TransactionCategory(category)

    if isinstance(date, datetime):
        date = date.date()

    return Transaction(
        title=title,
        amount=checked_amount,
        date=date,
        category=checked_category,
    )


def filter_transactions(
    transactions: list[Transaction] | tuple[Transaction, ...],
    transaction_filter: TransactionFilter | None,
) -> list[Transaction]:
    """
    Apply an optional TransactionFilter to a sequence of transactions.
    All filter fields are AND-ed together; ``since`` and ``until`` are
    inclusive. Returns a new list in the original order.
    """
    if transaction_filter is None:
        return list(transactions)

    results: list[Transaction] = []
    for transaction in transactions:
        if (
            transaction_filter.category is not None
            and transaction.category != transaction_filter.category
        ):
            continue

        if transaction_filter.since is not None and transaction.date < transaction_filter.since:
            continue

        if transaction_filter.until is not None and transaction.date > transaction_filter.until:
            continue

        if (
            transaction_filter.min_amount is not None
            and transaction.amount < transaction_filter.min_amount
        ):
            continue

        if (
            transaction_filter.max_amount is not None
            and transaction.amount > transaction_filter.max_amount
        ):
            continue

        results.append(transaction)

    return results
