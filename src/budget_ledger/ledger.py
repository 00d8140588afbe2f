# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import logging
import threading
from datetime import date
from decimal import Decimal
from typing import Callable

from budget_ledger.aggregation import (
    ZERO,
    build_summary,
    remaining_balance,
    spending_by_category,
    total_spent,
)
from budget_ledger.breakdown import build_breakdown
from budget_ledger.config import LedgerConfig
from budget_ledger.errors import BudgetExceededError, IndexOutOfRangeError
from budget_ledger.events import ChangeNotifier, LedgerListener
from budget_ledger.transaction import AmountLike, build_transaction, filter_transactions, to_amount
from budget_ledger.types import (
    LedgerEvent,
    LedgerSummary,
    SpendCheckResult,
    SpendingBreakdown,
    Transaction,
    TransactionCategory,
    TransactionFilter,
)

logger = logging.getLogger("budget_ledger.ledger")


class Ledger:
    """
    Single source of truth for one budget ceiling and its transactions.

    Design contract
    ---------------
    - State changes only through ``set_budget()``, ``add_transaction()``,
      ``delete_transaction()`` and ``reset_all()``.
    - Each successful mutation notifies every subscriber exactly once,
      synchronously and in registration order, after the change is complete.
      A rejected mutation changes nothing and notifies no one.
    - Derived views (``total_spent``, ``remaining``, ``spending_by_category``)
      are recomputed on every read; cost is linear in the transaction count.
    - With ``LedgerConfig.enforce_ceiling`` (the default) the ledger refuses
      transactions that would take spending above the ceiling. ``check()`` is
      the read-only form of the same test.

    Usage
    -----
    ::

        ledger = Ledger()
        ledger.set_budget(100)
        ledger.add_transaction("Lunch", "12.50", date.today(), TransactionCategory.FOOD)

        if ledger.check("30").permitted:
            ledger.add_transaction("Train", "30", date.today(), "transportation")
    """

    def __init__(self, config: LedgerConfig | None = None) -> None:
        self._config = config or LedgerConfig()
        self._budget_ceiling: Decimal = ZERO
        self._transactions: list[Transaction] = []
        self._notifier = ChangeNotifier()
        # Re-entrant so listeners can read or mutate from inside a dispatch.
        self._lock = threading.RLock()

    @property
    def config(self) -> LedgerConfig:
        return self._config

    # ─── Read surface ─────────────────────────────────────────────────────────

    @property
    def budget_ceiling(self) -> Decimal:
        with self._lock:
            return self._budget_ceiling

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transactions in insertion order, as a read-only snapshot."""
        with self._lock:
            return tuple(self._transactions)

    @property
    def total_spent(self) -> Decimal:
        with self._lock:
            return total_spent(self._transactions)

    @property
    def remaining(self) -> Decimal:
        with self._lock:
            return remaining_balance(self._budget_ceiling, self._transactions)

    @property
    def spending_by_category(self) -> dict[TransactionCategory, Decimal]:
        """Category totals for categories with spending; absent means zero."""
        with self._lock:
            return spending_by_category(self._transactions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    def summary(self) -> LedgerSummary:
        """Return a point-in-time snapshot of the ledger totals."""
        with self._lock:
            return build_summary(self._budget_ceiling, self._transactions)

    def breakdown(self) -> SpendingBreakdown:
        """Return spending by category as shares of the budget ceiling."""
        with self._lock:
            return build_breakdown(
                self._budget_ceiling,
                spending_by_category(self._transactions),
                remaining_balance(self._budget_ceiling, self._transactions),
            )

    def get_transactions(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> list[Transaction]:
        """
        Return transaction history, optionally filtered.

        All filter fields are AND-ed together. Pass None to return all records.
        """
        with self._lock:
            return filter_transactions(self._transactions, transaction_filter)

    # ─── Check ────────────────────────────────────────────────────────────────

    def check(self, amount: AmountLike) -> SpendCheckResult:
        """
        Check whether a transaction of ``amount`` fits under the ceiling.

        This method is PURELY READ-ONLY and applies whether or not the ledger
        enforces the ceiling itself.

        Raises InvalidAmountError if amount is not a positive finite number.
        """
        requested = to_amount(amount)
        with self._lock:
            spent = total_spent(self._transactions)
            ceiling = self._budget_ceiling
        permitted = spent + requested <= ceiling
        return SpendCheckResult(
            permitted=permitted,
            requested=requested,
            available=ceiling - spent,
            ceiling=ceiling,
            spent=spent,
            reason="within_budget" if permitted else "exceeds_budget",
        )

    # ─── Mutations ────────────────────────────────────────────────────────────

    def set_budget(self, amount: AmountLike) -> None:
        """
        Replace the budget ceiling.

        Zero is allowed. Existing transactions are kept even when the new
        ceiling is below what has already been spent.

        Raises InvalidAmountError if amount is negative or not a finite number.
        """
        ceiling = to_amount(amount, allow_zero=True)
        with self._lock:
            self._budget_ceiling = ceiling
            logger.debug("Budget ceiling set to %s", ceiling)
            self._notifier.notify(LedgerEvent(kind="budget_set"))

    def add_transaction(
        self,
        title: str,
        amount: AmountLike,
        date: date,
        category: TransactionCategory | str,
    ) -> Transaction:
        """
        Record a transaction at the end of the sequence.

        Returns:
            The stored :class:`~budget_ledger.types.Transaction`.

        Raises:
            InvalidAmountError: If ``amount`` is not a positive finite number.
            ValueError: If ``title`` is blank or ``category`` is unknown.
            BudgetExceededError: If the ceiling is enforced and the
                transaction would take spending above it. Nothing is recorded.
        """
        transaction = build_transaction(title=title, amount=amount, date=date, category=category)

        with self._lock:
            if self._config.enforce_ceiling:
                spent = total_spent(self._transactions)
                if spent + transaction.amount > self._budget_ceiling:
                    logger.info(
                        "Rejected transaction %r of %s: %s of %s already spent",
                        transaction.title,
                        transaction.amount,
                        spent,
                        self._budget_ceiling,
                    )
                    raise BudgetExceededError(
                        requested=transaction.amount,
                        available=self._budget_ceiling - spent,
                        ceiling=self._budget_ceiling,
                    )

            self._transactions.append(transaction)
            index = len(self._transactions) - 1
            logger.debug(
                "Added transaction #%d %r: %s (%s)",
                index,
                transaction.title,
                transaction.amount,
                transaction.category.value,
            )
            self._notifier.notify(
                LedgerEvent(kind="transaction_added", transaction=transaction, index=index)
            )

        return transaction

    def delete_transaction(self, index: int) -> Transaction:
        """
        Remove the transaction at ``index`` and return it.

        Negative positions are not counted from the end; they are out of
        range like any other invalid position.

        Raises:
            IndexOutOfRangeError: If ``index`` is not in ``0..len-1``. The
                sequence is left unmodified.
        """
        with self._lock:
            length = len(self._transactions)
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < length:
                logger.info("Rejected delete of transaction index %r (length %d)", index, length)
                raise IndexOutOfRangeError(index=index, length=length)

            transaction = self._transactions.pop(index)
            logger.debug("Deleted transaction #%d %r", index, transaction.title)
            self._notifier.notify(
                LedgerEvent(kind="transaction_deleted", transaction=transaction, index=index)
            )
        return transaction

    def reset_all(self) -> None:
        """Clear the ceiling and every transaction, then notify once."""
        with self._lock:
            self._budget_ceiling = ZERO
            self._transactions.clear()
            logger.debug("Ledger reset")
            self._notifier.notify(LedgerEvent(kind="reset"))

    # ─── Subscriptions ────────────────────────────────────────────────────────

    def subscribe(self, listener: LedgerListener) -> Callable[[], bool]:
        """
        Register a change listener.

        Returns:
            A zero-argument callable that unsubscribes the listener.
        """
        with self._lock:
            return self._notifier.subscribe(listener)

    def unsubscribe(self, listener: LedgerListener) -> bool:
        """Remove a change listener. Returns True if it was registered."""
        with self._lock:
            return self._notifier.unsubscribe(listener)
