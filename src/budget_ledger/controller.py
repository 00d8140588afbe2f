# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

import datetime as dt
import logging
from typing import Literal, Optional

from pydantic import BaseModel

from budget_ledger.errors import (
    BudgetExceededError,
    FormValidationError,
    IndexOutOfRangeError,
    LedgerError,
)
from budget_ledger.formatting import format_currency
from budget_ledger.forms import TransactionForm, parse_budget
from budget_ledger.ledger import Ledger
from budget_ledger.types import Transaction, TransactionCategory

logger = logging.getLogger("budget_ledger.controller")

BUDGET_EXCEEDED_MESSAGE = "Error: Transaction exceeds the remaining budget"
TRANSACTION_ADDED_MESSAGE = "Transaction added successfully"
TRANSACTION_DELETED_MESSAGE = "Transaction deleted"
RESET_MESSAGE = "All data has been reset"

ActionKind = Literal["budget_set", "transaction_added", "transaction_deleted", "reset"]


class ActionResult(BaseModel, frozen=True):
    """
    Outcome of one user action, ready to show as a transient banner.

    Attributes:
        ok: True when the ledger accepted the change.
        action: Which action was attempted.
        message: Short user-facing text.
        error_code: The :class:`~budget_ledger.errors.LedgerError` code when
            ``ok`` is False.
        field_errors: Per-field form messages, when the failure came from
            form validation.
        transaction: The transaction added or deleted, if any.
    """

    ok: bool
    action: ActionKind
    message: str
    error_code: Optional[str] = None
    field_errors: dict[str, str] = {}
    transaction: Optional[Transaction] = None


class BudgetController:
    """
    Screen-level actions on an injected :class:`~budget_ledger.ledger.Ledger`.

    Each method takes raw user input, calls the ledger and converts ledger
    errors into an :class:`ActionResult`. Errors that are not
    :class:`~budget_ledger.errors.LedgerError` propagate unchanged.

    Example::

        ledger = Ledger()
        controller = BudgetController(ledger)
        controller.set_budget_from_input("100")
        result = controller.submit_transaction("Lunch", "12.50", category="food")
        print(result.message)
    """

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def set_budget_from_input(self, text: str) -> ActionResult:
        """Parse ``text`` as the new ceiling and apply it."""
        try:
            ceiling = parse_budget(text)
            self._ledger.set_budget(ceiling)
        except LedgerError as exc:
            logger.info("Budget input %r rejected: %s", text, exc.message)
            return self._failure("budget_set", exc)

        symbol = self._ledger.config.currency_symbol
        return ActionResult(
            ok=True,
            action="budget_set",
            message=f"Budget set to {format_currency(ceiling, symbol)}",
        )

    def submit_transaction(
        self,
        title: str | None,
        amount_text: str | None,
        date: dt.date | dt.datetime | None = None,
        category: TransactionCategory | str = TransactionCategory.OTHER,
        today: dt.date | None = None,
    ) -> ActionResult:
        """Validate the add-transaction form and record it on success."""
        try:
            form = TransactionForm.from_fields(title, amount_text, date, category)
            draft = form.to_draft(today=today, earliest=self._ledger.config.earliest_date)
            transaction = self._ledger.add_transaction(
                draft.title, draft.amount, draft.date, draft.category
            )
        except LedgerError as exc:
            return self._failure("transaction_added", exc)

        return ActionResult(
            ok=True,
            action="transaction_added",
            message=TRANSACTION_ADDED_MESSAGE,
            transaction=transaction,
        )

    def delete_transaction(self, index: int) -> ActionResult:
        try:
            transaction = self._ledger.delete_transaction(index)
        except IndexOutOfRangeError as exc:
            return self._failure("transaction_deleted", exc)

        return ActionResult(
            ok=True,
            action="transaction_deleted",
            message=TRANSACTION_DELETED_MESSAGE,
            transaction=transaction,
        )

    def reset_all(self) -> ActionResult:
        self._ledger.reset_all()
        return ActionResult(ok=True, action="reset", message=RESET_MESSAGE)

    # ─── Private helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _failure(action: ActionKind, exc: LedgerError) -> ActionResult:
        if isinstance(exc, BudgetExceededError):
            message = BUDGET_EXCEEDED_MESSAGE
        elif isinstance(exc, FormValidationError):
            message = exc.first_message
        else:
            message = exc.message

        return ActionResult(
            ok=False,
            action=action,
            message=message,
            error_code=exc.code,
            field_errors=exc.errors if isinstance(exc, FormValidationError) else {},
        )
