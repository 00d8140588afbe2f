# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
budget-ledger — a budget ceiling, its transactions and spending by category.

Quick start::

    from datetime import date
    from budget_ledger import Ledger, TransactionCategory

    ledger = Ledger()
    ledger.subscribe(lambda event: print(event.kind))
    ledger.set_budget(100)
    ledger.add_transaction("Lunch", "12.50", date.today(), TransactionCategory.FOOD)

    print(ledger.remaining)              # Decimal('87.50')
    print(ledger.spending_by_category)   # {<TransactionCategory.FOOD: 'food'>: Decimal('12.50')}
"""

from budget_ledger.aggregation import (
    NEAR_LIMIT_PROGRESS,
    build_summary,
    remaining_balance,
    spending_by_category,
    spending_progress,
    total_spent,
    utilization_percent,
)
from budget_ledger.breakdown import build_breakdown, percent_of
from budget_ledger.config import LedgerConfig
from budget_ledger.controller import ActionResult, BudgetController
from budget_ledger.errors import (
    BudgetExceededError,
    FormValidationError,
    IndexOutOfRangeError,
    InvalidAmountError,
    LedgerError,
)
from budget_ledger.events import ChangeNotifier, LedgerListener
from budget_ledger.formatting import format_currency, format_debit, format_percent
from budget_ledger.forms import (
    TransactionDraft,
    TransactionForm,
    parse_amount,
    parse_budget,
    validate_date,
    validate_title,
)
from budget_ledger.ledger import Ledger
from budget_ledger.transaction import build_transaction, filter_transactions, to_amount
from budget_ledger.types import (
    REMAINING_LABEL,
    BreakdownSlice,
    ChangeKind,
    CheckReason,
    LedgerEvent,
    LedgerSummary,
    SpendCheckResult,
    SpendingBreakdown,
    Transaction,
    TransactionCategory,
    TransactionFilter,
)

__all__ = [
    # Core classes
    "Ledger",
    "BudgetController",
    "ChangeNotifier",
    # Types
    "TransactionCategory",
    "Transaction",
    "TransactionFilter",
    "CheckReason",
    "SpendCheckResult",
    "ChangeKind",
    "LedgerEvent",
    "LedgerListener",
    "LedgerSummary",
    "BreakdownSlice",
    "SpendingBreakdown",
    "REMAINING_LABEL",
    "ActionResult",
    "TransactionDraft",
    "TransactionForm",
    # Config
    "LedgerConfig",
    # Errors
    "LedgerError",
    "InvalidAmountError",
    "IndexOutOfRangeError",
    "BudgetExceededError",
    "FormValidationError",
    # Utilities
    "to_amount",
    "build_transaction",
    "filter_transactions",
    "total_spent",
    "remaining_balance",
    "spending_by_category",
    "spending_progress",
    "utilization_percent",
    "build_summary",
    "NEAR_LIMIT_PROGRESS",
    "build_breakdown",
    "percent_of",
    "parse_amount",
    "parse_budget",
    "validate_title",
    "validate_date",
    "format_currency",
    "format_debit",
    "format_percent",
]
