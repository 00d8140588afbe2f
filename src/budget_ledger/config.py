# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class LedgerConfig(BaseModel, frozen=True):
    """
    Configuration for a :class:`~budget_ledger.ledger.Ledger`.

    Pass an instance at construction time. All fields have defaults.

    Attributes:
        enforce_ceiling: When True, ``add_transaction`` raises
            :class:`~budget_ledger.errors.BudgetExceededError` instead of
            recording a transaction that would take total spending above the
            budget ceiling. When False the ceiling is advisory and callers are
            expected to consult ``Ledger.check()`` themselves.
        currency_symbol: Symbol used when formatting amounts for display.
        earliest_date: Oldest transaction date accepted by form validation.

    Example::

        config = LedgerConfig(enforce_ceiling=False)
        ledger = Ledger(config=config)
    """

    enforce_ceiling: bool = True
    currency_symbol: str = Field(default="$", min_length=1)
    earliest_date: date = date(2020, 1, 1)
