# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for budget-ledger tests."""

from __future__ import annotations

from datetime import date

import pytest

from budget_ledger.config import LedgerConfig
from budget_ledger.ledger import Ledger
from budget_ledger.types import LedgerEvent, TransactionCategory


@pytest.fixture
def day() -> date:
    """A fixed transaction date."""
    return date(2024, 3, 15)


@pytest.fixture
def ledger() -> Ledger:
    """A freshly constructed Ledger with default config (ceiling enforced)."""
    return Ledger()


@pytest.fixture
def loose_ledger() -> Ledger:
    """A Ledger that records transactions regardless of the ceiling."""
    return Ledger(LedgerConfig(enforce_ceiling=False))


@pytest.fixture
def funded_ledger(ledger: Ledger, day: date) -> Ledger:
    """A ledger with a ceiling of 100 and three transactions."""
    ledger.set_budget(100)
    ledger.add_transaction("Lunch", "12.50", day, TransactionCategory.FOOD)
    ledger.add_transaction("Bus", "2.75", day, TransactionCategory.TRANSPORTATION)
    ledger.add_transaction("Cinema", "9.00", day, TransactionCategory.ENTERTAINMENT)
    return ledger


@pytest.fixture
def events(ledger: Ledger) -> list[LedgerEvent]:
    """Every event the ``ledger`` fixture emits, in order."""
    received: list[LedgerEvent] = []
    ledger.subscribe(received.append)
    return received
