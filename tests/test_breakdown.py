# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for the pie-chart breakdown and the display formatters."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from budget_ledger.breakdown import build_breakdown
from budget_ledger.formatting import format_currency, format_debit, format_percent
from budget_ledger.ledger import Ledger
from budget_ledger.types import REMAINING_LABEL, TransactionCategory


# ---------------------------------------------------------------------------
# TestBreakdown
# ---------------------------------------------------------------------------


class TestBreakdown:
    def test_no_ceiling_means_no_slices(self, ledger: Ledger) -> None:
        breakdown = ledger.breakdown()
        assert breakdown.has_budget is False
        assert breakdown.slices == []

    def test_nothing_spent_is_all_remaining(self, ledger: Ledger) -> None:
        ledger.set_budget(40)
        slices = ledger.breakdown().slices
        assert len(slices) == 1
        assert slices[0].label == REMAINING_LABEL
        assert slices[0].is_remaining
        assert slices[0].amount == Decimal("40")
        assert slices[0].percent_of_budget == Decimal("100.0")

    def test_category_slices_then_remaining(self, ledger: Ledger, day: date) -> None:
        ledger.set_budget(100)
        ledger.add_transaction("Lunch", "12.50", day, TransactionCategory.FOOD)
        ledger.add_transaction("Bus", "2.75", day, TransactionCategory.TRANSPORTATION)

        slices = ledger.breakdown().slices
        assert [s.label for s in slices] == ["Food", "Transportation", REMAINING_LABEL]
        assert [s.category for s in slices] == [
            TransactionCategory.FOOD,
            TransactionCategory.TRANSPORTATION,
            None,
        ]
        assert [s.percent_of_budget for s in slices] == [
            Decimal("12.5"),
            Decimal("2.8"),
            Decimal("84.8"),
        ]
        assert slices[2].amount == Decimal("84.75")

    def test_fully_spent_budget_has_no_remaining_slice(self, ledger: Ledger, day: date) -> None:
        ledger.set_budget(20)
        ledger.add_transaction("Game", "20", day, TransactionCategory.ENTERTAINMENT)
        slices = ledger.breakdown().slices
        assert [s.label for s in slices] == ["Entertainment"]
        assert slices[0].percent_of_budget == Decimal("100.0")

    def test_overspent_shares_exceed_one_hundred_percent(self) -> None:
        breakdown = build_breakdown(
            Decimal("10"),
            {TransactionCategory.TECH: Decimal("15")},
            Decimal("-5"),
        )
        assert breakdown.has_budget is True
        assert [s.percent_of_budget for s in breakdown.slices] == [Decimal("150.0")]


# ---------------------------------------------------------------------------
# TestFormatting
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_format_currency_groups_thousands(self) -> None:
        assert format_currency(Decimal("1234.5")) == "$1,234.50"

    def test_format_currency_rounds_half_up(self) -> None:
        assert format_currency(Decimal("2.675")) == "$2.68"

    def test_format_currency_negative_and_symbol(self) -> None:
        assert format_currency(Decimal("-3"), symbol="€") == "-€3.00"

    def test_format_debit(self) -> None:
        assert format_debit(Decimal("12.5")) == "-$12.50"

    def test_format_percent(self) -> None:
        assert format_percent(Decimal("84.75")) == "84.8%"
        assert format_percent(12.5) == "12.5%"
