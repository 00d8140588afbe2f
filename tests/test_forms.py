# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for form parsing and the BudgetController screen actions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from budget_ledger.config import LedgerConfig
from budget_ledger.controller import BUDGET_EXCEEDED_MESSAGE, BudgetController
from budget_ledger.errors import FormValidationError
from budget_ledger.forms import (
    TransactionForm,
    parse_amount,
    parse_budget,
    validate_date,
    validate_title,
)
from budget_ledger.ledger import Ledger
from budget_ledger.types import TransactionCategory

TODAY = date(2024, 6, 1)


# ---------------------------------------------------------------------------
# TestFieldValidation
# ---------------------------------------------------------------------------


class TestFieldValidation:
    def test_parse_amount_accepts_positive_decimal(self) -> None:
        assert parse_amount(" 12.50 ") == Decimal("12.50")

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("", "Enter amount"),
            ("   ", "Enter amount"),
            (None, "Enter amount"),
            ("abc", "Invalid amount"),
            ("0", "Invalid amount"),
            ("-4", "Invalid amount"),
            ("NaN", "Invalid amount"),
        ],
    )
    def test_parse_amount_messages(self, text: str | None, message: str) -> None:
        with pytest.raises(FormValidationError) as exc_info:
            parse_amount(text)
        assert exc_info.value.errors == {"amount": message}

    def test_parse_budget_accepts_zero(self) -> None:
        assert parse_budget("0") == 0

    @pytest.mark.parametrize("text", ["", "twelve", "-1", "inf"])
    def test_parse_budget_rejects_bad_input(self, text: str) -> None:
        with pytest.raises(FormValidationError) as exc_info:
            parse_budget(text)
        assert exc_info.value.first_message == "Invalid budget input"

    def test_validate_title(self) -> None:
        assert validate_title("Lunch") == "Lunch"
        with pytest.raises(FormValidationError, match="Title required"):
            validate_title("  ")

    def test_validate_date_bounds_are_inclusive(self) -> None:
        assert validate_date(date(2020, 1, 1), today=TODAY) == date(2020, 1, 1)
        assert validate_date(TODAY, today=TODAY) == TODAY

    @pytest.mark.parametrize("picked", [date(2019, 12, 31), date(2024, 6, 2)])
    def test_validate_date_outside_bounds(self, picked: date) -> None:
        with pytest.raises(FormValidationError) as exc_info:
            validate_date(picked, today=TODAY)
        assert exc_info.value.errors == {"date": "Invalid date"}

    def test_missing_date_defaults_to_today(self) -> None:
        assert validate_date(None, today=TODAY) == TODAY


# ---------------------------------------------------------------------------
# TestTransactionForm
# ---------------------------------------------------------------------------


class TestTransactionForm:
    def test_valid_form_builds_draft(self) -> None:
        form = TransactionForm(title="Lunch", amount="12.50", date=date(2024, 5, 20), category="food")
        draft = form.to_draft(today=TODAY)
        assert draft.title == "Lunch"
        assert draft.amount == Decimal("12.50")
        assert draft.date == date(2024, 5, 20)
        assert draft.category is TransactionCategory.FOOD

    def test_category_defaults_to_other(self) -> None:
        draft = TransactionForm(title="Misc", amount="1").to_draft(today=TODAY)
        assert draft.category is TransactionCategory.OTHER
        assert draft.date == TODAY

    def test_all_field_errors_are_reported_together(self) -> None:
        form = TransactionForm(title="", amount="x", date=date(2030, 1, 1))
        with pytest.raises(FormValidationError) as exc_info:
            form.to_draft(today=TODAY)
        assert exc_info.value.errors == {
            "title": "Title required",
            "amount": "Invalid amount",
            "date": "Invalid date",
        }
        assert exc_info.value.first_message == "Title required"


# ---------------------------------------------------------------------------
# TestBudgetController
# ---------------------------------------------------------------------------


class TestBudgetController:
    def test_set_budget_from_input(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        result = controller.set_budget_from_input(" 1500 ")
        assert result.ok is True
        assert result.message == "Budget set to $1,500.00"
        assert ledger.budget_ceiling == Decimal("1500")

    def test_invalid_budget_input_leaves_ceiling(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        controller.set_budget_from_input("40")
        result = controller.set_budget_from_input("forty")
        assert result.ok is False
        assert result.message == "Invalid budget input"
        assert result.error_code == "FORM_INVALID"
        assert ledger.budget_ceiling == Decimal("40")

    def test_submit_transaction_records_it(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        controller.set_budget_from_input("100")
        result = controller.submit_transaction(
            "Lunch", "12.50", date(2024, 5, 1), TransactionCategory.FOOD, today=TODAY
        )
        assert result.ok is True
        assert result.message == "Transaction added successfully"
        assert result.transaction is not None
        assert ledger.transactions == (result.transaction,)

    def test_submit_over_budget_reports_exceeded(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        controller.set_budget_from_input("10")
        result = controller.submit_transaction("Dinner", "15", date(2024, 5, 1), "food", today=TODAY)
        assert result.ok is False
        assert result.message == BUDGET_EXCEEDED_MESSAGE
        assert result.error_code == "BUDGET_EXCEEDED"
        assert ledger.transactions == ()

    def test_submit_invalid_form_reports_first_error(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        controller.set_budget_from_input("10")
        result = controller.submit_transaction("", "", today=TODAY)
        assert result.ok is False
        assert result.message == "Title required"
        assert result.field_errors == {"title": "Title required", "amount": "Enter amount"}

    def test_submit_uses_configured_earliest_date(self) -> None:
        ledger = Ledger(LedgerConfig(earliest_date=date(2024, 1, 1)))
        controller = BudgetController(ledger)
        controller.set_budget_from_input("10")
        result = controller.submit_transaction("Old", "1", date(2023, 12, 31), today=TODAY)
        assert result.field_errors == {"date": "Invalid date"}

    def test_delete_and_reset(self, funded_ledger: Ledger) -> None:
        controller = BudgetController(funded_ledger)

        deleted = controller.delete_transaction(0)
        assert deleted.ok is True
        assert deleted.transaction is not None
        assert deleted.transaction.title == "Lunch"

        missing = controller.delete_transaction(10)
        assert missing.ok is False
        assert missing.error_code == "INDEX_OUT_OF_RANGE"

        reset = controller.reset_all()
        assert reset.message == "All data has been reset"
        assert funded_ledger.transactions == ()

    def test_submit_accepts_datetime_as_calendar_date(self, ledger: Ledger) -> None:
        from datetime import datetime

        controller = BudgetController(ledger)
        controller.set_budget_from_input("10")
        result = controller.submit_transaction(
            "Taxi", "4", datetime(2024, 5, 1, 22, 30), "transportation", today=TODAY
        )
        assert result.ok is True
        assert ledger.transactions[0].date == date(2024, 5, 1)

    def test_submit_with_missing_amount_reports_enter_amount(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        controller.set_budget_from_input("10")
        result = controller.submit_transaction("Snack", None, today=TODAY)
        assert result.ok is False
        assert result.field_errors == {"amount": "Enter amount"}

    def test_submit_with_unknown_category_is_a_form_error(self, ledger: Ledger) -> None:
        controller = BudgetController(ledger)
        controller.set_budget_from_input("10")
        result = controller.submit_transaction("Rent", "5", category="housing", today=TODAY)
        assert result.ok is False
        assert result.error_code == "FORM_INVALID"
        assert result.field_errors == {"category": "Invalid category"}
        assert ledger.transactions == ()
