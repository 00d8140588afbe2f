# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Validation for user-entered budget and transaction fields.

These functions turn raw form text into ledger-ready values and report
problems with the short messages a form shows next to the offending field.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from budget_ledger.errors import FormValidationError
from budget_ledger.types import TransactionCategory

EARLIEST_DATE = dt.date(2020, 1, 1)

TITLE_REQUIRED = "Title required"
ENTER_AMOUNT = "Enter amount"
INVALID_AMOUNT = "Invalid amount"
INVALID_BUDGET = "Invalid budget input"
INVALID_DATE = "Invalid date"
INVALID_CATEGORY = "Invalid category"

_FIELD_MESSAGES = {
    "title": TITLE_REQUIRED,
    "amount": INVALID_AMOUNT,
    "date": INVALID_DATE,
    "category": INVALID_CATEGORY,
}


class TransactionDraft(BaseModel, frozen=True):
    """Validated transaction fields, ready for ``Ledger.add_transaction``."""

    title: str
    amount: Decimal
    date: dt.date
    category: TransactionCategory


def _parse_decimal(text: str | None) -> Decimal | None:
    if text is None:
        return None
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def parse_amount(text: str | None) -> Decimal:
    """
    Parse a transaction amount typed by the user.

    Raises:
        FormValidationError: ``Enter amount`` for empty input, ``Invalid
            amount`` for text that is not a positive number.
    """
    if text is None or not text.strip():
        raise FormValidationError({"amount": ENTER_AMOUNT})
    value = _parse_decimal(text)
    if value is None or value <= 0:
        raise FormValidationError({"amount": INVALID_AMOUNT})
    return value


def parse_budget(text: str | None) -> Decimal:
    """
    Parse a budget ceiling typed by the user. Zero is accepted.

    Raises:
        FormValidationError: ``Invalid budget input`` for empty, non-numeric
            or negative input.
    """
    value = _parse_decimal(text)
    if value is None or value < 0:
        raise FormValidationError({"budget": INVALID_BUDGET})
    return value


def validate_title(text: str | None) -> str:
    """Return the title unchanged, or raise ``Title required`` when blank."""
    if text is None or not text.strip():
        raise FormValidationError({"title": TITLE_REQUIRED})
    return text


def validate_date(
    value: dt.date | None,
    today: dt.date | None = None,
    earliest: dt.date = EARLIEST_DATE,
) -> dt.date:
    """
    Check a picked date lies between ``earliest`` and today, inclusive.

    A missing date means today, as with a date picker that was never opened.
    """
    today = today or dt.date.today()
    if value is None:
        return today
    if not earliest <= value <= today:
        raise FormValidationError({"date": INVALID_DATE})
    return value


class TransactionForm(BaseModel):
    """
    Raw contents of the add-transaction form.

    Example::

        form = TransactionForm(title="Lunch", amount="12.50", category="food")
        draft = form.to_draft()
        ledger.add_transaction(draft.title, draft.amount, draft.date, draft.category)
    """

    title: str = ""
    amount: str = ""
    date: Optional[dt.date] = None
    category: TransactionCategory = Field(default=TransactionCategory.OTHER)

    @field_validator("title", "amount", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("date", mode="before")
    @classmethod
    def datetime_to_date(cls, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        return value

    @classmethod
    def from_fields(
        cls,
        title: Any,
        amount: Any,
        date: Any = None,
        category: Any = TransactionCategory.OTHER,
    ) -> TransactionForm:
        """
        Build a form from loosely typed widget values.

        Raises:
            FormValidationError: For values that cannot even be held by the
                form, such as an unknown category or a non-text amount.
        """
        try:
            return cls(title=title, amount=amount, date=date, category=category)
        except ValidationError as exc:
            errors: dict[str, str] = {}
            for error in exc.errors():
                field_name = str(error["loc"][0]) if error["loc"] else "form"
                errors.setdefault(field_name, _FIELD_MESSAGES.get(field_name, error["msg"]))
            raise FormValidationError(errors) from None

    def to_draft(
        self,
        today: dt.date | None = None,
        earliest: dt.date = EARLIEST_DATE,
    ) -> TransactionDraft:
        """
        Validate every field and build a draft.

        Raises:
            FormValidationError: With one message per failing field, in form
                order (title, amount, date).
        """
        errors: dict[str, str] = {}
        values: dict[str, object] = {}

        checks = (
            ("title", lambda: validate_title(self.title)),
            ("amount", lambda: parse_amount(self.amount)),
            ("date", lambda: validate_date(self.date, today=today, earliest=earliest)),
        )
        for field_name, check in checks:
            try:
                values[field_name] = check()
            except FormValidationError as exc:
                errors.update(exc.errors)

        if errors:
            raise FormValidationError(errors)

        return TransactionDraft(category=self.category, **values)
