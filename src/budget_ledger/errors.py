# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from decimal import Decimal


class LedgerError(Exception):
    """Base class for all budget-ledger errors."""

    def __init__(self, message: str, code: str = "LEDGER_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidAmountError(LedgerError, ValueError):
    """
    Raised when a monetary amount is rejected.

    Transaction amounts must be positive and finite. Budget ceilings must be
    finite and non-negative.

    Attributes:
        value: The value that was rejected, as supplied by the caller.
    """

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Invalid amount {value!r}: {reason}.", code="INVALID_AMOUNT")
        self.value = value
        self.reason = reason


class IndexOutOfRangeError(LedgerError, IndexError):
    """
    Raised when a transaction position does not exist.

    Attributes:
        index: The position that was requested.
        length: The number of transactions at the time of the request.
    """

    def __init__(self, index: int, length: int) -> None:
        if length == 0:
            detail = "the ledger has no transactions"
        else:
            detail = f"valid positions are 0..{length - 1}"
        super().__init__(
            f"Transaction index {index} is out of range; {detail}.",
            code="INDEX_OUT_OF_RANGE",
        )
        self.index = index
        self.length = length


class BudgetExceededError(LedgerError):
    """
    Raised when a transaction would push total spending over the ceiling.

    Attributes:
        requested: The amount of the rejected transaction.
        available: What was left of the ceiling before the request.
        ceiling: The budget ceiling in force.
    """

    def __init__(self, requested: Decimal, available: Decimal, ceiling: Decimal) -> None:
        super().__init__(
            f"Transaction of {requested} exceeds the remaining budget "
            f"({available} of {ceiling} left).",
            code="BUDGET_EXCEEDED",
        )
        self.requested = requested
        self.available = available
        self.ceiling = ceiling


class FormValidationError(LedgerError, ValueError):
    """
    Raised when user-entered form fields fail validation.

    Attributes:
        errors: Field name to user-facing message, in form order.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        summary = "; ".join(f"{field}: {message}" for field, message in errors.items())
        super().__init__(f"Form is invalid ({summary}).", code="FORM_INVALID")
        self.errors = dict(errors)

    @property
    def first_message(self) -> str:
        """The message for the first failing field."""
        return next(iter(self.errors.values()))
