# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Display formatting for amounts and percentages."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """
    Format an amount with thousands separators and two decimals.

    Negative amounts keep the sign in front of the symbol.

    Example:
        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
        >>> format_currency(Decimal("-3"))
        '-$3.00'
    """
    rounded = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_debit(amount: Decimal, symbol: str = "$") -> str:
    """Format a transaction amount as money leaving the budget, e.g. ``-$12.50``."""
    return format_currency(-abs(Decimal(amount)), symbol)


def format_percent(value: Decimal | float) -> str:
    """One-decimal percentage, e.g. ``12.5%``."""
    rounded = Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"
