# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_ledger.py

Demonstrates the minimal loop for a budget ledger:
  1. Create a ledger and subscribe a listener.
  2. Set a budget ceiling.
  3. Record purchases; the ledger refuses the one that would overspend.
  4. Print the summary and per-category spending.

Run with:  python examples/basic_ledger.py
(from the repository root with budget-ledger installed)
"""

import logging
from datetime import date

from budget_ledger import (
    BudgetExceededError,
    Ledger,
    LedgerEvent,
    TransactionCategory,
    format_currency,
    format_debit,
)

logging.basicConfig(level=logging.DEBUG, format="%(levelname)-5s %(name)s: %(message)s")

# ─── Setup ────────────────────────────────────────────────────────────────────

ledger = Ledger()


def on_change(event: LedgerEvent) -> None:
    print(f"  [event] {event.kind:<20} remaining={format_currency(ledger.remaining)}")


ledger.subscribe(on_change)
ledger.set_budget(100)

# ─── Simulate a day of purchases ──────────────────────────────────────────────

purchases = [
    ("Lunch", "12.50", TransactionCategory.FOOD),
    ("Bus", "2.75", TransactionCategory.TRANSPORTATION),
    ("Headphones", "89.99", TransactionCategory.TECH),
    ("Cinema", "9.00", TransactionCategory.ENTERTAINMENT),
]

for title, amount, category in purchases:
    try:
        ledger.add_transaction(title, amount, date.today(), category)
    except BudgetExceededError as exc:
        print(f"DENIED  {title}: {exc.message}")
        continue
    print(f"RECORDED {title} {format_debit(ledger.transactions[-1].amount)}")

# ─── Summary ──────────────────────────────────────────────────────────────────

summary = ledger.summary()

print("\n── Budget summary ────────────────────────────────────")
print(f"  Budget      : {format_currency(summary.budget_ceiling)}")
print(f"  Spent       : {format_currency(summary.total_spent)}")
print(f"  Remaining   : {format_currency(summary.remaining)}")
print(f"  Utilization : {summary.utilization_percent:.1f}%")
print("──────────────────────────────────────────────────────")

for category, spent in ledger.spending_by_category.items():
    print(f"  {category.label():<15} {format_currency(spent)}")
