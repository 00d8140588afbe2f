# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
category_breakdown.py

Drives the ledger through BudgetController the way a screen would: raw text
from form fields in, banner messages out. Ends by printing the pie-chart
slices as a text bar chart.

Run with:  python examples/category_breakdown.py
"""

from datetime import date, timedelta

from budget_ledger import BudgetController, Ledger, format_currency, format_percent

ledger = Ledger()
controller = BudgetController(ledger)

today = date.today()

actions = [
    controller.set_budget_from_input("two hundred"),
    controller.set_budget_from_input("200"),
    controller.submit_transaction("Groceries", "54.20", today - timedelta(days=2), "food"),
    controller.submit_transaction("", "10", today, "other"),
    controller.submit_transaction("Train pass", "45", today - timedelta(days=1), "transportation"),
    controller.submit_transaction("Concert", "120", today, "entertainment"),
    controller.submit_transaction("USB cable", "8.99", today, "tech"),
    controller.submit_transaction("Coffee", "3.80", today, "food"),
]

for result in actions:
    status = "ok " if result.ok else "ERR"
    print(f"[{status}] {result.action:<20} {result.message}")

# ─── Chart ────────────────────────────────────────────────────────────────────

breakdown = ledger.breakdown()
print(f"\nSpending by category (budget {format_currency(breakdown.budget_ceiling)})")
for chart_slice in breakdown.slices:
    bar = "#" * int(chart_slice.percent_of_budget // 2)
    print(
        f"  {chart_slice.label:<15} {format_currency(chart_slice.amount):>10} "
        f"{format_percent(chart_slice.percent_of_budget):>7} {bar}"
    )

print(f"\n{controller.reset_all().message}")
