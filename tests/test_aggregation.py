from datetime import date
from types import SimpleNamespace

import pytest

from components.budget.repository import consumed_percentage
from components.dashboard.repository import build_overview
from components.goal.repository import savings_potential
from components.investment.repository import summarize_portfolio
from components.report.repository import (
    expense_by_category,
    expense_vs_income,
    monthly_totals,
    monthly_trend,
    transactions_frame,
)


def holding(type, value, initial_value):
    return SimpleNamespace(type=type, value=value, initial_value=initial_value)


def entry(day, type, amount, category_id=1):
    return SimpleNamespace(date=day, type=type, amount=amount, category_id=category_id)


def test_overview_from_month_totals():
    overview = build_overview(
        {"income": 1000.0, "expense": 400.0},
        {"income": 800.0, "expense": 400.0},
        total_budget=500.0,
        last_income_date=date(2026, 10, 1),
    )

    assert overview.monthly_income == 1000
    assert overview.monthly_expenses == 400
    assert overview.monthly_savings == 600
    assert overview.current_balance == 600
    assert overview.budget_percentage == 80
    assert overview.balance_change == 50.0
    assert overview.savings_change == 50.0
    assert overview.last_income_date == date(2026, 10, 1)


def test_overview_without_budget_or_history():
    overview = build_overview({"income": 0.0, "expense": 120.0}, {}, total_budget=0)

    assert overview.budget_percentage == 0
    assert overview.balance_change == 0
    assert overview.monthly_savings == -120
    assert overview.last_income_date is None


def test_portfolio_summary():
    summary = summarize_portfolio([
        holding("stocks", 9500, 10000),
        holding("fixed_income", 15000, 10000),
        holding("stocks", 500, 500),
    ])

    assert summary.total_value == 25000
    assert summary.total_initial_value == 20500
    assert summary.total_profit == 4500
    assert summary.profit_percentage == pytest.approx(21.95)
    assert [(item.name, item.value) for item in summary.distribution] == [
        ("stocks", 10000),
        ("fixed_income", 15000),
    ]


def test_portfolio_loss_and_empty():
    loss = summarize_portfolio([holding("stocks", 9500, 10000)])
    assert loss.total_profit == -500
    assert loss.profit_percentage == -5

    empty = summarize_portfolio([])
    assert empty.total_value == 0
    assert empty.profit_percentage == 0
    assert empty.distribution == []

    assert summarize_portfolio([holding("gift", 100, 0)]).profit_percentage == 0


def test_budget_and_savings_helpers():
    assert consumed_percentage(150, 600) == 25
    assert consumed_percentage(150, 0) == 0
    assert savings_potential(1000, 400.25) == 599.75
    assert savings_potential(400, 1000) == 0


def test_monthly_totals_zero_fill():
    months = ["2026-08", "2026-09", "2026-10"]
    frame = transactions_frame([
        entry(date(2026, 8, 3), "income", 1000),
        entry(date(2026, 8, 9), "expense", 100, category_id=1),
        entry(date(2026, 10, 2), "expense", 50.5, category_id=2),
        entry(date(2026, 10, 20), "expense", 20, category_id=1),
    ])

    totals = monthly_totals(frame, months)

    assert [(p.month, p.income, p.expenses) for p in expense_vs_income(totals)] == [
        ("2026-08", 1000, 100),
        ("2026-09", 0, 0),
        ("2026-10", 0, 70.5),
    ]
    assert [(p.month, p.expenses) for p in monthly_trend(totals)] == [
        ("2026-08", 100), ("2026-09", 0), ("2026-10", 70.5),
    ]
    assert [(c.name, c.value) for c in expense_by_category(frame, {1: "Food", 2: "Fuel"})] == [
        ("Food", 120), ("Fuel", 50.5),
    ]


def test_reports_without_transactions():
    months = ["2026-09", "2026-10"]
    frame = transactions_frame([])

    points = expense_vs_income(monthly_totals(frame, months))

    assert [(p.month, p.income, p.expenses) for p in points] == [("2026-09", 0, 0), ("2026-10", 0, 0)]
    assert expense_by_category(frame, {}) == []
