from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from conftest import create_category, create_transaction

from components.core import periods
from components.core.init_db import get_db


@pytest.fixture
def this_month():
    return periods.first_of_month(date.today())


async def test_overview_for_current_month(client, alice, this_month):
    salary = await create_category(client, alice, name="Salary", type="income")
    food = await create_category(client, alice)
    await create_transaction(client, alice, salary, amount=1000, date=this_month.isoformat())
    await create_transaction(client, alice, food, amount=400, date=this_month.isoformat())
    # Previous month savings of 300
    previous = periods.add_months(this_month, -1).isoformat()
    await create_transaction(client, alice, salary, amount=500, date=previous)
    await create_transaction(client, alice, food, amount=200, date=previous)
    await client.post("/api/budget/categories", headers=alice["headers"], json={
        "categoryId": food["id"], "amount": 500, "month": this_month.month, "year": this_month.year,
    })

    response = await client.get("/api/dashboard/overview", headers=alice["headers"])

    assert response.status_code == 200
    assert response.json() == {
        "currentBalance": 600,
        "monthlyIncome": 1000,
        "monthlyExpenses": 400,
        "monthlySavings": 600,
        "balanceChange": 100.0,
        "lastIncomeDate": this_month.isoformat(),
        "budgetPercentage": 80,
        "savingsChange": 100.0,
    }


async def test_overview_without_data(client, alice):
    response = await client.get("/api/dashboard/overview", headers=alice["headers"])

    assert response.json() == {
        "currentBalance": 0,
        "monthlyIncome": 0,
        "monthlyExpenses": 0,
        "monthlySavings": 0,
        "balanceChange": 0,
        "lastIncomeDate": None,
        "budgetPercentage": 0,
        "savingsChange": 0,
    }


async def test_overview_with_expenses_but_no_budget(client, alice, this_month):
    food = await create_category(client, alice)
    await create_transaction(client, alice, food, amount=250, date=this_month.isoformat())
    # A budget in another month does not count towards this one
    other_month = periods.add_months(this_month, -1)
    await client.post("/api/budget/categories", headers=alice["headers"], json={
        "categoryId": food["id"], "amount": 100, "month": other_month.month, "year": other_month.year,
    })

    response = await client.get("/api/dashboard/overview", headers=alice["headers"])

    assert response.status_code == 200
    assert response.json()["monthlyExpenses"] == 250
    assert response.json()["budgetPercentage"] == 0


async def test_spending_chart_is_zero_filled(client, alice, this_month):
    food = await create_category(client, alice)
    await create_transaction(client, alice, food, amount=75, date=this_month.isoformat())

    response = await client.get(
        "/api/dashboard/spending-chart", params={"timeRange": "3months"}, headers=alice["headers"]
    )

    assert response.status_code == 200
    points = response.json()["chartData"]
    assert [p["month"] for p in points] == [
        periods.add_months(this_month, offset).strftime("%Y-%m") for offset in (-2, -1, 0)
    ]
    assert [p["expenses"] for p in points] == [0, 0, 75]
    assert [p["income"] for p in points] == [0, 0, 0]


async def test_reports(client, alice, this_month):
    food = await create_category(client, alice)
    fuel = await create_category(client, alice, name="Fuel")
    await create_transaction(client, alice, food, amount=30, date=this_month.isoformat())
    await create_transaction(client, alice, fuel, amount=80, date=this_month.isoformat())
    # Outside a six month window
    old = periods.add_months(this_month, -8).isoformat()
    await create_transaction(client, alice, fuel, amount=1000, date=old)

    response = await client.get(
        "/api/reports", params={"reportType": "expense_by_category", "timeRange": "6months"},
        headers=alice["headers"],
    )

    assert response.status_code == 200
    body = response.json()
    assert body["reportType"] == "expense_by_category"
    assert body["timeRange"] == "6months"
    assert body["charts"]["expenseByCategory"] == [
        {"name": "Fuel", "value": 80},
        {"name": "Food", "value": 30},
    ]
    assert len(body["charts"]["expenseVsIncome"]) == 6
    assert body["charts"]["monthlyTrend"][-1] == {"month": this_month.strftime("%Y-%m"), "expenses": 110}


async def test_reports_reject_unknown_range(client, alice):
    response = await client.get("/api/reports", params={"timeRange": "decade"}, headers=alice["headers"])
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "timeRange"


class BrokenSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))


async def test_database_errors_are_hidden(app, client, alice):
    async def broken_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = broken_db

    response = await client.get("/api/goals", headers=alice["headers"])

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "database is gone" not in response.text
