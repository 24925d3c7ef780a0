from datetime import date

from conftest import create_category, create_transaction

GOAL = {
    "name": "Emergency fund",
    "target": 6000,
    "currentAmount": 1500,
    "deadline": "2027-06-30",
    "category": "savings",
}

INVESTMENT = {
    "name": "Oil company shares",
    "type": "stocks",
    "value": 9500,
    "initialValue": 10000,
    "initialDate": "2024-03-01",
    "institution": "broker",
    "returnRate": -5,
}


async def test_category_crud(client, alice):
    created = await create_category(client, alice, name="Transport")
    assert created["type"] == "expense"
    assert created["color"] is None

    response = await client.patch(
        f"/api/categories/{created['id']}", json={"color": "#FF9800", "icon": "bus"},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Transport"
    assert response.json()["color"] == "#FF9800"

    listing = await client.get("/api/categories", headers=alice["headers"])
    assert [c["name"] for c in listing.json()] == ["Transport"]

    deleted = await client.delete(f"/api/categories/{created['id']}", headers=alice["headers"])
    assert deleted.status_code == 200
    assert (await client.get("/api/categories", headers=alice["headers"])).json() == []


async def test_category_in_use_cannot_be_deleted(client, alice):
    food = await create_category(client, alice)
    await create_transaction(client, alice, food)

    response = await client.delete(f"/api/categories/{food['id']}", headers=alice["headers"])

    assert response.status_code == 409
    assert response.json() == {"message": "Category is in use"}


async def test_category_of_other_user(client, alice, bob):
    food = await create_category(client, alice)

    response = await client.patch(
        f"/api/categories/{food['id']}", json={"name": "Mine"}, headers=bob["headers"]
    )
    assert response.status_code == 403
    assert (await client.get("/api/categories", headers=bob["headers"])).json() == []


async def test_budget_category_lifecycle(client, alice):
    food = await create_category(client, alice)
    created = await client.post("/api/budget/categories", headers=alice["headers"], json={
        "categoryId": food["id"], "amount": 600, "month": 10, "year": 2026,
    })
    assert created.status_code == 201
    budget = created.json()

    updated = await client.put(
        f"/api/budget/categories/{budget['id']}", json={"amount": 800}, headers=alice["headers"]
    )
    assert updated.status_code == 200
    assert updated.json()["amount"] == 800
    assert updated.json()["month"] == 10

    october = await client.get(
        "/api/budget/categories", params={"month": 10, "year": 2026}, headers=alice["headers"]
    )
    assert [b["id"] for b in october.json()] == [budget["id"]]
    november = await client.get(
        "/api/budget/categories", params={"month": 11, "year": 2026}, headers=alice["headers"]
    )
    assert november.json() == []

    deleted = await client.delete(f"/api/budget/categories/{budget['id']}", headers=alice["headers"])
    assert deleted.json() == {"success": True}


async def test_budget_validation(client, alice):
    food = await create_category(client, alice)
    for payload in (
        {"categoryId": food["id"], "amount": 0, "month": 10, "year": 2026},
        {"categoryId": food["id"], "amount": 100, "month": 13, "year": 2026},
    ):
        response = await client.post("/api/budget/categories", json=payload, headers=alice["headers"])
        assert response.status_code == 400

    assert (await client.get("/api/budget/categories", headers=alice["headers"])).json() == []


async def test_budget_status(client, alice):
    food = await create_category(client, alice)
    fuel = await create_category(client, alice, name="Fuel")
    for category, amount in ((food, 400), (fuel, 200)):
        await client.post("/api/budget/categories", headers=alice["headers"], json={
            "categoryId": category["id"], "amount": amount, "month": 9, "year": 2026,
        })
    await create_transaction(client, alice, food, amount=100, date="2026-09-10")
    await create_transaction(client, alice, food, amount=50, date="2026-09-30")
    await create_transaction(client, alice, food, amount=999, date="2026-10-01")

    response = await client.get(
        "/api/budget/status", params={"month": 9, "year": 2026}, headers=alice["headers"]
    )

    assert response.status_code == 200
    status = {item["name"]: item for item in response.json()}
    assert status["Food"]["spent"] == 150
    assert status["Food"]["percentage"] == 37.5
    assert status["Fuel"]["spent"] == 0
    assert status["Fuel"]["percentage"] == 0


async def test_budget_status_for_month_without_budgets(client, alice):
    food = await create_category(client, alice)
    await client.post("/api/budget/categories", headers=alice["headers"], json={
        "categoryId": food["id"], "amount": 400, "month": 9, "year": 2026,
    })
    await create_transaction(client, alice, food, amount=120, date="2026-08-15")

    august = await client.get(
        "/api/budget/status", params={"month": 8, "year": 2026}, headers=alice["headers"]
    )
    assert august.status_code == 200
    assert august.json() == []

    september = await client.get(
        "/api/budget/status", params={"month": 9, "year": 2026}, headers=alice["headers"]
    )
    assert [(item["spent"], item["percentage"]) for item in september.json()] == [(0, 0)]


async def test_goals(client, alice):
    created = await client.post("/api/goals", json=GOAL, headers=alice["headers"])
    assert created.status_code == 201
    goal = created.json()
    assert goal["currentAmount"] == 1500

    response = await client.patch(
        f"/api/goals/{goal['id']}", json={"currentAmount": 2000, "userId": 999}, headers=alice["headers"]
    )
    assert response.status_code == 200
    assert response.json()["currentAmount"] == 2000
    assert response.json()["userId"] == alice["id"]

    listing = await client.get("/api/goals", headers=alice["headers"])
    assert [g["name"] for g in listing.json()["goals"]] == ["Emergency fund"]
    assert listing.json()["savingsPotential"] == 0


async def test_goal_savings_potential(client, alice):
    today = date.today().isoformat()
    salary = await create_category(client, alice, name="Salary", type="income")
    food = await create_category(client, alice)
    await create_transaction(client, alice, salary, amount=1000, date=today)
    await create_transaction(client, alice, food, amount=400, date=today)

    response = await client.get("/api/goals", headers=alice["headers"])

    assert response.json()["savingsPotential"] == 600


async def test_goal_validation_and_ownership(client, alice, bob):
    rejected = await client.post("/api/goals", json={**GOAL, "target": 0}, headers=alice["headers"])
    assert rejected.status_code == 400
    assert rejected.json()["errors"][0]["field"] == "target"
    rounded = await client.post("/api/goals", json={**GOAL, "target": 0.004}, headers=alice["headers"])
    assert rounded.status_code == 400
    assert (await client.get("/api/goals", headers=alice["headers"])).json()["goals"] == []

    goal = (await client.post("/api/goals", json=GOAL, headers=alice["headers"])).json()
    assert (await client.get(f"/api/goals/{goal['id']}", headers=bob["headers"])).status_code == 403
    assert (await client.delete(f"/api/goals/{goal['id']}", headers=bob["headers"])).status_code == 403
    assert (await client.delete(f"/api/goals/{goal['id']}", headers=alice["headers"])).status_code == 200
    assert (await client.get(f"/api/goals/{goal['id']}", headers=alice["headers"])).status_code == 404


async def test_investments_with_summary(client, alice):
    created = await client.post("/api/investments", json=INVESTMENT, headers=alice["headers"])
    assert created.status_code == 201
    await client.post("/api/investments", headers=alice["headers"], json={
        **INVESTMENT, "name": "Treasury bonds", "type": "fixed_income", "value": 15000,
        "initialValue": 10000,
    })

    response = await client.get("/api/investments", headers=alice["headers"])

    body = response.json()
    assert len(body["investments"]) == 2
    assert body["summary"] == {
        "totalValue": 24500,
        "totalInitialValue": 20000,
        "totalProfit": 4500,
        "profitPercentage": 22.5,
        "distribution": [
            {"name": "stocks", "value": 9500},
            {"name": "fixed_income", "value": 15000},
        ],
    }


async def test_investment_loss(client, alice):
    investment = (await client.post("/api/investments", json=INVESTMENT, headers=alice["headers"])).json()

    summary = (await client.get("/api/investments", headers=alice["headers"])).json()["summary"]
    assert summary["totalProfit"] == -500
    assert summary["profitPercentage"] == -5

    response = await client.patch(
        f"/api/investments/{investment['id']}", json={"value": 11000}, headers=alice["headers"]
    )
    assert response.json()["value"] == 11000
    assert response.json()["initialValue"] == 10000
