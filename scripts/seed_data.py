"""Script to seed demo data into the database."""

from datetime import date, timedelta
import asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from components.core import periods
from components.core.init_db import db_manager, get_db
from components.core.logger import get_logger, setup_logging
from components.user.models import User
from components.user.repository import UserRepository
from components.user.schemas import UserCreate
from components.category.repository import CategoryRepository
from components.category.schemas import CategoryCreate
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import TransactionCreate
from components.budget.repository import BudgetRepository
from components.budget.schemas import BudgetCategoryCreate
from components.goal.repository import GoalRepository
from components.goal.schemas import GoalCreate
from components.investment.repository import InvestmentRepository
from components.investment.schemas import InvestmentCreate

logger = get_logger(__name__)

DEMO_USER = UserCreate(
    username="demo",
    email="demo@example.com",
    password="password",
    first_name="Demo",
    last_name="User",
)

CATEGORIES = [
    ("Food", "expense", "#4CAF50", "restaurant"),
    ("Housing", "expense", "#2196F3", "home"),
    ("Transport", "expense", "#FF9800", "directions_car"),
    ("Entertainment", "expense", "#F44336", "movie"),
    ("Health", "expense", "#E91E63", "medical_services"),
    ("Education", "expense", "#673AB7", "school"),
    ("Shopping", "expense", "#3F51B5", "shopping_bag"),
    ("Bills", "expense", "#607D8B", "receipt"),
    ("Income", "income", "#4CAF50", "payments"),
    ("Investments", "expense", "#009688", "trending_up"),
]

BUDGETS = {
    "Food": 1200,
    "Housing": 1500,
    "Transport": 600,
    "Entertainment": 400,
    "Health": 800,
    "Education": 500,
    "Shopping": 300,
    "Bills": 700,
}

# (description, amount, days before today, type, category)
TRANSACTIONS = [
    ("Supermarket", 253.78, 0, "expense", "Food"),
    ("Electricity bill", 187.45, 1, "expense", "Housing"),
    ("Salary", 8350.00, 3, "income", "Income"),
    ("Gas station", 152.37, 4, "expense", "Transport"),
    ("Cinema", 84.00, 5, "expense", "Entertainment"),
    ("Pharmacy", 76.50, 7, "expense", "Health"),
    ("Internet", 109.90, 9, "expense", "Bills"),
    ("Restaurant", 120.00, 10, "expense", "Food"),
    ("Taxi", 32.50, 11, "expense", "Transport"),
    ("Freelance", 1200.00, 14, "income", "Income"),
]

GOALS = [
    ("Trip to Europe", 21000, 15750, 180, "travel", "End of year holidays"),
    ("Apartment down payment", 50000, 11500, 365, "real_estate", "Two-bedroom apartment"),
    ("MBA", 24000, 10800, 240, "education", "Professional specialization"),
]

INVESTMENTS = [
    ("Treasury bonds", "fixed_income", 15000, 10000, 900, "bank", 12.5, "Inflation-linked"),
    ("Oil company shares", "stocks", 9500, 10000, 960, "broker", -5, "Preferred shares"),
    ("Real estate fund", "real_estate", 7800, 5000, 1070, "broker", 56, "Shopping malls"),
]


async def seed_data(session: AsyncSession, today: date) -> User:
    """
    Seed a demo user with categories, budgets, transactions, goals and
    investments. Each section is skipped when the user already has rows in it.
    """
    users = UserRepository(session)
    user = await users.get_by_username(DEMO_USER.username)
    if not user:
        user = await users.create(DEMO_USER)
        logger.info("Created demo user %s", user.id)

    categories = CategoryRepository(session)
    if not await categories.get_all(user.id):
        for name, category_type, color, icon in CATEGORIES:
            await categories.create(
                user.id, CategoryCreate(name=name, type=category_type, color=color, icon=icon)
            )
        logger.info("Created categories")
    category_ids = {name: category_id for category_id, name in (await categories.get_names(user.id)).items()}

    budgets = BudgetRepository(session)
    if not await budgets.get_all(user.id):
        for name, amount in BUDGETS.items():
            if name in category_ids:
                await budgets.create(user.id, BudgetCategoryCreate(
                    category_id=category_ids[name],
                    amount=amount,
                    month=today.month,
                    year=today.year,
                ))
        logger.info("Created budget categories")

    transactions = TransactionRepository(session)
    if not await transactions.count(user.id):
        month_start = periods.first_of_month(today)
        for description, amount, days_ago, transaction_type, name in TRANSACTIONS:
            # Keep the samples inside the current month
            day = max(today - timedelta(days=days_ago), month_start)
            await transactions.create(user.id, TransactionCreate(
                description=description,
                amount=amount,
                date=day,
                type=transaction_type,
                category_id=category_ids[name],
            ))
        logger.info("Created sample transactions")

    goals = GoalRepository(session)
    if not await goals.get_all(user.id):
        for name, target, current_amount, days_ahead, category, notes in GOALS:
            await goals.create(user.id, GoalCreate(
                name=name,
                target=target,
                current_amount=current_amount,
                deadline=today + timedelta(days=days_ahead),
                category=category,
                notes=notes,
            ))
        logger.info("Created financial goals")

    investments = InvestmentRepository(session)
    if not await investments.get_all(user.id):
        for name, investment_type, value, initial_value, days_ago, institution, rate, notes in INVESTMENTS:
            await investments.create(user.id, InvestmentCreate(
                name=name,
                type=investment_type,
                value=value,
                initial_value=initial_value,
                initial_date=today - timedelta(days=days_ago),
                institution=institution,
                return_rate=rate,
                notes=notes,
            ))
        logger.info("Created investments")

    return user


async def main() -> None:
    """Create missing tables and seed the configured database."""
    setup_logging()
    await db_manager.create_tables()
    async for db in get_db():
        await seed_data(db, date.today())
    await db_manager.dispose()
    logger.info("Database seeding completed")


if __name__ == "__main__":
    asyncio.run(main())
