"""Seed dataset used when no stored aggregate is available."""

from decimal import Decimal

from src.domain.models import (
    Asset,
    AssetCategory,
    Debt,
    Expense,
    ExpenseCategory,
    ExpenseMode,
    ExpensePlan,
    FinancialData,
    Income,
    IncomeGoal,
    IncomeSource,
    RecurringExpense,
)
from src.domain.services.normalization import month_range

SEED_START_MONTH = "2025-11"
SEED_MONTHS = 14

SURVIVAL_PLAN = Decimal("800")
GROWTH_PLAN = Decimal("1500")

INCOME_GOAL_AMOUNTS = (
    1500, 1800, 2000, 2200, 2500, 2800, 3000,
    3200, 3500, 3800, 4000, 4200, 4500, 5000,
)


def build_seed_data() -> FinancialData:
    """Return the fixed starter aggregate.

    Returns:
        FinancialData: Three manual November expenses, three monthly
        templates starting ``2025-11``, two debts, income, four assets and
        fourteen months of goals and plans.
    """
    months = month_range(SEED_START_MONTH, SEED_MONTHS)
    return FinancialData(
        expenses=(
            Expense(
                "e1", "2025-11-05", ExpenseCategory.HOUSING,
                Decimal("650"), "Rent", ExpenseMode.SURVIVAL,
            ),
            Expense(
                "e2", "2025-11-03", ExpenseCategory.FOOD,
                Decimal("80"), "Groceries", ExpenseMode.SURVIVAL,
            ),
            Expense(
                "e3", "2025-11-10", ExpenseCategory.TRAINING_GYM,
                Decimal("50"), "Gym Membership", ExpenseMode.GROWTH,
            ),
        ),
        recurring_expenses=(
            RecurringExpense(
                "re1", "Rent", Decimal("650"), ExpenseCategory.HOUSING,
                ExpenseMode.SURVIVAL, SEED_START_MONTH,
            ),
            RecurringExpense(
                "re2", "Gym Membership", Decimal("50"),
                ExpenseCategory.TRAINING_GYM, ExpenseMode.GROWTH,
                SEED_START_MONTH,
            ),
            RecurringExpense(
                "re3", "Phone Bill", Decimal("30"), ExpenseCategory.PERSONAL,
                ExpenseMode.SURVIVAL, SEED_START_MONTH,
            ),
        ),
        debts=(
            Debt(
                "d1", "Student Loan", Decimal("5000"), Decimal("4800"),
                Decimal("5.5"), Decimal("100"),
            ),
            Debt(
                "d2", "Credit Card", Decimal("2000"), Decimal("1200"),
                Decimal("19.9"), Decimal("50"),
            ),
        ),
        income=(
            Income(
                "i1", "2025-11-15", IncomeSource.CONSULTING,
                Decimal("1200"), "Project Alpha",
            ),
            Income(
                "i2", "2025-11-28", IncomeSource.NEWSLETTER,
                Decimal("50"), "November Payout",
            ),
            Income(
                "i3", "2025-12-15", IncomeSource.CONSULTING,
                Decimal("1500"), "Project Bravo",
            ),
        ),
        assets=(
            Asset(
                "a1", "Emergency Fund", AssetCategory.EMERGENCY_FUND,
                Decimal("3000"), Decimal("3000"), "2025-01-01", "Safety Net",
            ),
            Asset(
                "a2", "Savings Account", AssetCategory.SAVINGS,
                Decimal("500"), Decimal("500"), "2025-01-01", "Safety Net",
            ),
            Asset(
                "a3", "Bitcoin", AssetCategory.CRYPTO,
                Decimal("1000"), Decimal("1500"), "2024-06-15", "Growth",
            ),
            Asset(
                "a4", "VWCE ETF", AssetCategory.STOCKS_ETFS,
                Decimal("800"), Decimal("950"), "2024-08-20", "Growth",
            ),
        ),
        income_goals=tuple(
            IncomeGoal(f"ig{index + 1}", month, Decimal(amount))
            for index, (month, amount) in enumerate(
                zip(months, INCOME_GOAL_AMOUNTS)
            )
        ),
        expense_plans=(
            *(
                ExpensePlan(
                    f"eps{index}", month, ExpenseMode.SURVIVAL, SURVIVAL_PLAN
                )
                for index, month in enumerate(months)
            ),
            *(
                ExpensePlan(
                    f"epg{index}", month, ExpenseMode.GROWTH, GROWTH_PLAN
                )
                for index, month in enumerate(months)
            ),
        ),
        purchases=(),
    )


__all__ = ["build_seed_data", "SEED_START_MONTH"]
