"""The financial aggregate root."""

from dataclasses import dataclass

from src.domain.models.records import (
    Asset,
    Debt,
    Expense,
    ExpensePlan,
    Income,
    IncomeGoal,
    Purchase,
    RecurringExpense,
)


@dataclass(frozen=True)
class FinancialData:
    """Single root document owning every entity collection.

    Collections are tuples so that each revision of the aggregate stays
    immutable once produced by the reducer.
    """

    expenses: tuple[Expense, ...] = ()
    recurring_expenses: tuple[RecurringExpense, ...] = ()
    debts: tuple[Debt, ...] = ()
    income: tuple[Income, ...] = ()
    assets: tuple[Asset, ...] = ()
    income_goals: tuple[IncomeGoal, ...] = ()
    expense_plans: tuple[ExpensePlan, ...] = ()
    purchases: tuple[Purchase, ...] = ()


__all__ = ["FinancialData"]
