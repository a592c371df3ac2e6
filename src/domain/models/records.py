"""Immutable records stored in the financial aggregate."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.enums import (
    AssetCategory,
    ExpenseCategory,
    ExpenseMode,
    IncomeSource,
    PurchaseStatus,
)


@dataclass(frozen=True)
class Expense:
    """A logged expense.

    Attributes:
        id: Unique identifier within the expenses collection.
        date: ISO date string (``YYYY-MM-DD``).
        category: Expense category.
        amount: Amount spent.
        description: Free-text description.
        mode: Spending mode the expense belongs to.
    """

    id: str
    date: str
    category: ExpenseCategory
    amount: Decimal
    description: str
    mode: ExpenseMode


@dataclass(frozen=True)
class RecurringExpense:
    """Monthly template materialized into expenses on demand.

    Attributes:
        start_date: First month (``YYYY-MM``) the template applies to.
    """

    id: str
    description: str
    amount: Decimal
    category: ExpenseCategory
    mode: ExpenseMode
    start_date: str
    frequency: str = "monthly"


@dataclass(frozen=True)
class ExpensePlan:
    """Planned spending for a (month, mode) pair."""

    id: str
    month: str
    mode: ExpenseMode
    amount: Decimal


@dataclass(frozen=True)
class Debt:
    """Outstanding debt.

    Attributes:
        interest_rate: Annual rate in percent.
    """

    id: str
    name: str
    original_amount: Decimal
    current_balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal


@dataclass(frozen=True)
class Income:
    """A received income entry."""

    id: str
    date: str
    source: IncomeSource
    amount: Decimal
    description: str


@dataclass(frozen=True)
class IncomeGoal:
    """Income target for a month."""

    id: str
    month: str
    amount: Decimal


@dataclass(frozen=True)
class Asset:
    """Held asset, optionally grouped into a named investment basket."""

    id: str
    name: str
    category: AssetCategory
    amount_invested: Decimal
    current_value: Decimal
    date: str
    basket: str | None = None


@dataclass(frozen=True)
class Purchase:
    """Purchase under consideration."""

    id: str
    name: str
    cost: Decimal
    category: ExpenseCategory
    justification: str
    status: PurchaseStatus
    date_added: str


__all__ = [
    "Expense",
    "RecurringExpense",
    "ExpensePlan",
    "Debt",
    "Income",
    "IncomeGoal",
    "Asset",
    "Purchase",
]
