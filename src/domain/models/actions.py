"""Actions accepted by the financial reducer.

Every mutation of ``FinancialData`` is described by one of these immutable
actions. Records carried by ``Add*``/``Update*`` actions already hold their
ids; lookups by id that match nothing are no-ops.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.enums import ExpenseMode, PurchaseStatus
from src.domain.models.financial_data import FinancialData
from src.domain.models.records import (
    Asset,
    Debt,
    Expense,
    Income,
    Purchase,
    RecurringExpense,
)


@dataclass(frozen=True)
class SetState:
    payload: FinancialData


@dataclass(frozen=True)
class AddExpense:
    expense: Expense


@dataclass(frozen=True)
class UpdateExpense:
    expense: Expense


@dataclass(frozen=True)
class DeleteExpense:
    id: str


@dataclass(frozen=True)
class AddRecurringExpense:
    recurring_expense: RecurringExpense


@dataclass(frozen=True)
class UpdateRecurringExpense:
    recurring_expense: RecurringExpense


@dataclass(frozen=True)
class DeleteRecurringExpense:
    id: str


@dataclass(frozen=True)
class LogRecurringExpensesForMonth:
    """Materialize recurring templates into expenses for ``month``."""

    month: str


@dataclass(frozen=True)
class AddDebt:
    debt: Debt


@dataclass(frozen=True)
class UpdateDebt:
    debt: Debt


@dataclass(frozen=True)
class DeleteDebt:
    id: str


@dataclass(frozen=True)
class UpdateDebtBalance:
    id: str
    new_balance: Decimal


@dataclass(frozen=True)
class AddIncome:
    income: Income


@dataclass(frozen=True)
class UpdateIncome:
    income: Income


@dataclass(frozen=True)
class DeleteIncome:
    id: str


@dataclass(frozen=True)
class AddAsset:
    asset: Asset


@dataclass(frozen=True)
class UpdateAsset:
    asset: Asset


@dataclass(frozen=True)
class DeleteAsset:
    id: str


@dataclass(frozen=True)
class UpdateAssetValue:
    id: str
    new_value: Decimal


@dataclass(frozen=True)
class RenameBasket:
    """Rename an investment basket on every asset that belongs to it."""

    old_name: str
    new_name: str


@dataclass(frozen=True)
class AddPurchase:
    purchase: Purchase


@dataclass(frozen=True)
class UpdatePurchase:
    purchase: Purchase


@dataclass(frozen=True)
class DeletePurchase:
    id: str


@dataclass(frozen=True)
class UpdatePurchaseStatus:
    """Change a purchase status.

    Attributes:
        on_date: ISO date used for the expense logged when the purchase is
            marked as purchased. Defaults to today.
    """

    id: str
    status: PurchaseStatus
    on_date: str | None = None


@dataclass(frozen=True)
class UpsertIncomeGoal:
    month: str
    amount: Decimal


@dataclass(frozen=True)
class DeleteIncomeGoal:
    id: str


@dataclass(frozen=True)
class UpsertExpensePlan:
    month: str
    mode: ExpenseMode
    amount: Decimal


@dataclass(frozen=True)
class DeleteExpensePlan:
    id: str


FinancialAction = (
    SetState
    | AddExpense
    | UpdateExpense
    | DeleteExpense
    | AddRecurringExpense
    | UpdateRecurringExpense
    | DeleteRecurringExpense
    | LogRecurringExpensesForMonth
    | AddDebt
    | UpdateDebt
    | DeleteDebt
    | UpdateDebtBalance
    | AddIncome
    | UpdateIncome
    | DeleteIncome
    | AddAsset
    | UpdateAsset
    | DeleteAsset
    | UpdateAssetValue
    | RenameBasket
    | AddPurchase
    | UpdatePurchase
    | DeletePurchase
    | UpdatePurchaseStatus
    | UpsertIncomeGoal
    | DeleteIncomeGoal
    | UpsertExpensePlan
    | DeleteExpensePlan
)


__all__ = [
    "SetState",
    "AddExpense",
    "UpdateExpense",
    "DeleteExpense",
    "AddRecurringExpense",
    "UpdateRecurringExpense",
    "DeleteRecurringExpense",
    "LogRecurringExpensesForMonth",
    "AddDebt",
    "UpdateDebt",
    "DeleteDebt",
    "UpdateDebtBalance",
    "AddIncome",
    "UpdateIncome",
    "DeleteIncome",
    "AddAsset",
    "UpdateAsset",
    "DeleteAsset",
    "UpdateAssetValue",
    "RenameBasket",
    "AddPurchase",
    "UpdatePurchase",
    "DeletePurchase",
    "UpdatePurchaseStatus",
    "UpsertIncomeGoal",
    "DeleteIncomeGoal",
    "UpsertExpensePlan",
    "DeleteExpensePlan",
    "FinancialAction",
]
