"""Domain models package."""

from .enums import (
    AssetCategory,
    ExpenseCategory,
    ExpenseMode,
    IncomeSource,
    PurchaseStatus,
)
from .finance import (
    AllocationAmount,
    AllocationBreakdown,
    BasketSummary,
    DebtProgress,
    MonthlyBalance,
    NetWorthSummary,
    PurchasesImpact,
    RunwayInputs,
    VarianceRow,
)
from .financial_data import FinancialData
from .insight import InsightError, InsightErrorKind, InsightOk, InsightResult
from .records import (
    Asset,
    Debt,
    Expense,
    ExpensePlan,
    Income,
    IncomeGoal,
    Purchase,
    RecurringExpense,
)

__all__ = [
    "AssetCategory",
    "ExpenseCategory",
    "ExpenseMode",
    "IncomeSource",
    "PurchaseStatus",
    "AllocationAmount",
    "AllocationBreakdown",
    "BasketSummary",
    "DebtProgress",
    "MonthlyBalance",
    "NetWorthSummary",
    "PurchasesImpact",
    "RunwayInputs",
    "VarianceRow",
    "FinancialData",
    "InsightError",
    "InsightErrorKind",
    "InsightOk",
    "InsightResult",
    "Asset",
    "Debt",
    "Expense",
    "ExpensePlan",
    "Income",
    "IncomeGoal",
    "Purchase",
    "RecurringExpense",
]
