"""Use case to compute the monthly cash flow and budget variances."""

from dataclasses import dataclass

from src.application.use_cases.financial_store import FinancialStore
from src.domain.models import (
    ExpenseMode,
    MonthlyBalance,
    PurchasesImpact,
    VarianceRow,
)
from src.domain.services.finance import (
    expense_plan_variance,
    income_goal_variance,
    monthly_balance,
    planned_purchases_impact,
)
from src.domain.services.normalization import month_range
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CashflowView:
    """Monthly balance and planned purchase impact for UI rendering."""

    balance: MonthlyBalance
    purchases: PurchasesImpact


class GetCashflowUseCase:
    """Compute monthly income, expenses and net flow."""

    def __init__(self, store: FinancialStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Store exposing the current aggregate.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, month: str) -> CashflowView:
        """Return the cash flow for ``month``.

        Args:
            month: Month key (``YYYY-MM``).

        Returns:
            CashflowView: Monthly balance and purchase impact.
        """
        state = self._store.state
        balance = monthly_balance(state, month)
        self._logger.info(
            f"Cashflow computed for {month}: in={balance.total_in}, "
            f"out={balance.total_out}"
        )
        return CashflowView(
            balance=balance,
            purchases=planned_purchases_impact(state, month),
        )


class GetBudgetVarianceUseCase:
    """Compare spending with plans and income with goals over months."""

    def __init__(self, store: FinancialStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def expense_rows(
        self,
        start_month: str,
        months: int,
        mode: ExpenseMode,
    ) -> list[VarianceRow]:
        """Return ``planned - actual`` rows for consecutive months."""
        state = self._store.state
        return [
            expense_plan_variance(state, month, mode)
            for month in month_range(start_month, months)
        ]

    def income_rows(self, start_month: str, months: int) -> list[VarianceRow]:
        """Return ``actual - goal`` rows for consecutive months."""
        state = self._store.state
        return [
            income_goal_variance(state, month)
            for month in month_range(start_month, months)
        ]


__all__ = [
    "GetCashflowUseCase",
    "GetBudgetVarianceUseCase",
    "CashflowView",
]
