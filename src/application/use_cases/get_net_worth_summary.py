"""Use case to compute net worth and debt payoff progress."""

from decimal import Decimal

from src.application.use_cases.financial_store import FinancialStore
from src.domain.constants import NET_WORTH_GOAL
from src.domain.models import DebtProgress, NetWorthSummary
from src.domain.services.finance import (
    compute_debt_progress,
    compute_net_worth_summary,
)
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth from the current aggregate."""

    def __init__(
        self,
        store: FinancialStore,
        logger=None,
        goal: Decimal = NET_WORTH_GOAL,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store exposing the current aggregate.
            logger: Optional logger compatible with logging.Logger-like API.
            goal: Net worth target used for the progress figure.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._goal = goal

    def execute(self) -> NetWorthSummary:
        """Return the net worth summary.

        Returns:
            NetWorthSummary: Asset, liability, net worth and goal figures.
        """
        summary = compute_net_worth_summary(self._store.state, self._goal)
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


class GetDebtProgressUseCase:
    """Compute aggregate payoff progress across debts."""

    def __init__(self, store: FinancialStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> DebtProgress:
        """Return debt totals, payoff percent and minimum payments."""
        progress = compute_debt_progress(self._store.state.debts, self._logger)
        self._logger.info(
            f"Debt progress computed: balance={progress.total_balance}, "
            f"progress={progress.progress_percent:.2f}%"
        )
        return progress


__all__ = ["GetNetWorthSummaryUseCase", "GetDebtProgressUseCase"]
