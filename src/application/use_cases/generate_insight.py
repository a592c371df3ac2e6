"""Use cases asking the insight collaborator for commentary and forecasts.

Each request takes a token from a shared counter. When a newer request was
issued while an older one was outstanding, the older result is discarded so
the caller only ever displays the latest response.
"""

import threading
from datetime import date
from typing import Callable

from src.application.ports.insight_service import InsightServicePort
from src.application.use_cases.financial_store import FinancialStore
from src.domain.models import FinancialData, InsightResult
from src.domain.services.finance import (
    compute_runway_inputs,
    monthly_total,
    total_assets,
    total_liabilities,
)
from src.domain.services.normalization import format_month_key
from src.infrastructure.logging.logger import get_app_logger


MIN_HORIZON_MONTHS = 6
MAX_HORIZON_MONTHS = 60


def clamp_horizon(months: int) -> int:
    """Clamp a forecast horizon to the supported 6-60 month range."""
    return max(MIN_HORIZON_MONTHS, min(MAX_HORIZON_MONTHS, months))


def build_financial_summary(data: FinancialData, month: str) -> str:
    """Return the plain-text summary sent with insight requests.

    Args:
        data: Financial aggregate.
        month: Month key used for the "this month" counts.

    Returns:
        str: Multi-line summary of expenses, debts, income and assets.
    """
    expenses = [e for e in data.expenses if e.date.startswith(month)]
    income = [i for i in data.income if i.date.startswith(month)]
    return "\n".join(
        [
            f"Expenses: {len(expenses)} transactions this month, "
            f"total {monthly_total(expenses, month)}.",
            f"Debts: {len(data.debts)} active debts, total balance "
            f"{total_liabilities(data)}.",
            f"Income: {len(income)} sources this month, total "
            f"{monthly_total(income, month)}.",
            f"Assets: {len(data.assets)} assets, total value "
            f"{total_assets(data)}.",
        ]
    )


class GenerateInsightUseCase:
    """Request insights and forecasts, keeping only the latest response."""

    def __init__(
        self,
        store: FinancialStore,
        insight_service: InsightServicePort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store exposing the current aggregate.
            insight_service: Collaborator producing the text.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock used for the current month and runway window.
        """
        self._store = store
        self._insight_service = insight_service
        self._logger = logger or get_app_logger()
        self._today = today
        self._lock = threading.Lock()
        self._latest_token = 0

    def insight(self) -> InsightResult | None:
        """Return a one-sentence insight for the current month.

        Returns:
            InsightResult | None: The tagged result, or None when a newer
            request superseded this one.
        """
        token = self._issue_token()
        month = format_month_key(self._today())
        summary = build_financial_summary(self._store.state, month)
        result = self._insight_service.get_insight(summary)
        return self._accept(token, result, "insight")

    def forecast(self, horizon_months: int) -> InsightResult | None:
        """Return a narrative forecast over the clamped horizon.

        Args:
            horizon_months: Requested horizon, clamped to 6-60 months.

        Returns:
            InsightResult | None: The tagged result, or None when stale.
        """
        token = self._issue_token()
        horizon = clamp_horizon(horizon_months)
        state = self._store.state
        runway = compute_runway_inputs(state, self._today())
        result = self._insight_service.get_forecast(state, horizon, runway)
        return self._accept(token, result, "forecast")

    def is_latest(self, token: int) -> bool:
        """Return whether ``token`` belongs to the most recent request."""
        with self._lock:
            return token == self._latest_token

    def _issue_token(self) -> int:
        with self._lock:
            self._latest_token += 1
            return self._latest_token

    def _accept(
        self,
        token: int,
        result: InsightResult,
        label: str,
    ) -> InsightResult | None:
        if not self.is_latest(token):
            self._logger.info(f"Discarded stale {label} response #{token}")
            return None
        if not result.ok:
            self._logger.warning(
                f"{label.capitalize()} request failed: {result.kind.value}"
            )
        return result


__all__ = [
    "GenerateInsightUseCase",
    "build_financial_summary",
    "clamp_horizon",
    "MIN_HORIZON_MONTHS",
    "MAX_HORIZON_MONTHS",
]
