"""Port for the generative-language insight collaborator."""

from typing import Protocol

from src.domain.models import FinancialData, InsightResult, RunwayInputs


class InsightServicePort(Protocol):
    """Port returning tagged results; failures never raise."""

    def get_insight(self, summary_text: str) -> InsightResult:
        """Return one sentence of commentary on ``summary_text``."""

    def get_forecast(
        self,
        data: FinancialData,
        horizon_months: int,
        runway: RunwayInputs,
    ) -> InsightResult:
        """Return a headered multi-section forecast for the horizon."""


__all__ = ["InsightServicePort"]
