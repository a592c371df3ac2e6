"""Use case to compute portfolio allocation breakdowns."""

from dataclasses import dataclass

from src.application.use_cases.financial_store import FinancialStore
from src.domain.models import AllocationBreakdown, BasketSummary
from src.domain.services.finance import (
    allocation_by_basket,
    allocation_by_category,
    summarize_baskets,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AssetAllocationView:
    """Allocation figures for the investments page."""

    by_category: AllocationBreakdown
    by_basket: AllocationBreakdown
    baskets: list[BasketSummary]


class GetAssetAllocationUseCase:
    """Group asset values by category and by basket."""

    def __init__(self, store: FinancialStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Store exposing the current aggregate.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> AssetAllocationView:
        """Return the allocation breakdowns and basket summaries."""
        assets = self._store.state.assets
        view = AssetAllocationView(
            by_category=allocation_by_category(assets),
            by_basket=allocation_by_basket(assets),
            baskets=summarize_baskets(assets),
        )
        self._logger.info(
            f"Allocation computed for {len(assets)} assets across "
            f"{len(view.by_category.groups)} categories"
        )
        return view


__all__ = ["GetAssetAllocationUseCase", "AssetAllocationView"]
