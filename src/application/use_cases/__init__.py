"""Application use cases package."""

from .financial_store import FinancialStore, STORAGE_KEY
from .generate_insight import (
    GenerateInsightUseCase,
    build_financial_summary,
    clamp_horizon,
)
from .get_asset_allocation import (
    AssetAllocationView,
    GetAssetAllocationUseCase,
)
from .get_cashflow import (
    CashflowView,
    GetBudgetVarianceUseCase,
    GetCashflowUseCase,
)
from .get_net_worth_summary import (
    GetDebtProgressUseCase,
    GetNetWorthSummaryUseCase,
)

__all__ = [
    "FinancialStore",
    "STORAGE_KEY",
    "GenerateInsightUseCase",
    "build_financial_summary",
    "clamp_horizon",
    "AssetAllocationView",
    "GetAssetAllocationUseCase",
    "CashflowView",
    "GetBudgetVarianceUseCase",
    "GetCashflowUseCase",
    "GetDebtProgressUseCase",
    "GetNetWorthSummaryUseCase",
]
