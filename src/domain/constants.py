"""Domain constants for the finance dashboard."""

from decimal import Decimal

from src.domain.models.enums import AssetCategory

NET_WORTH_GOAL = Decimal("1000000")

LIQUID_ASSET_CATEGORIES = (
    AssetCategory.SAVINGS,
    AssetCategory.EMERGENCY_FUND,
)

TRAILING_INCOME_MONTHS = 3

RECURRING_LOG_PREFIX = "logged"
AUTO_LOGGED_SUFFIX = " (auto-logged)"
PURCHASE_EXPENSE_PREFIX = "purchase"

UNASSIGNED_BASKET = "Unassigned"


__all__ = [
    "NET_WORTH_GOAL",
    "LIQUID_ASSET_CATEGORIES",
    "TRAILING_INCOME_MONTHS",
    "RECURRING_LOG_PREFIX",
    "AUTO_LOGGED_SUFFIX",
    "PURCHASE_EXPENSE_PREFIX",
    "UNASSIGNED_BASKET",
]
