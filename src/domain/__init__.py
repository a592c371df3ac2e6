"""Domain package for business rules and core models."""

from .constants import NET_WORTH_GOAL
from .models import FinancialData
from .seed import build_seed_data
from .services import financial_reducer, log_recurring_expenses

__all__ = [
    "NET_WORTH_GOAL",
    "FinancialData",
    "build_seed_data",
    "financial_reducer",
    "log_recurring_expenses",
]
