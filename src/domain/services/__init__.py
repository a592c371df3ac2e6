"""Domain services package."""

from .finance import (
    allocation_by_basket,
    allocation_by_category,
    asset_roi_percent,
    compute_debt_progress,
    compute_net_worth_summary,
    compute_runway_inputs,
    debt_payoff_percent,
    expense_plan_variance,
    goal_progress,
    income_goal_variance,
    monthly_balance,
    monthly_total,
    net_worth,
    planned_expense_total,
    planned_purchases_impact,
    summarize_baskets,
    total_minimum_payments,
    trailing_average_income,
)
from .ids import new_id, purchase_expense_id, recurring_log_id
from .normalization import (
    add_months,
    first_day_of_month,
    format_month_key,
    is_month_key,
    is_on_or_before,
    month_range,
    normalize_month_key,
    parse_month_key,
    try_parse_month_key,
)
from .recurring import log_recurring_expenses
from .reducer import financial_reducer
from .validation import validate_debt_balance

__all__ = [
    "allocation_by_basket",
    "allocation_by_category",
    "asset_roi_percent",
    "compute_debt_progress",
    "compute_net_worth_summary",
    "compute_runway_inputs",
    "debt_payoff_percent",
    "expense_plan_variance",
    "goal_progress",
    "income_goal_variance",
    "monthly_balance",
    "monthly_total",
    "net_worth",
    "planned_expense_total",
    "planned_purchases_impact",
    "summarize_baskets",
    "total_minimum_payments",
    "trailing_average_income",
    "new_id",
    "purchase_expense_id",
    "recurring_log_id",
    "add_months",
    "first_day_of_month",
    "format_month_key",
    "is_month_key",
    "is_on_or_before",
    "month_range",
    "normalize_month_key",
    "parse_month_key",
    "try_parse_month_key",
    "log_recurring_expenses",
    "financial_reducer",
    "validate_debt_balance",
]
