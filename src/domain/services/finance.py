"""Domain services computing derived financial figures.

Every function here is a pure projection over ``FinancialData`` or its
records. Monthly figures select records whose ISO ``date`` starts with the
month key, a plain string prefix match.
"""

import re
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    LIQUID_ASSET_CATEGORIES,
    NET_WORTH_GOAL,
    TRAILING_INCOME_MONTHS,
    UNASSIGNED_BASKET,
)
from src.domain.models import (
    AllocationAmount,
    AllocationBreakdown,
    Asset,
    BasketSummary,
    Debt,
    DebtProgress,
    ExpenseMode,
    FinancialData,
    MonthlyBalance,
    NetWorthSummary,
    PurchasesImpact,
    PurchaseStatus,
    RunwayInputs,
    VarianceRow,
)
from src.domain.services.normalization import format_month_key
from src.domain.services.recurring import active_templates
from src.domain.services.validation import validate_debt_balance

ZERO = Decimal("0")
HUNDRED = Decimal("100")
_MONTH_PREFIX = re.compile(r"^\d{4}-\d{2}")


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def total_assets(data: FinancialData) -> Decimal:
    """Return the summed current value of every asset."""
    return _sum(asset.current_value for asset in data.assets)


def total_liabilities(data: FinancialData) -> Decimal:
    """Return the summed current balance of every debt."""
    return _sum(debt.current_balance for debt in data.debts)


def net_worth(data: FinancialData) -> Decimal:
    """Return assets minus liabilities."""
    return total_assets(data) - total_liabilities(data)


def goal_progress(value: Decimal, goal: Decimal = NET_WORTH_GOAL) -> Decimal:
    """Return the percent of ``goal`` reached, floored at zero."""
    return max(ZERO, value / goal * HUNDRED)


def compute_net_worth_summary(
    data: FinancialData,
    goal: Decimal = NET_WORTH_GOAL,
) -> NetWorthSummary:
    """Compute net worth totals and goal progress.

    Args:
        data: Financial aggregate.
        goal: Net worth target used for the progress figure.

    Returns:
        NetWorthSummary: Asset, liability, net worth and progress figures.
    """
    asset_total = total_assets(data)
    liability_total = total_liabilities(data)
    value = asset_total - liability_total
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=value,
        goal_progress=goal_progress(value, goal),
    )


def monthly_total(records: Iterable, month: str) -> Decimal:
    """Sum ``amount`` over records whose ``date`` starts with ``month``."""
    return _sum(record.amount for record in records if record.date.startswith(month))


def monthly_balance(data: FinancialData, month: str) -> MonthlyBalance:
    """Return income and expense totals for ``month``."""
    return MonthlyBalance(
        month=month,
        total_in=monthly_total(data.income, month),
        total_out=monthly_total(data.expenses, month),
    )


def planned_purchases_impact(
    data: FinancialData,
    month: str,
) -> PurchasesImpact:
    """Return how purchases under consideration affect ``month``'s net flow."""
    planned = [
        purchase
        for purchase in data.purchases
        if purchase.status == PurchaseStatus.CONSIDERING
    ]
    return PurchasesImpact(
        month=month,
        planned_cost=_sum(purchase.cost for purchase in planned),
        current_net_flow=monthly_balance(data, month).net_flow,
        purchase_names=[purchase.name for purchase in planned],
    )


def debt_payoff_percent(debt: Debt) -> Decimal:
    """Return the percent of a debt already repaid.

    Debts with a zero original amount report zero progress.
    """
    if debt.original_amount == 0:
        return ZERO
    return (1 - debt.current_balance / debt.original_amount) * HUNDRED


def compute_debt_progress(
    debts: Iterable[Debt],
    logger: Logger | None = None,
) -> DebtProgress:
    """Compute aggregate payoff progress from summed balances.

    Args:
        debts: Debts to aggregate.
        logger: Optional logger warned about out-of-range balances.

    Returns:
        DebtProgress: Totals and overall payoff percent. The percent compares
        the sum of balances to the sum of original amounts rather than
        averaging per-debt percentages.
    """
    debts = list(debts)
    if logger is not None:
        for debt in debts:
            validate_debt_balance(debt, logger)
    total_original = _sum(debt.original_amount for debt in debts)
    total_balance = _sum(debt.current_balance for debt in debts)
    progress = (
        (1 - total_balance / total_original) * HUNDRED
        if total_original > 0
        else ZERO
    )
    return DebtProgress(
        total_original=total_original,
        total_balance=total_balance,
        progress_percent=progress,
        total_minimum_payments=total_minimum_payments(debts),
    )


def total_minimum_payments(debts: Iterable[Debt]) -> Decimal:
    """Return the summed monthly minimum payment of ``debts``."""
    return _sum(debt.minimum_payment for debt in debts)


def asset_roi_percent(asset: Asset) -> Decimal:
    """Return an asset's return on investment, 0 when nothing was invested."""
    if asset.amount_invested == 0:
        return ZERO
    return (
        (asset.current_value - asset.amount_invested)
        / asset.amount_invested
        * HUNDRED
    )


def _group_values(assets: Iterable[Asset], key) -> AllocationBreakdown:
    totals: dict[str, Decimal] = {}
    for asset in assets:
        label = key(asset)
        totals[label] = totals.get(label, ZERO) + asset.current_value
    return AllocationBreakdown(
        groups=[
            AllocationAmount(label=label, amount=amount)
            for label, amount in totals.items()
        ]
    )


def allocation_by_category(assets: Iterable[Asset]) -> AllocationBreakdown:
    """Group asset values by category in first-seen order."""
    return _group_values(assets, lambda asset: asset.category.value)


def allocation_by_basket(assets: Iterable[Asset]) -> AllocationBreakdown:
    """Group asset values by basket; assets without one are ``Unassigned``."""
    return _group_values(assets, lambda asset: asset.basket or UNASSIGNED_BASKET)


def summarize_baskets(assets: Iterable[Asset]) -> list[BasketSummary]:
    """Return value, invested amount and ROI for each basket."""
    grouped: dict[str, list[Asset]] = {}
    for asset in assets:
        grouped.setdefault(asset.basket or UNASSIGNED_BASKET, []).append(asset)
    summaries = []
    for name, members in grouped.items():
        value = _sum(asset.current_value for asset in members)
        invested = _sum(asset.amount_invested for asset in members)
        roi = (value - invested) / invested * HUNDRED if invested > 0 else ZERO
        summaries.append(
            BasketSummary(
                name=name,
                total_value=value,
                total_invested=invested,
                roi_percent=roi,
            )
        )
    return summaries


def _mode_matches(record_mode: ExpenseMode, mode: ExpenseMode) -> bool:
    if mode == ExpenseMode.BOTH:
        return True
    return record_mode in (mode, ExpenseMode.BOTH)


def planned_expense_total(
    data: FinancialData,
    month: str,
    mode: ExpenseMode,
) -> Decimal:
    """Return the recurring spend expected in ``month`` for ``mode``.

    Templates tagged ``Both`` count toward every mode; asking for ``Both``
    counts every active template.
    """
    return _sum(
        template.amount
        for template in active_templates(data.recurring_expenses, month)
        if _mode_matches(template.mode, mode)
    )


def planned_expense_amount(
    data: FinancialData,
    month: str,
    mode: ExpenseMode,
) -> Decimal:
    """Return the explicit plan for (month, mode), else the recurring total."""
    for plan in data.expense_plans:
        if plan.month == month and plan.mode == mode:
            return plan.amount
    return planned_expense_total(data, month, mode)


def expense_plan_variance(
    data: FinancialData,
    month: str,
    mode: ExpenseMode,
) -> VarianceRow:
    """Return ``planned - actual`` spending for ``month`` (positive = under).

    Args:
        data: Financial aggregate.
        month: Month key.
        mode: Mode whose expenses and plan are compared. ``Both`` compares
            every expense of the month.

    Returns:
        VarianceRow: Actual, planned and variance figures.
    """
    actual = monthly_total(
        (e for e in data.expenses if _mode_matches(e.mode, mode)),
        month,
    )
    planned = planned_expense_amount(data, month, mode)
    return VarianceRow(
        month=month,
        actual=actual,
        target=planned,
        variance=planned - actual,
    )


def income_goal_variance(data: FinancialData, month: str) -> VarianceRow:
    """Return ``actual - goal`` income for ``month`` (positive = over goal)."""
    actual = monthly_total(data.income, month)
    goal = next(
        (g.amount for g in data.income_goals if g.month == month),
        ZERO,
    )
    return VarianceRow(
        month=month,
        actual=actual,
        target=goal,
        variance=actual - goal,
    )


def trailing_average_income(
    data: FinancialData,
    today: date,
    months: int = TRAILING_INCOME_MONTHS,
) -> Decimal:
    """Average income over the latest months that recorded any income.

    Only months up to and including ``today``'s month are considered, and
    months without income are skipped rather than counted as zero.
    """
    current = format_month_key(today)
    totals: dict[str, Decimal] = {}
    for income in data.income:
        match = _MONTH_PREFIX.match(income.date)
        if match is None or match.group(0) > current:
            continue
        key = match.group(0)
        totals[key] = totals.get(key, ZERO) + income.amount
    active = [key for key in sorted(totals, reverse=True) if totals[key] != 0]
    window = active[:months]
    if not window:
        return ZERO
    return _sum(totals[key] for key in window) / len(window)


def compute_runway_inputs(data: FinancialData, today: date) -> RunwayInputs:
    """Collect the figures the forecast collaborator needs.

    Args:
        data: Financial aggregate.
        today: Reference date for the trailing income window.

    Returns:
        RunwayInputs: Liquid assets, average income and recurring outgoings.
    """
    liquid = _sum(
        asset.current_value
        for asset in data.assets
        if asset.category in LIQUID_ASSET_CATEGORIES
    )
    outgoings = _sum(
        template.amount for template in data.recurring_expenses
    ) + total_minimum_payments(data.debts)
    return RunwayInputs(
        liquid_assets=liquid,
        average_monthly_income=trailing_average_income(data, today),
        recurring_outgoings=outgoings,
    )


__all__ = [
    "total_assets",
    "total_liabilities",
    "net_worth",
    "goal_progress",
    "compute_net_worth_summary",
    "monthly_total",
    "monthly_balance",
    "planned_purchases_impact",
    "debt_payoff_percent",
    "compute_debt_progress",
    "total_minimum_payments",
    "asset_roi_percent",
    "allocation_by_category",
    "allocation_by_basket",
    "summarize_baskets",
    "planned_expense_total",
    "planned_expense_amount",
    "expense_plan_variance",
    "income_goal_variance",
    "trailing_average_income",
    "compute_runway_inputs",
]
