"""Domain models for derived financial figures."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset current values.
        liability_total: Sum of debt balances.
        net_worth: Assets minus liabilities.
        goal_progress: Percent of the net worth goal reached.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    goal_progress: Decimal


@dataclass(frozen=True)
class AllocationAmount:
    """Current value aggregated for a category or basket."""

    label: str
    amount: Decimal


@dataclass(frozen=True)
class AllocationBreakdown:
    """Breakdown of asset values by group, in first-seen order."""

    groups: list[AllocationAmount]

    @property
    def total(self) -> Decimal:
        """Return the sum of every group amount."""
        return sum((group.amount for group in self.groups), Decimal("0"))


@dataclass(frozen=True)
class BasketSummary:
    """Totals for one investment basket."""

    name: str
    total_value: Decimal
    total_invested: Decimal
    roi_percent: Decimal


@dataclass(frozen=True)
class MonthlyBalance:
    """Income and expense totals for a month."""

    month: str
    total_in: Decimal
    total_out: Decimal

    @property
    def net_flow(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class PurchasesImpact:
    """Effect of purchases still under consideration on a month."""

    month: str
    planned_cost: Decimal
    current_net_flow: Decimal
    purchase_names: list[str]

    @property
    def projected_net_flow(self) -> Decimal:
        """Return the net flow left once planned purchases are made."""
        return self.current_net_flow - self.planned_cost


@dataclass(frozen=True)
class DebtProgress:
    """Aggregate payoff progress across debts."""

    total_original: Decimal
    total_balance: Decimal
    progress_percent: Decimal
    total_minimum_payments: Decimal


@dataclass(frozen=True)
class VarianceRow:
    """Actual vs target figures for a month.

    Attributes:
        variance: ``planned - actual`` for expenses, ``actual - goal`` for
            income.
    """

    month: str
    actual: Decimal
    target: Decimal
    variance: Decimal


@dataclass(frozen=True)
class RunwayInputs:
    """Figures handed to the forecast collaborator."""

    liquid_assets: Decimal
    average_monthly_income: Decimal
    recurring_outgoings: Decimal

    @property
    def net_cash_flow(self) -> Decimal:
        """Return average income minus recurring outgoings."""
        return self.average_monthly_income - self.recurring_outgoings


__all__ = [
    "NetWorthSummary",
    "AllocationAmount",
    "AllocationBreakdown",
    "BasketSummary",
    "MonthlyBalance",
    "PurchasesImpact",
    "DebtProgress",
    "VarianceRow",
    "RunwayInputs",
]
