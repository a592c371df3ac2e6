"""Chart preparation for the Streamlit UI.

This module contains pure, testable transformations from domain figures to
chart data:

* ``prepare_donut_chart_data`` turns an ``AllocationBreakdown`` into
  Altair-ready rows with a Top-N + Other grouping;
* ``build_variance_figure`` turns ``VarianceRow`` values into a Plotly bar
  chart comparing actual amounts with their plan or goal.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models import AllocationAmount, AllocationBreakdown, VarianceRow
from src.domain.services.normalization import parse_month_key

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


OTHER_LABEL = "Other"


def format_currency(value: Decimal) -> str:
    """Format a monetary value for display."""
    return f"€{value:,.2f}"


def month_label(month: str) -> str:
    """Return a short label such as ``Nov 2025`` for a month key."""
    return parse_month_key(month).strftime("%b %Y")


def prepare_donut_chart_data(
    breakdown: AllocationBreakdown,
    max_groups: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Asset values grouped by category or basket.
        max_groups: Maximum groups to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        breakdown.groups,
        key=lambda item: item.amount,
        reverse=True,
    )
    top_items = sorted_items[:max_groups]
    other_items = sorted_items[max_groups:]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items = [
            *top_items,
            AllocationAmount(label=OTHER_LABEL, amount=other_amount),
        ]
    total_amount = breakdown.total
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "label": item.label,
                "amount": float(item.amount),
                "amount_label": format_currency(item.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def build_variance_figure(
    rows: list[VarianceRow],
    target_name: str,
    title: str,
) -> "go.Figure":
    """Build a grouped bar chart of actual vs target amounts.

    Args:
        rows: Monthly variance rows.
        target_name: Legend label for the target series (Planned or Goal).
        title: Figure title.

    Returns:
        go.Figure: Plotly figure with Actual and target bars per month.
    """
    import plotly.graph_objects as go

    labels = [month_label(row.month) for row in rows]
    figure = go.Figure(
        data=[
            go.Bar(
                name="Actual",
                x=labels,
                y=[float(row.actual) for row in rows],
                marker_color="#1b9aaa",
            ),
            go.Bar(
                name=target_name,
                x=labels,
                y=[float(row.target) for row in rows],
                marker_color="#f4a261",
            ),
        ]
    )
    figure.update_layout(
        title=title,
        barmode="group",
        margin=dict(l=10, r=10, t=40, b=10),
        legend=dict(orientation="h"),
    )
    return figure


__all__ = [
    "format_currency",
    "month_label",
    "prepare_donut_chart_data",
    "build_variance_figure",
]
