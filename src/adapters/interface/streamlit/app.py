"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.document_codec import ImportFormatError
from src.application.use_cases.financial_store import FinancialStore
from src.application.use_cases.generate_insight import (
    MAX_HORIZON_MONTHS,
    MIN_HORIZON_MONTHS,
    GenerateInsightUseCase,
)
from src.application.use_cases.get_asset_allocation import (
    GetAssetAllocationUseCase,
)
from src.application.use_cases.get_cashflow import (
    GetBudgetVarianceUseCase,
    GetCashflowUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetDebtProgressUseCase,
    GetNetWorthSummaryUseCase,
)
from src.adapters.interface.streamlit.charts import (
    build_variance_figure,
    format_currency,
    month_label,
    prepare_donut_chart_data,
)
from src.domain.models import (
    AllocationBreakdown,
    Asset,
    AssetCategory,
    Debt,
    Expense,
    ExpenseCategory,
    ExpenseMode,
    Income,
    IncomeSource,
    InsightResult,
    Purchase,
    PurchaseStatus,
    RecurringExpense,
)
from src.domain.models import actions as act
from src.domain.services.finance import asset_roi_percent, debt_payoff_percent
from src.domain.services.ids import new_id
from src.domain.services.normalization import (
    format_month_key,
    normalize_month_key,
)
from src.infrastructure.container import (
    build_financial_store,
    build_generate_insight_use_case,
    build_key_value_store,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import load_stored_api_key, save_api_key
from src.utils.decimal_utils import InvalidAmountError, coerce_amount


PAGES = [
    "Dashboard",
    "Expenses",
    "Debts",
    "Income",
    "Investments",
    "Purchases",
    "Rundown",
    "Sync",
    "Settings",
]
TABLE_MONTHS = 14
PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


@st.cache_resource(show_spinner=False)
def _get_store() -> FinancialStore:
    """Return the session-wide financial store."""
    return build_financial_store()


@st.cache_resource(show_spinner=False)
def _get_insight_use_case(_store: FinancialStore) -> GenerateInsightUseCase:
    """Return the insight use case bound to the store."""
    return build_generate_insight_use_case(_store)


def _dispatch(store: FinancialStore, action) -> None:
    """Dispatch an action and record it in the usage log."""
    store.dispatch(action)
    get_usage_logger().info(f"dispatch {type(action).__name__}")


def _parse_amount(raw) -> Decimal | None:
    """Parse form input, reporting invalid numbers to the user."""
    try:
        return coerce_amount(raw)
    except InvalidAmountError as exc:
        st.error(str(exc))
        return None


def _parse_month(raw) -> str | None:
    """Parse a month field into ``YYYY-MM``, reporting bad input."""
    try:
        return normalize_month_key(str(raw).strip())
    except ValueError:
        st.error(f"Invalid month: {raw!r}. Use YYYY-MM.")
        return None


def _current_month() -> str:
    return format_month_key(date.today())


def _render_insight_result(result: InsightResult | None) -> None:
    """Render a tagged insight result."""
    if result is None:
        st.info("A newer request replaced this one.")
    elif result.ok:
        st.markdown(result.text)
    else:
        st.error(result.message)


def _render_allocation_chart(
    breakdown: AllocationBreakdown,
    title: str,
    max_groups: int = 6,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of asset values.

    Args:
        breakdown: Asset values grouped by category or basket.
        title: Chart title to display above the donut.
        max_groups: Maximum groups before grouping into Other.
        chart_size: Width/height for the chart canvas.
    """
    if not breakdown.groups:
        st.info("No asset amounts available for the chart.")
        return
    data, _ = prepare_donut_chart_data(breakdown, max_groups=max_groups)
    hover = alt.selection_point(
        name="hover",
        fields=["label"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "label:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader(title)
    st.altair_chart(chart, use_container_width=True)


def _render_dashboard(store: FinancialStore) -> None:
    """Render net worth, monthly balance, allocation and insight."""
    month = _current_month()
    summary = GetNetWorthSummaryUseCase(store).execute()
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Total Assets", format_currency(summary.asset_total))
    liabilities_col.metric(
        "Total Liabilities",
        format_currency(summary.liability_total),
    )
    net_worth_col.metric("Net Worth", format_currency(summary.net_worth))

    st.subheader("€1M Goal")
    st.progress(min(float(summary.goal_progress) / 100, 1.0))
    st.caption(f"{summary.goal_progress:.2f}% of the goal reached")

    cashflow = GetCashflowUseCase(store).execute(month)
    st.subheader(f"This Month's Balance ({month_label(month)})")
    income_col, expense_col, flow_col = st.columns(3)
    income_col.metric("Income", format_currency(cashflow.balance.total_in))
    expense_col.metric("Expenses", format_currency(cashflow.balance.total_out))
    flow_col.metric("Net Cash Flow", format_currency(cashflow.balance.net_flow))

    impact = cashflow.purchases
    if impact.purchase_names:
        st.subheader("Planned Purchases Impact")
        st.write(f"Planned spending: {format_currency(-impact.planned_cost)}")
        st.write(
            f"Projected net flow: {format_currency(impact.projected_net_flow)}"
        )
        st.caption(", ".join(impact.purchase_names))

    allocation = GetAssetAllocationUseCase(store).execute()
    _render_allocation_chart(allocation.by_category, "Portfolio Allocation")

    st.subheader("AI Financial Insight")
    if st.button("Generate Insight"):
        with st.spinner("Thinking..."):
            result = _get_insight_use_case(store).insight()
        _render_insight_result(result)


def _render_expenses(store: FinancialStore) -> None:
    """Render expense entry, recurring templates and plan variance."""
    state = store.state
    month = _current_month()

    with st.form("add_expense", clear_on_submit=True):
        st.subheader("Add Expense")
        expense_date = st.date_input("Date", value=date.today())
        category = st.selectbox("Category", list(ExpenseCategory))
        mode = st.selectbox("Mode", list(ExpenseMode))
        amount = st.text_input("Amount")
        description = st.text_input("Description")
        if st.form_submit_button("Save"):
            parsed = _parse_amount(amount)
            if parsed is not None:
                _dispatch(
                    store,
                    act.AddExpense(
                        Expense(
                            id=new_id("e"),
                            date=expense_date.isoformat(),
                            category=category,
                            amount=parsed,
                            description=description,
                            mode=mode,
                        )
                    ),
                )
                st.success("Expense added.")

    st.subheader("Recurring Expenses")
    for template in state.recurring_expenses:
        left, right = st.columns([4, 1])
        left.write(
            f"{template.description} · {format_currency(template.amount)} · "
            f"{template.mode.value} · from {template.start_date}"
        )
        if right.button("Delete", key=f"del-re-{template.id}"):
            _dispatch(store, act.DeleteRecurringExpense(template.id))
            st.rerun()
    with st.form("add_recurring", clear_on_submit=True):
        description = st.text_input("Template description")
        amount = st.text_input("Monthly amount")
        category = st.selectbox("Template category", list(ExpenseCategory))
        mode = st.selectbox("Template mode", list(ExpenseMode))
        start = st.text_input("Start month (YYYY-MM)", value=month)
        if st.form_submit_button("Add template"):
            parsed = _parse_amount(amount)
            start_month = _parse_month(start)
            if parsed is not None and start_month is not None:
                _dispatch(
                    store,
                    act.AddRecurringExpense(
                        RecurringExpense(
                            id=new_id("re"),
                            description=description,
                            amount=parsed,
                            category=category,
                            mode=mode,
                            start_date=start_month,
                        )
                    ),
                )
    if st.button(f"Log recurring expenses for {month_label(month)}"):
        before = len(store.state.expenses)
        _dispatch(store, act.LogRecurringExpensesForMonth(month))
        st.success(f"Logged {len(store.state.expenses) - before} expenses.")

    st.subheader("Plan vs Actual")
    view_mode = st.radio("Mode", list(ExpenseMode), horizontal=True)
    rows = GetBudgetVarianceUseCase(store).expense_rows(
        month,
        TABLE_MONTHS,
        view_mode,
    )
    st.plotly_chart(
        build_variance_figure(rows, "Planned", "Planned vs Actual Spending"),
        use_container_width=True,
    )
    with st.form("plan_editor"):
        plan_month = st.selectbox("Plan month", [row.month for row in rows])
        plan_amount = st.text_input("Planned amount")
        if st.form_submit_button("Save plan"):
            parsed = _parse_amount(plan_amount)
            if parsed is not None:
                _dispatch(
                    store,
                    act.UpsertExpensePlan(plan_month, view_mode, parsed),
                )

    st.subheader("Recent Expenses")
    _render_table(
        [
            {
                "Date": e.date,
                "Category": e.category.value,
                "Amount": format_currency(e.amount),
                "Description": e.description,
                "Mode": e.mode.value,
            }
            for e in sorted(state.expenses, key=lambda e: e.date, reverse=True)
        ]
    )


def _render_debts(store: FinancialStore) -> None:
    """Render debt progress and balance updates."""
    progress = GetDebtProgressUseCase(store).execute()
    total_col, progress_col, minimum_col = st.columns(3)
    total_col.metric("Total Debt", format_currency(progress.total_balance))
    progress_col.metric("Payoff Progress", f"{progress.progress_percent:.1f}%")
    minimum_col.metric(
        "Minimum Payments",
        format_currency(progress.total_minimum_payments),
    )
    for debt in store.state.debts:
        st.write(
            f"**{debt.name}**: {format_currency(debt.current_balance)} of "
            f"{format_currency(debt.original_amount)} · {debt.interest_rate}%"
        )
        st.progress(max(0.0, min(float(debt_payoff_percent(debt)) / 100, 1.0)))
        left, right = st.columns([3, 1])
        new_balance = left.text_input("New balance", key=f"bal-{debt.id}")
        if right.button("Update", key=f"upd-{debt.id}"):
            parsed = _parse_amount(new_balance)
            if parsed is not None:
                _dispatch(store, act.UpdateDebtBalance(debt.id, parsed))
                st.rerun()

    with st.form("add_debt", clear_on_submit=True):
        st.subheader("Add Debt")
        name = st.text_input("Name")
        original = st.text_input("Original amount")
        balance = st.text_input("Current balance")
        rate = st.text_input("Interest rate (%)")
        minimum = st.text_input("Minimum payment")
        if st.form_submit_button("Save"):
            parsed = [_parse_amount(v) for v in (original, balance, rate, minimum)]
            if all(value is not None for value in parsed):
                _dispatch(store, act.AddDebt(Debt(new_id("d"), name, *parsed)))


def _render_income(store: FinancialStore) -> None:
    """Render income entry and goal variance."""
    month = _current_month()
    with st.form("add_income", clear_on_submit=True):
        st.subheader("Add Income")
        income_date = st.date_input("Date", value=date.today())
        source = st.selectbox("Source", list(IncomeSource))
        amount = st.text_input("Amount")
        description = st.text_input("Description")
        if st.form_submit_button("Save"):
            parsed = _parse_amount(amount)
            if parsed is not None:
                _dispatch(
                    store,
                    act.AddIncome(
                        Income(
                            new_id("i"),
                            income_date.isoformat(),
                            source,
                            parsed,
                            description,
                        )
                    ),
                )

    rows = GetBudgetVarianceUseCase(store).income_rows(month, TABLE_MONTHS)
    st.plotly_chart(
        build_variance_figure(rows, "Goal", "Income vs Goal"),
        use_container_width=True,
    )
    _render_table(
        [
            {
                "Month": month_label(row.month),
                "Actual": format_currency(row.actual),
                "Goal": format_currency(row.target),
                "Variance": format_currency(row.variance),
            }
            for row in rows
        ]
    )
    with st.form("goal_editor"):
        goal_month = st.selectbox("Goal month", [row.month for row in rows])
        goal_amount = st.text_input("Goal amount")
        if st.form_submit_button("Save goal"):
            parsed = _parse_amount(goal_amount)
            if parsed is not None:
                _dispatch(store, act.UpsertIncomeGoal(goal_month, parsed))


def _render_investments(store: FinancialStore) -> None:
    """Render allocation charts, baskets and asset updates."""
    allocation = GetAssetAllocationUseCase(store).execute()
    left, right = st.columns(2)
    with left:
        _render_allocation_chart(allocation.by_category, "By Category")
    with right:
        _render_allocation_chart(allocation.by_basket, "By Basket")

    for basket in allocation.baskets:
        st.write(
            f"**{basket.name}**: {format_currency(basket.total_value)} "
            f"(ROI {basket.roi_percent:.2f}%)"
        )
    with st.form("rename_basket"):
        old_name = st.selectbox(
            "Basket",
            sorted({asset.basket for asset in store.state.assets if asset.basket}),
        )
        new_name = st.text_input("New name")
        if st.form_submit_button("Rename") and old_name:
            _dispatch(store, act.RenameBasket(old_name, new_name))

    _render_table(
        [
            {
                "Name": asset.name,
                "Category": asset.category.value,
                "Basket": asset.basket or "",
                "Value": format_currency(asset.current_value),
                "ROI": f"{asset_roi_percent(asset):+.2f}%",
            }
            for asset in store.state.assets
        ]
    )
    with st.form("add_asset", clear_on_submit=True):
        st.subheader("Add Asset")
        name = st.text_input("Name")
        category = st.selectbox("Category", list(AssetCategory))
        basket = st.text_input("Basket")
        invested = st.text_input("Amount invested")
        value = st.text_input("Current value")
        if st.form_submit_button("Save"):
            parsed_invested = _parse_amount(invested)
            parsed_value = _parse_amount(value)
            if parsed_invested is not None and parsed_value is not None:
                _dispatch(
                    store,
                    act.AddAsset(
                        Asset(
                            new_id("a"),
                            name,
                            category,
                            parsed_invested,
                            parsed_value,
                            date.today().isoformat(),
                            basket.strip() or None,
                        )
                    ),
                )


def _render_purchases(store: FinancialStore) -> None:
    """Render purchases grouped by status with status changes."""
    columns = st.columns(len(PurchaseStatus))
    for column, status in zip(columns, PurchaseStatus):
        column.subheader(status.value)
        for purchase in store.state.purchases:
            if purchase.status != status:
                continue
            column.write(f"**{purchase.name}** · {format_currency(purchase.cost)}")
            column.caption(purchase.justification)
            target = column.selectbox(
                "Move to",
                list(PurchaseStatus),
                index=list(PurchaseStatus).index(status),
                key=f"status-{purchase.id}",
            )
            if target != status:
                _dispatch(store, act.UpdatePurchaseStatus(purchase.id, target))
                st.rerun()

    with st.form("add_purchase", clear_on_submit=True):
        st.subheader("Consider a Purchase")
        name = st.text_input("Name")
        cost = st.text_input("Cost")
        category = st.selectbox("Category", list(ExpenseCategory))
        justification = st.text_area("Justification")
        if st.form_submit_button("Save"):
            parsed = _parse_amount(cost)
            if parsed is not None:
                _dispatch(
                    store,
                    act.AddPurchase(
                        Purchase(
                            new_id("p"),
                            name,
                            parsed,
                            category,
                            justification,
                            PurchaseStatus.CONSIDERING,
                            date.today().isoformat(),
                        )
                    ),
                )


def _render_rundown(store: FinancialStore) -> None:
    """Render the forecast generator."""
    months = st.number_input(
        "Months to Forecast",
        min_value=MIN_HORIZON_MONTHS,
        max_value=MAX_HORIZON_MONTHS,
        value=24,
        step=1,
    )
    if st.button("Generate Rundown"):
        with st.spinner("Generating your financial forecast..."):
            result = _get_insight_use_case(store).forecast(int(months))
        _render_insight_result(result)


def _render_sync(store: FinancialStore) -> None:
    """Render export and import of the JSON document."""
    st.download_button(
        "Export Data",
        data=store.export_document(),
        file_name=f"finance-backup-{date.today().isoformat()}.json",
        mime="application/json",
    )
    uploaded = st.file_uploader("Import Data", type=["json"])
    confirmed = st.checkbox(
        "I understand importing will overwrite all existing data."
    )
    if uploaded is not None and st.button("Import", disabled=not confirmed):
        try:
            store.import_document(uploaded.getvalue().decode("utf-8"))
        except (ImportFormatError, UnicodeDecodeError) as exc:
            st.error(f"Invalid file format: {exc}")
        else:
            get_usage_logger().info("import document")
            st.success("Data imported successfully!")


def _render_settings() -> None:
    """Render the API key form."""
    storage = build_key_value_store()
    stored_key = load_stored_api_key(storage)
    api_key = st.text_input("Your Gemini API Key", value=stored_key, type="password")
    if st.button("Save"):
        save_api_key(storage, api_key)
        _get_insight_use_case.clear()
        st.success("API key saved successfully!")
    elif stored_key:
        st.caption("An API key is currently saved. You can update it above.")


def _render_table(rows: Sequence[dict]) -> None:
    if not rows:
        st.info("Nothing recorded yet.")
        return
    st.dataframe(rows, use_container_width=True, hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    page = st.sidebar.selectbox("Page", PAGES)
    if page == "Settings":
        _render_settings()
        return

    store = _get_store()
    renderers = {
        "Dashboard": _render_dashboard,
        "Expenses": _render_expenses,
        "Debts": _render_debts,
        "Income": _render_income,
        "Investments": _render_investments,
        "Purchases": _render_purchases,
        "Rundown": _render_rundown,
        "Sync": _render_sync,
    }
    renderers[page](store)


if __name__ == "__main__":  # pragma: no cover
    main()
