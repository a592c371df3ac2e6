"""Materialization of recurring expense templates."""

from dataclasses import replace

from src.domain.constants import AUTO_LOGGED_SUFFIX
from src.domain.models import Expense, FinancialData, RecurringExpense
from src.domain.services.ids import recurring_log_id
from src.domain.services.normalization import (
    first_day_of_month,
    normalize_month_key,
    try_parse_month_key,
)


def active_templates(
    templates: tuple[RecurringExpense, ...],
    month: str,
) -> list[RecurringExpense]:
    """Return templates whose start month is on or before ``month``.

    Templates with a malformed start month are never active.
    """
    target = try_parse_month_key(month)
    if target is None:
        return []
    active = []
    for template in templates:
        start = try_parse_month_key(template.start_date)
        if start is not None and start <= target:
            active.append(template)
    return active


def build_logged_expense(template: RecurringExpense, month: str) -> Expense:
    """Build the expense a template produces for ``month``.

    Args:
        template: Recurring expense template.
        month: Target month key.

    Returns:
        Expense: Expense dated the first day of the month with a
        deterministic id.
    """
    return Expense(
        id=recurring_log_id(template.id, month),
        date=first_day_of_month(month),
        category=template.category,
        amount=template.amount,
        description=f"{template.description}{AUTO_LOGGED_SUFFIX}",
        mode=template.mode,
    )


def log_recurring_expenses(state: FinancialData, month: str) -> FinancialData:
    """Log every active recurring template for ``month``.

    Expenses already logged for the month are recognised by their
    deterministic id, so repeated calls add nothing. Other months and manual
    entries are left untouched.

    Args:
        state: Current aggregate.
        month: Target month key, normalized to zero-padded ``YYYY-MM``.

    Returns:
        FinancialData: New aggregate, or ``state`` itself when nothing new
        was logged or ``month`` does not parse.
    """
    if try_parse_month_key(month) is None:
        return state
    month = normalize_month_key(month)
    existing_ids = {expense.id for expense in state.expenses}
    new_expenses = [
        expense
        for expense in (
            build_logged_expense(template, month)
            for template in active_templates(state.recurring_expenses, month)
        )
        if expense.id not in existing_ids
    ]
    if not new_expenses:
        return state
    return replace(state, expenses=state.expenses + tuple(new_expenses))


__all__ = [
    "active_templates",
    "build_logged_expense",
    "log_recurring_expenses",
]
