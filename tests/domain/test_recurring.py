"""Tests for recurring expense logging."""

from decimal import Decimal

from src.domain.models import (
    Expense,
    ExpenseCategory,
    ExpenseMode,
    FinancialData,
    RecurringExpense,
)
from src.domain.models.actions import LogRecurringExpensesForMonth
from src.domain.seed import build_seed_data
from src.domain.services.recurring import active_templates, log_recurring_expenses
from src.domain.services.reducer import financial_reducer


def _template(template_id: str, start: str) -> RecurringExpense:
    return RecurringExpense(
        id=template_id,
        description="Streaming",
        amount=Decimal("12.99"),
        category=ExpenseCategory.PERSONAL,
        mode=ExpenseMode.GROWTH,
        start_date=start,
    )


def test_seed_logging_for_december_adds_three_expenses() -> None:
    """Each seed template should be logged on the first of the month."""
    state = build_seed_data()

    result = financial_reducer(state, LogRecurringExpensesForMonth("2025-12"))

    logged = result.expenses[len(state.expenses):]
    assert [e.id for e in logged] == [
        "logged-re1-2025-12",
        "logged-re2-2025-12",
        "logged-re3-2025-12",
    ]
    assert {e.date for e in logged} == {"2025-12-01"}
    assert logged[0].description == "Rent (auto-logged)"
    assert logged[0].amount == Decimal("650")
    assert logged[0].mode == ExpenseMode.SURVIVAL


def test_logging_twice_is_idempotent() -> None:
    """A second log for the same month should return the same object."""
    once = log_recurring_expenses(build_seed_data(), "2025-12")

    assert log_recurring_expenses(once, "2025-12") is once


def test_logging_keeps_existing_expenses() -> None:
    """Logging only appends; manual and other months stay in place."""
    state = build_seed_data()

    result = log_recurring_expenses(state, "2026-01")

    assert result.expenses[: len(state.expenses)] == state.expenses


def test_templates_starting_later_are_skipped() -> None:
    """Templates whose start month is after the target are not logged."""
    state = FinancialData(
        recurring_expenses=(
            _template("early", "2025-01"),
            _template("late", "2026-03"),
        )
    )

    result = log_recurring_expenses(state, "2026-02")

    assert [e.id for e in result.expenses] == ["logged-early-2026-02"]


def test_start_months_compare_as_calendar_months() -> None:
    """A September start must not count as after a later October."""
    templates = (_template("t", "2025-9"),)

    assert [t.id for t in active_templates(templates, "2025-10")] == ["t"]
    assert active_templates(templates, "2025-08") == []


def test_logging_with_no_active_template_returns_state() -> None:
    """Nothing to log should hand back the input object."""
    state = FinancialData(
        expenses=(
            Expense("e", "2025-01-02", ExpenseCategory.FOOD, Decimal("1"),
                    "", ExpenseMode.SURVIVAL),
        )
    )

    assert log_recurring_expenses(state, "2025-01") is state


def test_templates_with_malformed_start_month_are_skipped() -> None:
    """A bad start month makes the template inactive instead of failing."""
    state = FinancialData(
        recurring_expenses=(
            _template("empty", ""),
            _template("bad", "2025-13"),
            _template("ok", "2025-01"),
        )
    )

    result = financial_reducer(state, LogRecurringExpensesForMonth("2025-12"))

    assert [e.id for e in result.expenses] == ["logged-ok-2025-12"]


def test_logging_for_an_unparseable_month_returns_state() -> None:
    """An invalid target month logs nothing."""
    state = build_seed_data()

    assert financial_reducer(state, LogRecurringExpensesForMonth("")) is state
    assert log_recurring_expenses(state, "2025-13") is state


def test_logged_ids_use_the_zero_padded_month() -> None:
    """Unpadded months log under the same id as their canonical form."""
    state = FinancialData(recurring_expenses=(_template("t", "2025-01"),))

    once = log_recurring_expenses(state, "2025-9")
    twice = log_recurring_expenses(once, "2025-09")

    assert [(e.id, e.date) for e in once.expenses] == [
        ("logged-t-2025-09", "2025-09-01")
    ]
    assert twice is once
