"""Tests for the cash flow and budget variance use cases."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.get_cashflow import (
    GetBudgetVarianceUseCase,
    GetCashflowUseCase,
)
from src.domain.models import ExpenseMode
from src.domain.seed import build_seed_data


def _store() -> SimpleNamespace:
    return SimpleNamespace(state=build_seed_data())


def test_execute_returns_monthly_balance() -> None:
    """Cash flow should expose in, out and net for the month."""
    logger = MagicMock()

    view = GetCashflowUseCase(_store(), logger=logger).execute("2025-11")

    assert view.balance.total_in == Decimal("1250")
    assert view.balance.total_out == Decimal("780")
    assert view.purchases.planned_cost == Decimal("0")
    logger.info.assert_called_once()


def test_expense_rows_cover_requested_months() -> None:
    """Variance rows should start at the requested month."""
    rows = GetBudgetVarianceUseCase(_store(), logger=MagicMock()).expense_rows(
        "2025-11", 3, ExpenseMode.GROWTH
    )

    assert [row.month for row in rows] == ["2025-11", "2025-12", "2026-01"]
    assert rows[0].actual == Decimal("50")
    assert rows[0].variance == Decimal("1450")


def test_income_rows_compare_with_goals() -> None:
    """December income 1500 falls 300 short of the 1800 goal."""
    rows = GetBudgetVarianceUseCase(_store(), logger=MagicMock()).income_rows(
        "2025-12", 1
    )

    assert rows[0].actual == Decimal("1500")
    assert rows[0].target == Decimal("1800")
    assert rows[0].variance == Decimal("-300")
