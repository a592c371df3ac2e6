"""Tests for the insight and forecast use case."""

from datetime import date
from unittest.mock import MagicMock

from src.application.use_cases.generate_insight import (
    GenerateInsightUseCase,
    build_financial_summary,
    clamp_horizon,
)
from src.domain.models import InsightError, InsightErrorKind, InsightOk
from src.domain.seed import build_seed_data


class _Store:
    def __init__(self) -> None:
        self.state = build_seed_data()


def _use_case(service, logger=None) -> GenerateInsightUseCase:
    return GenerateInsightUseCase(
        _Store(),
        service,
        logger=logger or MagicMock(),
        today=lambda: date(2025, 11, 20),
    )


def test_clamp_horizon_bounds() -> None:
    """Horizons are clamped to 6-60 months."""
    assert clamp_horizon(1) == 6
    assert clamp_horizon(24) == 24
    assert clamp_horizon(120) == 60


def test_build_financial_summary_for_seed_november() -> None:
    """The summary should list counts and totals for each area."""
    summary = build_financial_summary(build_seed_data(), "2025-11")

    lines = summary.splitlines()
    assert lines[0] == "Expenses: 3 transactions this month, total 780."
    assert lines[1] == "Debts: 2 active debts, total balance 6000."
    assert lines[2] == "Income: 2 sources this month, total 1250."
    assert lines[3] == "Assets: 4 assets, total value 5950."


def test_insight_passes_summary_to_service() -> None:
    """insight should send the current month summary."""
    service = MagicMock()
    service.get_insight.return_value = InsightOk("Keep going.")

    result = _use_case(service).insight()

    assert result == InsightOk("Keep going.")
    sent = service.get_insight.call_args.args[0]
    assert "3 transactions this month" in sent


def test_forecast_clamps_horizon_and_sends_runway() -> None:
    """forecast should clamp the horizon and compute runway inputs."""
    service = MagicMock()
    service.get_forecast.return_value = InsightOk("# Financial Rundown")

    _use_case(service).forecast(200)

    data, horizon, runway = service.get_forecast.call_args.args
    assert horizon == 60
    assert data == build_seed_data()
    assert runway.recurring_outgoings == 880


def test_errors_are_returned_and_logged() -> None:
    """Tagged errors should reach the caller and log a warning."""
    logger = MagicMock()
    service = MagicMock()
    service.get_insight.return_value = InsightError(
        InsightErrorKind.SERVICE_ERROR, "boom"
    )

    result = _use_case(service, logger).insight()

    assert result.ok is False
    logger.warning.assert_called_once()


def test_stale_response_is_discarded() -> None:
    """A response superseded by a newer request should yield None."""
    service = MagicMock()
    use_case = _use_case(service)
    inner_results = []

    def slow_insight(_summary):
        inner_results.append(use_case.forecast(12))
        return InsightOk("old")

    service.get_insight.side_effect = slow_insight
    service.get_forecast.return_value = InsightOk("new")

    outer = use_case.insight()

    assert outer is None
    assert inner_results == [InsightOk("new")]
