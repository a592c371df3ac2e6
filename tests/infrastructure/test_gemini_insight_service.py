"""Tests for the Gemini-backed insight service."""

from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.domain.models import InsightErrorKind, InsightOk
from src.domain.seed import build_seed_data
from src.domain.services.finance import compute_runway_inputs
from src.infrastructure.gemini_insight_service import GeminiInsightService
from src.infrastructure.settings import InsightSettings


def _client_factory(text=None, error=None):
    client = MagicMock()
    if error is not None:
        client.models.generate_content.side_effect = error
    else:
        client.models.generate_content.return_value = SimpleNamespace(text=text)
    factory = MagicMock(return_value=client)
    return factory, client


def _service(factory, api_key="key", logger=None) -> GeminiInsightService:
    return GeminiInsightService(
        InsightSettings(api_key=api_key, model="gemini-test"),
        logger=logger or MagicMock(),
        client_factory=factory,
    )


def test_missing_key_returns_error_without_calling_client() -> None:
    """Without a credential the client should never be built."""
    factory, _ = _client_factory(text="unused")

    result = _service(factory, api_key=None).get_insight("summary")

    assert result.kind is InsightErrorKind.MISSING_CREDENTIAL
    assert "API key" in result.message
    factory.assert_not_called()


def test_insight_sends_summary_to_configured_model() -> None:
    """The prompt should embed the summary and use the configured model."""
    factory, client = _client_factory(text=" Save more. \n")

    result = _service(factory).get_insight("Expenses: 3 transactions")

    assert result == InsightOk("Save more.")
    factory.assert_called_once_with(api_key="key")
    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    assert "Expenses: 3 transactions" in kwargs["contents"]


def test_forecast_prompt_includes_horizon_and_runway() -> None:
    """The forecast prompt should carry the horizon and runway figures."""
    factory, client = _client_factory(text="# Financial Rundown")
    data = build_seed_data()
    runway = compute_runway_inputs(data, date(2025, 12, 20))

    result = _service(factory).get_forecast(data, 24, runway)

    assert result.ok
    prompt = client.models.generate_content.call_args.kwargs["contents"]
    assert "next 24 months" in prompt
    assert "Liquid assets (savings and emergency fund): 3500" in prompt
    assert '"recurringExpenses"' in prompt


def test_service_failure_is_reported_and_logged() -> None:
    """Client exceptions become service errors."""
    logger = MagicMock()
    factory, _ = _client_factory(error=RuntimeError("quota"))

    result = _service(factory, logger=logger).get_insight("summary")

    assert result.kind is InsightErrorKind.SERVICE_ERROR
    logger.error.assert_called_once()


def test_empty_response_is_an_error() -> None:
    """Blank response text should not be shown as an insight."""
    factory, _ = _client_factory(text="   ")

    result = _service(factory).get_insight("summary")

    assert result.kind is InsightErrorKind.EMPTY_RESPONSE


def test_client_is_built_once() -> None:
    """Repeated calls should reuse the lazily created client."""
    factory, _ = _client_factory(text="ok")
    service = _service(factory)

    service.get_insight("a")
    service.get_insight("b")

    factory.assert_called_once()
