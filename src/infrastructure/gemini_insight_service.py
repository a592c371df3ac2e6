"""Insight collaborator backed by the Google GenAI SDK."""

import json

from google import genai

from src.application.ports.insight_service import InsightServicePort
from src.domain.models import (
    FinancialData,
    InsightError,
    InsightErrorKind,
    InsightOk,
    InsightResult,
    RunwayInputs,
)
from src.infrastructure.document_schema import JsonDocumentCodec
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import InsightSettings


MISSING_KEY_MESSAGE = (
    "Could not get insight. Please ensure your Gemini API key is "
    "configured correctly."
)
SERVICE_ERROR_MESSAGE = (
    "An unexpected error occurred while contacting the insight service."
)
EMPTY_RESPONSE_MESSAGE = "The insight service returned an empty response."

INSIGHT_PROMPT = """
You are a helpful and concise financial assistant.
Analyze the following user's financial summary and provide one single, \
actionable insight or observation.
Keep the tone encouraging and straightforward. The user is on an aggressive \
wealth-building plan.
Do not use markdown. Respond in a single sentence.

User's Data:
{summary}

Your insight:
"""

FORECAST_PROMPT = """
You are a pragmatic financial planner. Using the user's complete financial \
data below, write a forecast covering the next {months} months.

Structure the answer with these markdown headings:
# Financial Rundown
## Current Position
## Cash Flow Outlook
## Runway
## Debt Payoff Timeline
## Recommendations

Key figures:
- Liquid assets (savings and emergency fund): {liquid}
- Average monthly income (last months with income): {income}
- Recurring monthly outgoings (recurring expenses and debt minimums): \
{outgoings}
- Net monthly cash flow: {net}

If the net monthly cash flow is negative, estimate how many months the liquid \
assets last. Use bullet points starting with "*".

Full data (JSON):
{document}
"""


class GeminiInsightService(InsightServicePort):
    """Generate insights and forecasts with a Gemini model.

    Failures never raise: they come back as ``InsightError`` values.
    """

    def __init__(
        self,
        settings: InsightSettings,
        logger=None,
        client_factory=genai.Client,
    ) -> None:
        """Initialize the service.

        Args:
            settings: Credential and model configuration.
            logger: Optional logger compatible with logging.Logger-like API.
            client_factory: Callable building a client from an API key.
        """
        self._settings = settings
        self._logger = logger or get_app_logger()
        self._client_factory = client_factory
        self._client = None

    def get_insight(self, summary_text: str) -> InsightResult:
        """Return one sentence of commentary on the summary."""
        prompt = INSIGHT_PROMPT.format(summary=summary_text.strip())
        return self._generate(prompt)

    def get_forecast(
        self,
        data: FinancialData,
        horizon_months: int,
        runway: RunwayInputs,
    ) -> InsightResult:
        """Return a headered forecast over ``horizon_months``."""
        document = json.loads(JsonDocumentCodec().encode(data))
        prompt = FORECAST_PROMPT.format(
            months=horizon_months,
            liquid=runway.liquid_assets,
            income=round(runway.average_monthly_income, 2),
            outgoings=runway.recurring_outgoings,
            net=round(runway.net_cash_flow, 2),
            document=json.dumps(document, ensure_ascii=False),
        )
        return self._generate(prompt)

    def _generate(self, prompt: str) -> InsightResult:
        if not self._settings.has_credential:
            return InsightError(
                InsightErrorKind.MISSING_CREDENTIAL,
                MISSING_KEY_MESSAGE,
            )
        try:
            response = self._get_client().models.generate_content(
                model=self._settings.model,
                contents=prompt,
            )
        except Exception as exc:
            self._logger.error(f"Insight service call failed: {exc}")
            return InsightError(
                InsightErrorKind.SERVICE_ERROR,
                SERVICE_ERROR_MESSAGE,
            )
        text = (getattr(response, "text", None) or "").strip()
        if not text:
            return InsightError(
                InsightErrorKind.EMPTY_RESPONSE,
                EMPTY_RESPONSE_MESSAGE,
            )
        return InsightOk(text)

    def _get_client(self):
        if self._client is None:
            self._client = self._client_factory(api_key=self._settings.api_key)
        return self._client


__all__ = ["GeminiInsightService"]
