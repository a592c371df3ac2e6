"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.financial_store import FinancialStore
from src.application.use_cases.generate_insight import GenerateInsightUseCase
from src.infrastructure import container
from src.infrastructure.gemini_insight_service import GeminiInsightService
from src.infrastructure.key_value_store import (
    InMemoryKeyValueStore,
    SqlAlchemyKeyValueStore,
)


def test_build_key_value_store_uses_given_port() -> None:
    """The SQL store should be wired to the provided database port."""
    db_port = MagicMock()

    store = container.build_key_value_store(db_port)

    assert isinstance(store, SqlAlchemyKeyValueStore)
    assert store._db_port is db_port


def test_build_financial_store_with_storage() -> None:
    """A store built on empty storage starts from the seed."""
    store = container.build_financial_store(InMemoryKeyValueStore())

    assert isinstance(store, FinancialStore)
    assert len(store.state.debts) == 2


def test_build_generate_insight_use_case(monkeypatch) -> None:
    """The insight use case should use the Gemini service."""
    monkeypatch.setattr(container.InsightSettings, "from_env", classmethod(
        lambda cls, storage=None: cls(api_key=None)
    ))
    storage = InMemoryKeyValueStore()
    store = container.build_financial_store(storage)

    use_case = container.build_generate_insight_use_case(store, storage)

    assert isinstance(use_case, GenerateInsightUseCase)
    assert isinstance(use_case._insight_service, GeminiInsightService)
