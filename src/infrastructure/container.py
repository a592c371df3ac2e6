"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.document_codec import DocumentCodecPort
from src.application.ports.insight_service import InsightServicePort
from src.application.ports.key_value_store import KeyValueStorePort
from src.application.use_cases.financial_store import FinancialStore
from src.application.use_cases.generate_insight import GenerateInsightUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.document_schema import JsonDocumentCodec
from src.infrastructure.gemini_insight_service import GeminiInsightService
from src.infrastructure.key_value_store import SqlAlchemyKeyValueStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import InsightSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_key_value_store(
    db_port: DatabaseEnginePort | None = None,
) -> KeyValueStorePort:
    """Return the SQL-backed key-value store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyKeyValueStore(resolved_db, logger=get_app_logger())


def build_document_codec() -> DocumentCodecPort:
    """Return the JSON document codec."""
    return JsonDocumentCodec()


def build_financial_store(
    storage: KeyValueStorePort | None = None,
) -> FinancialStore:
    """Return a store loaded from persistence (or seeded)."""
    resolved_storage = storage or build_key_value_store()
    return FinancialStore(
        resolved_storage,
        build_document_codec(),
        logger=get_app_logger(),
    )


def build_insight_service(
    storage: KeyValueStorePort | None = None,
) -> InsightServicePort:
    """Return the insight collaborator configured from settings."""
    resolved_storage = storage or build_key_value_store()
    settings = InsightSettings.from_env(resolved_storage)
    return GeminiInsightService(settings, logger=get_app_logger())


def build_generate_insight_use_case(
    store: FinancialStore,
    storage: KeyValueStorePort | None = None,
) -> GenerateInsightUseCase:
    """Return the insight use case bound to ``store``."""
    return GenerateInsightUseCase(
        store,
        build_insight_service(storage),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_key_value_store",
    "build_document_codec",
    "build_financial_store",
    "build_insight_service",
    "build_generate_insight_use_case",
]
