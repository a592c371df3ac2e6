"""Key-value store adapters for persisted documents and settings."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.key_value_store import KeyValueStorePort
from src.infrastructure.logging.logger import get_app_logger


CREATE_KEY_VALUE_SQL = """
CREATE TABLE IF NOT EXISTS key_value_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

SELECT_VALUE_SQL = text(
    """
    SELECT value
    FROM key_value_store
    WHERE key = :key
    """
)

UPSERT_VALUE_SQL = text(
    """
    INSERT INTO key_value_store (key, value)
    VALUES (:key, :value)
    ON CONFLICT (key) DO UPDATE SET value = excluded.value
    """
)


class SqlAlchemyKeyValueStore(KeyValueStorePort):
    """Key-value store backed by a single SQL table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or None when absent."""
        engine = self._db_port.get_finance_engine()
        self._ensure_table(engine)
        with engine.connect() as conn:
            row = conn.execute(SELECT_VALUE_SQL, {"key": key}).first()
        return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        engine = self._db_port.get_finance_engine()
        self._ensure_table(engine)
        with engine.begin() as conn:
            conn.execute(UPSERT_VALUE_SQL, {"key": key, "value": value})
        self._logger.debug(f"Stored {len(value)} characters under {key}")

    def _ensure_table(self, engine) -> None:
        """Create the key_value_store table if it does not exist."""
        if self._table_ready:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_KEY_VALUE_SQL)
        self._table_ready = True


class InMemoryKeyValueStore(KeyValueStorePort):
    """Dictionary-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


__all__ = ["SqlAlchemyKeyValueStore", "InMemoryKeyValueStore"]
