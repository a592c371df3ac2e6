"""Database infrastructure for the finance dashboard.

This module exposes helpers to create and reuse the SQLAlchemy engine
backing the key-value store. It belongs to the infrastructure layer because
it deals with an external system (SQLite by default, any SQLAlchemy URL
through ``FINANCE_DB_URL``).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from src.application.ports.database import DatabaseEnginePort
from src.utils.utils import get_project_root


DB_URL_ENV = "FINANCE_DB_URL"


def _default_db_url() -> str:
    """Return the SQLite URL inside the project ``data`` directory."""
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'finance.db'}"


def _get_db_url() -> str:
    """Read the database URL, defaulting to the local SQLite file.

    Returns:
        str: Fully qualified SQLAlchemy database URL.
    """
    dotenv.load_dotenv()
    value = os.getenv(DB_URL_ENV)
    if not value:
        return _default_db_url()
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine with health checks enabled. SQLite
        connections may be shared across Streamlit script threads.
    """
    kwargs = {"pool_pre_ping": True, "future": True}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(db_url, **kwargs)


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the finance database.

    Returns:
        Engine: Lazily initialized engine connected to the finance store.
    """
    global _finance_engine
    if _finance_engine is None:
        _finance_engine = _create_engine(_get_db_url())
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code can depend only on the protocol.
    """

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance store.
        """
        return get_finance_engine()


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
