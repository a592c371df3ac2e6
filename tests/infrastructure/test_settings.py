"""Tests for infrastructure settings."""

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.key_value_store import InMemoryKeyValueStore
from src.infrastructure.settings import (
    API_KEY_STORAGE_KEY,
    InsightSettings,
    load_stored_api_key,
    save_api_key,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in ("GEMINI_API_KEY", "API_KEY", "INSIGHT_MODEL"):
        monkeypatch.delenv(name, raising=False)


def test_from_env_prefers_environment(monkeypatch) -> None:
    """Environment keys should win over stored keys."""
    monkeypatch.setenv("GEMINI_API_KEY", " env-key ")
    storage = InMemoryKeyValueStore({API_KEY_STORAGE_KEY: "stored"})

    settings = InsightSettings.from_env(storage)

    assert settings.api_key == "env-key"
    assert settings.source == "environment"
    assert settings.has_credential


def test_from_env_falls_back_to_storage(monkeypatch) -> None:
    """A stored key is used when the environment has none."""
    monkeypatch.setenv("INSIGHT_MODEL", "gemini-test")
    storage = InMemoryKeyValueStore({API_KEY_STORAGE_KEY: "stored"})

    settings = InsightSettings.from_env(storage)

    assert settings.api_key == "stored"
    assert settings.source == "storage"
    assert settings.model == "gemini-test"


def test_from_env_without_key_has_no_credential() -> None:
    """Missing keys should produce settings without a credential."""
    settings = InsightSettings.from_env(InMemoryKeyValueStore())

    assert settings.api_key is None
    assert settings.has_credential is False


def test_save_and_load_api_key() -> None:
    """Saved keys should be trimmed and read back."""
    storage = InMemoryKeyValueStore()

    save_api_key(storage, "  abc  ")

    assert load_stored_api_key(storage) == "abc"
    assert load_stored_api_key(InMemoryKeyValueStore()) == ""
