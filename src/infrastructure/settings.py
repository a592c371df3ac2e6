"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.application.ports.key_value_store import KeyValueStorePort
from src.infrastructure.logging.logger import get_app_logger


API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")
API_KEY_STORAGE_KEY = "geminiApiKey"
DEFAULT_INSIGHT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class InsightSettings:
    """Settings for the generative insight collaborator.

    Attributes:
        api_key: Credential for the language service, if any.
        model: Model identifier used for generation.
        source: Where the key came from (environment, storage or None).
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_INSIGHT_MODEL
    source: Optional[str] = None

    @property
    def has_credential(self) -> bool:
        """Return whether an API key is available."""
        return bool(self.api_key)

    @classmethod
    def from_env(
        cls,
        storage: KeyValueStorePort | None = None,
    ) -> "InsightSettings":
        """Build settings from the environment, then the stored user key.

        Args:
            storage: Optional key-value store holding a user-saved key.

        Returns:
            InsightSettings: Settings with the first key found.
        """
        dotenv.load_dotenv()
        model = os.getenv("INSIGHT_MODEL", DEFAULT_INSIGHT_MODEL).strip()
        for name in API_KEY_ENV_VARS:
            value = (os.getenv(name) or "").strip()
            if value:
                return cls(api_key=value, model=model, source="environment")
        if storage is not None:
            stored = (storage.get(API_KEY_STORAGE_KEY) or "").strip()
            if stored:
                return cls(api_key=stored, model=model, source="storage")
        get_app_logger().warning(
            "No API key configured for the insight service. "
            "Set GEMINI_API_KEY or save a key in Settings."
        )
        return cls(api_key=None, model=model, source=None)


def save_api_key(storage: KeyValueStorePort, api_key: str) -> None:
    """Persist a user-supplied API key.

    Args:
        storage: Key-value store for local settings.
        api_key: Key entered by the user; surrounding blanks are dropped.
    """
    storage.set(API_KEY_STORAGE_KEY, api_key.strip())


def load_stored_api_key(storage: KeyValueStorePort) -> str:
    """Return the user-saved API key, or an empty string."""
    return storage.get(API_KEY_STORAGE_KEY) or ""


__all__ = [
    "InsightSettings",
    "save_api_key",
    "load_stored_api_key",
    "API_KEY_STORAGE_KEY",
]
