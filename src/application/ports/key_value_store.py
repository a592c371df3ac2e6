"""Port for the key-value store holding persisted documents."""

from typing import Protocol


class KeyValueStorePort(Protocol):
    """Port exposing string values stored under string keys."""

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


__all__ = ["KeyValueStorePort"]
