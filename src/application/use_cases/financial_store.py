"""Use case holding the authoritative financial aggregate.

``FinancialStore`` wraps the pure reducer with persistence side effects:

* on creation it loads the stored document, falling back to the seed data
  (and saving it) when nothing usable is stored;
* every dispatch that produces a new aggregate is saved under the same key;
* import and export exchange the whole aggregate as a JSON document.
"""

from typing import Callable

from src.application.ports.document_codec import (
    IMPORT_REQUIRED_COLLECTIONS,
    DocumentCodecPort,
    ImportFormatError,
)
from src.application.ports.key_value_store import KeyValueStorePort
from src.domain.models import FinancialData
from src.domain.models.actions import FinancialAction, SetState
from src.domain.seed import build_seed_data
from src.domain.services.reducer import financial_reducer
from src.infrastructure.logging.logger import get_app_logger


STORAGE_KEY = "financialData"


class FinancialStore:
    """Single writer of the financial aggregate."""

    def __init__(
        self,
        storage: KeyValueStorePort,
        codec: DocumentCodecPort,
        logger=None,
        storage_key: str = STORAGE_KEY,
        seed_factory: Callable[[], FinancialData] = build_seed_data,
    ) -> None:
        """Initialize the store and load the persisted aggregate.

        Args:
            storage: Key-value store holding the JSON document.
            codec: Codec converting between documents and aggregates.
            logger: Optional logger compatible with logging.Logger-like API.
            storage_key: Key the document is stored under.
            seed_factory: Builder of the fallback aggregate.
        """
        self._storage = storage
        self._codec = codec
        self._logger = logger or get_app_logger()
        self._storage_key = storage_key
        self._seed_factory = seed_factory
        self._state = self._load()

    @property
    def state(self) -> FinancialData:
        """Return the current aggregate."""
        return self._state

    def dispatch(self, action: FinancialAction) -> FinancialData:
        """Apply an action and persist the result when it changed.

        Args:
            action: Action forwarded to the reducer.

        Returns:
            FinancialData: The aggregate after the action.
        """
        new_state = financial_reducer(self._state, action)
        if new_state is self._state:
            self._logger.debug(f"{type(action).__name__} left state unchanged")
            return new_state
        self._state = new_state
        self._save()
        return new_state

    def export_document(self) -> str:
        """Return the aggregate as a portable JSON document."""
        return self._codec.encode(self._state)

    def import_document(self, raw: str) -> FinancialData:
        """Replace the aggregate with an imported document.

        Args:
            raw: JSON document. ``expenses``, ``debts``, ``income`` and
                ``assets`` are required; other collections default to empty.

        Returns:
            FinancialData: The imported aggregate.

        Raises:
            ImportFormatError: If the document is invalid. The current
                aggregate is left untouched.
        """
        try:
            data = self._codec.decode(raw, required=IMPORT_REQUIRED_COLLECTIONS)
        except ImportFormatError as exc:
            self._logger.warning(f"Rejected import document: {exc}")
            raise
        self._logger.info(
            f"Imported document with {len(data.expenses)} expenses, "
            f"{len(data.debts)} debts, {len(data.income)} income entries, "
            f"{len(data.assets)} assets"
        )
        return self.dispatch(SetState(payload=data))

    def _load(self) -> FinancialData:
        raw = self._storage.get(self._storage_key)
        if raw is None:
            self._logger.info("No stored financial data found; using seed data")
            return self._reset_to_seed()
        try:
            data = self._codec.decode(raw)
        except ImportFormatError as exc:
            self._logger.warning(
                f"Stored financial data is incomplete, using seed data: {exc}"
            )
            return self._reset_to_seed()
        self._logger.info("Loaded financial data from storage")
        return data

    def _reset_to_seed(self) -> FinancialData:
        seed = self._seed_factory()
        self._storage.set(self._storage_key, self._codec.encode(seed))
        return seed

    def _save(self) -> None:
        self._storage.set(self._storage_key, self._codec.encode(self._state))


__all__ = ["FinancialStore", "STORAGE_KEY"]
