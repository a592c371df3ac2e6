"""Port for encoding the financial aggregate as a portable document."""

from typing import Protocol

from src.domain.models import FinancialData


ALL_COLLECTIONS = (
    "expenses",
    "recurringExpenses",
    "debts",
    "income",
    "assets",
    "incomeGoals",
    "expensePlans",
    "purchases",
)

IMPORT_REQUIRED_COLLECTIONS = ("expenses", "debts", "income", "assets")


class ImportFormatError(ValueError):
    """Raised when a document cannot be turned into a FinancialData."""


class DocumentCodecPort(Protocol):
    """Port converting between FinancialData and JSON documents."""

    def encode(self, data: FinancialData) -> str:
        """Serialize the aggregate to a JSON document."""

    def decode(
        self,
        raw: str,
        required: tuple[str, ...] = ALL_COLLECTIONS,
    ) -> FinancialData:
        """Parse and validate a JSON document.

        Args:
            raw: JSON text.
            required: Top-level collections that must be present. Other
                collections default to empty.

        Raises:
            ImportFormatError: If the document is unparseable or invalid.
        """


__all__ = [
    "ALL_COLLECTIONS",
    "IMPORT_REQUIRED_COLLECTIONS",
    "ImportFormatError",
    "DocumentCodecPort",
]
