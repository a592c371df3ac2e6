"""Tagged results returned by the insight collaborator."""

from dataclasses import dataclass
from enum import Enum


class InsightErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    SERVICE_ERROR = "service_error"
    EMPTY_RESPONSE = "empty_response"


@dataclass(frozen=True)
class InsightOk:
    """Successful response text."""

    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InsightError:
    """Failure reduced to a displayable message."""

    kind: InsightErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


InsightResult = InsightOk | InsightError


__all__ = ["InsightErrorKind", "InsightOk", "InsightError", "InsightResult"]
