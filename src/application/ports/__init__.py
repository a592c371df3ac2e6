"""Application ports package."""

from .database import DatabaseEnginePort
from .document_codec import (
    ALL_COLLECTIONS,
    IMPORT_REQUIRED_COLLECTIONS,
    DocumentCodecPort,
    ImportFormatError,
)
from .insight_service import InsightServicePort
from .key_value_store import KeyValueStorePort

__all__ = [
    "DatabaseEnginePort",
    "ALL_COLLECTIONS",
    "IMPORT_REQUIRED_COLLECTIONS",
    "DocumentCodecPort",
    "ImportFormatError",
    "InsightServicePort",
    "KeyValueStorePort",
]
