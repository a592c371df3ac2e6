"""Identifier helpers for financial records."""

from uuid import uuid4

from src.domain.constants import PURCHASE_EXPENSE_PREFIX, RECURRING_LOG_PREFIX


def new_id(prefix: str) -> str:
    """Return a fresh random identifier such as ``e-3f2a...``."""
    return f"{prefix}-{uuid4().hex}"


def recurring_log_id(template_id: str, month: str) -> str:
    """Return the deterministic id of a template logged for ``month``."""
    return f"{RECURRING_LOG_PREFIX}-{template_id}-{month}"


def purchase_expense_id(purchase_id: str) -> str:
    """Return the deterministic id of the expense logged for a purchase."""
    return f"{PURCHASE_EXPENSE_PREFIX}-{purchase_id}"


__all__ = ["new_id", "recurring_log_id", "purchase_expense_id"]
