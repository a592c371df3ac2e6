"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


class InvalidAmountError(ValueError):
    """Raised when a monetary value does not parse to a finite number."""


def coerce_amount(value) -> Decimal:
    """Parse a monetary input, rejecting NaN, infinities and garbage.

    Args:
        value: Raw value (int, float, str or Decimal).

    Returns:
        Decimal: Parsed finite amount.

    Raises:
        InvalidAmountError: If the value is missing or not a finite number.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    return amount


__all__ = ["InvalidAmountError", "coerce_amount"]
