"""Month key helpers.

A month key is a ``YYYY-MM`` string. Keys are compared as calendar months by
parsing them to the first day of the month.
"""

import re
from datetime import date

MONTH_KEY_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
_MONTH_KEY = re.compile(MONTH_KEY_PATTERN)


def parse_month_key(month: str) -> date:
    """Parse a month key into the first day of that month.

    Args:
        month: Month key such as ``2025-11``. A full ISO date is accepted and
            truncated to its month.

    Returns:
        date: First day of the month.

    Raises:
        ValueError: If the key is not a valid year and month.
    """
    parts = month.strip().split("-")
    if len(parts) < 2:
        raise ValueError(f"Invalid month key: {month!r}")
    year, month_number = int(parts[0]), int(parts[1])
    return date(year, month_number, 1)


def try_parse_month_key(month: str) -> date | None:
    """Return the first day of ``month``, or None when it does not parse."""
    try:
        return parse_month_key(month)
    except ValueError:
        return None


def is_month_key(value: str) -> bool:
    """Return whether ``value`` is a canonical zero-padded ``YYYY-MM`` key."""
    return bool(_MONTH_KEY.fullmatch(value))


def normalize_month_key(value: str) -> str:
    """Return the canonical ``YYYY-MM`` form of a month key or ISO date.

    Raises:
        ValueError: If the value is not a valid year and month.
    """
    return format_month_key(parse_month_key(value))


def format_month_key(value: date) -> str:
    """Return the ``YYYY-MM`` key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def first_day_of_month(month: str) -> str:
    """Return the ISO date of the first day of ``month``."""
    return parse_month_key(month).isoformat()


def add_months(month: str, count: int) -> str:
    """Shift a month key by ``count`` months (negative moves backwards)."""
    start = parse_month_key(month)
    index = start.year * 12 + (start.month - 1) + count
    return format_month_key(date(index // 12, index % 12 + 1, 1))


def month_range(start: str, count: int) -> list[str]:
    """Return ``count`` consecutive month keys beginning at ``start``."""
    return [add_months(start, offset) for offset in range(count)]


def is_on_or_before(month: str, other: str) -> bool:
    """Return whether ``month`` falls on or before ``other`` as calendar months."""
    return parse_month_key(month) <= parse_month_key(other)


__all__ = [
    "MONTH_KEY_PATTERN",
    "is_month_key",
    "normalize_month_key",
    "parse_month_key",
    "try_parse_month_key",
    "format_month_key",
    "first_day_of_month",
    "add_months",
    "month_range",
    "is_on_or_before",
]
