"""
Utility functions for invoice field parsing and formatting.

Provides helpers for:
- Date parsing (ISO first, then the m/d/y forms seen in exported data)
- Amount parsing from currency-formatted strings
- ISO date formatting for committed filter values
- Case-insensitive client search
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_table.models.invoice import Invoice

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")


def parse_date(date_str: str | None) -> date | None:
    """
    Parse a calendar date string.

    Args:
        date_str: ISO date ("2024-03-15"), ISO timestamp or m/d/y string.

    Returns:
        The calendar date if parsing succeeds, None otherwise.
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # Timestamps keep only their calendar date
    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    return None


def parse_amount(amount: str | None) -> Decimal | None:
    """
    Parse a currency-formatted amount such as "$1,234.56 XLM".

    Every character other than digits, "." and "-" is stripped before the
    remainder is read as a Decimal.

    Returns:
        The amount, or None when nothing numeric is left.
    """
    if amount is None:
        return None
    cleaned = _NON_NUMERIC.sub("", str(amount))
    if not cleaned:
        return None
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def format_iso_date(value: date | datetime) -> str:
    """Return the calendar date of value as "YYYY-MM-DD"."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def matches_query(invoice: "Invoice", query: str) -> bool:
    """
    Check if an invoice's client contains the search query.

    Matching is case-insensitive; an empty query matches everything.
    """
    if not query:
        return True
    return query.lower() in invoice.client.lower()
