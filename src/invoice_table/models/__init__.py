"""
Data models for the invoice table.

This package provides:
- Invoice records and the page container (invoice)
- Committed filter records and operator tables (filters)
- The mutable per-session query state (common)

Reflex-specific models live in reflex_models and are imported directly by
the state and components so the core stays importable without Reflex.
"""

from invoice_table.models.common import SORT_ASC, SORT_DESC, QueryState
from invoice_table.models.filters import (
    AMOUNT_FILTER,
    AMOUNT_OPERATORS,
    DATE_FILTER,
    DATE_OPERATORS,
    FILTER_TYPES,
    Filter,
)
from invoice_table.models.invoice import (
    ALL_STATUSES,
    SORT_COLUMNS,
    SORT_KEYS,
    STATUS_TABS,
    Invoice,
    InvoicePage,
    InvoiceStatus,
)

__all__ = [
    "ALL_STATUSES",
    "AMOUNT_FILTER",
    "AMOUNT_OPERATORS",
    "DATE_FILTER",
    "DATE_OPERATORS",
    "FILTER_TYPES",
    "Filter",
    "Invoice",
    "InvoicePage",
    "InvoiceStatus",
    "QueryState",
    "SORT_ASC",
    "SORT_COLUMNS",
    "SORT_DESC",
    "SORT_KEYS",
    "STATUS_TABS",
]
