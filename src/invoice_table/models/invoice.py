"""
Invoice domain models and the page container.

Invoices are read-only records supplied by a data source. Field values are
kept exactly as they arrive (dates and amounts stay strings) because the
table sorts on the raw text and only the filter predicates parse them.
"""

from dataclasses import dataclass
from enum import Enum
from math import ceil
from typing import Sequence


class InvoiceStatus(str, Enum):
    """Lifecycle status of an invoice."""

    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


ALL_STATUSES = "All"
STATUS_TABS: tuple[str, ...] = (
    ALL_STATUSES,
    *(status.value for status in InvoiceStatus),
)

# Column keys in display order, with their header labels
SORT_COLUMNS: dict[str, str] = {
    "id": "Invoice #",
    "client": "Client",
    "issue_date": "Issue Date",
    "due_date": "Due Date",
    "amount": "Amount",
    "status": "Status",
}
SORT_KEYS: tuple[str, ...] = tuple(SORT_COLUMNS)


@dataclass(frozen=True, slots=True)
class Invoice:
    """A single invoice row."""

    id: str
    client: str
    issue_date: str
    due_date: str
    amount: str
    status: str


@dataclass(slots=True)
class InvoicePage:
    """Represents a single page of the filtered invoice list."""

    items: Sequence[Invoice]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Number of pages; 0 when nothing matched."""
        return ceil(self.total / self.page_size)

    @property
    def start_entry(self) -> int:
        """1-based position of the first row on this page."""
        return (self.page - 1) * self.page_size + 1

    @property
    def end_entry(self) -> int:
        """1-based position of the last row on this page."""
        return min(self.page * self.page_size, self.total)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.total_pages > 0 and self.page < self.total_pages

