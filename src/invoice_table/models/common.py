"""
Query state for one interactive invoice table session.

The state holds only what the operator chose; everything shown on screen
is derived from it by the query engine and paginator.
"""

from dataclasses import dataclass

from invoice_table.models.invoice import ALL_STATUSES

SORT_ASC = "asc"
SORT_DESC = "desc"


@dataclass
class QueryState:
    """
    Operator selections driving the invoice table.

    Attributes:
        status_tab: "All" or one of the invoice statuses.
        search_text: Client search text, matched case-insensitively.
        sort_key: Column the list is sorted by, or None for input order.
        sort_order: "asc" or "desc".
        current_page: Current page number (1-indexed).
    """

    status_tab: str = ALL_STATUSES
    search_text: str = ""
    sort_key: str | None = None
    sort_order: str = SORT_ASC
    current_page: int = 1

    def reset_page(self) -> None:
        """Return to the first page."""
        self.current_page = 1
