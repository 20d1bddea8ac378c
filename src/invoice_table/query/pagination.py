"""Fixed-size pagination of the filtered invoice list."""

from typing import Sequence

from invoice_table.models.invoice import Invoice, InvoicePage

PAGE_SIZE = 7


def paginate(
    invoices: Sequence[Invoice], page: int = 1, page_size: int = PAGE_SIZE
) -> InvoicePage:
    """
    Return page number page of invoices.

    Args:
        invoices: The filtered and sorted list.
        page: Page number (1-indexed).
        page_size: Rows per page.

    Returns:
        InvoicePage with the slice and the full list size.
    """
    start = (page - 1) * page_size
    return InvoicePage(
        items=list(invoices[start : start + page_size]),
        total=len(invoices),
        page=page,
        page_size=page_size,
    )
