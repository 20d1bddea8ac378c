"""
Demo implementation of InvoiceService using static in-memory data.

This service is useful for:
- Local development without an invoice export at hand
- Testing the table with realistic data
- Demonstrating the application
"""

from typing import Sequence

from invoice_table.data.demo_invoices import DEMO_INVOICES
from invoice_table.models.invoice import Invoice
from invoice_table.services.invoice_service import InvoiceService


class DemoInvoiceService(InvoiceService):
    """In-memory invoice service backed by static demo data."""

    def __init__(self, invoices: Sequence[Invoice] | None = None) -> None:
        """
        Initialize with invoice data.

        Args:
            invoices: Custom invoice list, or None to use DEMO_INVOICES.
        """
        self._invoices: Sequence[Invoice] = (
            DEMO_INVOICES if invoices is None else invoices
        )

    def list_invoices(self) -> Sequence[Invoice]:
        return list(self._invoices)
