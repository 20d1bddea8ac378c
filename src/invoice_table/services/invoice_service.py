"""
Abstract base class defining the invoice data access contract.

The invoice table filters, sorts and pages entirely in memory, so a
service only has to hand over the full, already materialised collection.

Implementations:
- DemoInvoiceService: Static fixture data for development/testing
- JsonInvoiceService: Invoices loaded from a JSON file
"""

from abc import ABC, abstractmethod
from typing import Sequence

from invoice_table.models.invoice import Invoice


class InvoiceService(ABC):
    """Abstract base class for invoice data access."""

    @abstractmethod
    def list_invoices(self) -> Sequence[Invoice]:
        """Return every invoice available to the table, in source order."""
