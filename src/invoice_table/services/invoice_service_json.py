"""
JSON file implementation of InvoiceService.

Reads an export shaped as {"invoices": [{...}, ...]}. Records may use the
camelCase keys of the seller dashboard export ("issueDate", "dueDate") or
the snake_case field names. benedict handles loading and gives safe access
to missing keys.

Environment Variables:
    INVOICE_TABLE_DATA_PATH: Path of the JSON file when none is passed in
"""

import os
from pathlib import Path
from typing import Sequence

from benedict import benedict

from invoice_table.lib import logs
from invoice_table.models.invoice import Invoice
from invoice_table.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)

_DATA_PATH_KEY = "INVOICE_TABLE_DATA_PATH"


def _parse_invoice(b: benedict) -> Invoice:
    """Parse one benedict-wrapped record into an Invoice."""
    return Invoice(
        id=str(b.get("id", "")),
        client=b.get("client", ""),
        issue_date=b.get("issueDate", b.get("issue_date", "")),
        due_date=b.get("dueDate", b.get("due_date", "")),
        amount=str(b.get("amount", "")),
        status=b.get("status", ""),
    )


class JsonInvoiceService(InvoiceService):
    """
    Invoice service reading a JSON export once and serving it from memory.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        """
        Initialize the service with the file location.

        Raises:
            ValueError: If no path is given and INVOICE_TABLE_DATA_PATH is unset.
        """
        resolved = path or os.getenv(_DATA_PATH_KEY)
        if not resolved:
            raise ValueError(f"{_DATA_PATH_KEY} is not set")
        self.path = Path(resolved)
        self._invoices: list[Invoice] | None = None

    def list_invoices(self) -> Sequence[Invoice]:
        if self._invoices is None:
            self._invoices = self._load()
        return list(self._invoices)

    def _load(self) -> list[Invoice]:
        """
        Load and parse the export.

        Raises:
            ValueError: If the file has no "invoices" list or a record
                lacks an id.
        """
        data = benedict.from_json(str(self.path))
        records = data.get("invoices")
        if not isinstance(records, list):
            raise ValueError(f"{self.path} does not contain an 'invoices' list")

        invoices = []
        for index, record in enumerate(records):
            invoice = _parse_invoice(benedict(record))
            if not invoice.id:
                raise ValueError(f"{self.path}: invoice #{index} has no id")
            invoices.append(invoice)
        LOG.info("Loaded %s invoices from %s", len(invoices), self.path)
        return invoices
