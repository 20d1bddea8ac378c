"""
Service factory for the invoice table.

This module provides the get_invoice_service() factory function that returns
the appropriate InvoiceService implementation based on configuration.

Available Implementations:
- demo: In-memory service with static invoice data
- json: Invoices loaded from INVOICE_TABLE_DATA_PATH

The service is cached at the module level, so the same instance is reused
across all sessions. Configure via INVOICE_TABLE_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_table.lib import logs
from invoice_table.services.invoice_service import InvoiceService
from invoice_table.services.invoice_service_demo import DemoInvoiceService
from invoice_table.services.invoice_service_json import JsonInvoiceService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], InvoiceService]] = {
    "demo": lambda: DemoInvoiceService(),
    "json": lambda: JsonInvoiceService(),
}


@cache
def get_invoice_service(kind: str | None = None) -> InvoiceService:
    """Return the configured invoice service implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_TABLE_SERVICE", "demo")).lower()
    LOG.info("get_invoice_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoInvoiceService",
    "InvoiceService",
    "JsonInvoiceService",
    "get_invoice_service",
]
