"""Pytest configuration and fixtures for invoice table tests."""

from datetime import datetime

import pytest

from invoice_table.data.demo_invoices import DEMO_INVOICES
from invoice_table.lib.ids import SequentialIdGenerator
from invoice_table.models.filters import Filter
from invoice_table.models.invoice import Invoice
from invoice_table.query.session import InvoiceTableSession

FIXED_NOW = datetime(2024, 3, 15, 10, 0, 0)


@pytest.fixture
def scenario_invoices():
    """The two-invoice collection used by the documented scenarios."""
    return [
        Invoice(
            id="INV-1",
            client="Acme",
            issue_date="2024-01-01",
            due_date="2024-01-31",
            amount="$100.00 XLM",
            status="Paid",
        ),
        Invoice(
            id="INV-2",
            client="Beta",
            issue_date="2024-02-01",
            due_date="2024-03-02",
            amount="$50.00 XLM",
            status="Pending",
        ),
    ]


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def session(id_generator):
    """Session over the 16 demo invoices with deterministic ids and clock."""
    return InvoiceTableSession(
        DEMO_INVOICES, id_generator=id_generator, clock=lambda: FIXED_NOW
    )


@pytest.fixture
def amount_filter():
    def _make(operator: str, value: str, filter_id: str = "f-amount") -> Filter:
        return Filter(
            id=filter_id,
            type="amount",
            operator=operator,
            value=value,
            display=f"Amount {operator} {value} XLM",
        )

    return _make


@pytest.fixture
def date_filter():
    def _make(operator: str, value: str, filter_id: str = "f-date") -> Filter:
        return Filter(
            id=filter_id,
            type="date",
            operator=operator,
            value=value,
            display=f"{operator.title()} {value}",
        )

    return _make
