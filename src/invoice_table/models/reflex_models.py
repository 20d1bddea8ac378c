"""
Reflex-compatible models for the invoice table.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components.
"""

import reflex as rx

from invoice_table.models.filters import Filter
from invoice_table.models.invoice import Invoice


class InvoiceModel(rx.Base):
    """Invoice row."""

    id: str = ""
    client: str = ""
    issue_date: str = ""
    due_date: str = ""
    amount: str = ""
    status: str = ""


class FilterModel(rx.Base):
    """Applied filter pill."""

    id: str = ""
    type: str = ""
    operator: str = ""
    value: str = ""
    display: str = ""
    preset: str | None = None


def invoice_to_model(invoice: Invoice) -> InvoiceModel:
    """Convert an Invoice into an InvoiceModel."""
    return InvoiceModel(
        id=invoice.id,
        client=invoice.client,
        issue_date=invoice.issue_date,
        due_date=invoice.due_date,
        amount=invoice.amount,
        status=invoice.status,
    )


def filter_to_model(applied: Filter) -> FilterModel:
    """Convert a Filter into a FilterModel."""
    return FilterModel(**applied.to_dict())
