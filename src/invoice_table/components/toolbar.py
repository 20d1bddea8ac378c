"""
Toolbar component for the invoice table.

Provides the status tabs and the client search input.
"""

import reflex as rx

from invoice_table.models.invoice import STATUS_TABS
from invoice_table.state import InvoiceTableState


def _status_button(status_tab: str) -> rx.Component:
    return rx.button(
        status_tab,
        on_click=InvoiceTableState.change_status_tab(status_tab),
        variant=rx.cond(InvoiceTableState.status_tab == status_tab, "solid", "soft"),
        class_name="status-tab",
    )


def toolbar() -> rx.Component:
    """
    Build the status tabs and search input row.

    Returns:
        The toolbar component.
    """
    return rx.box(
        rx.hstack(
            *[_status_button(status_tab) for status_tab in STATUS_TABS],
            class_name="status-tabs",
        ),
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Search invoices...",
                value=InvoiceTableState.search_text,
                on_change=InvoiceTableState.change_search_text,
                class_name="search-input",
            ),
            class_name="input-with-icon",
        ),
        class_name="toolbar",
    )
