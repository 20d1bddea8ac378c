"""
Sortable invoice table with its pagination footer.

Clicking a column header toggles sorting on that column; the header shows
an arrow for the active column and a neutral icon for the others.
"""

import reflex as rx

from invoice_table.models.invoice import SORT_COLUMNS
from invoice_table.models.reflex_models import InvoiceModel
from invoice_table.state import InvoiceTableState


def _sort_icon(key: str) -> rx.Component:
    return rx.cond(
        InvoiceTableState.sort_key == key,
        rx.cond(
            InvoiceTableState.sort_order == "asc",
            rx.icon("move-up", size=16),
            rx.icon("move-down", size=16),
        ),
        rx.icon("arrow-up-down", size=16, opacity="0.5"),
    )


def _header_cell(key: str, label: str) -> rx.Component:
    return rx.table.column_header_cell(
        rx.hstack(rx.text(label), _sort_icon(key), align="center", spacing="1"),
        on_click=InvoiceTableState.toggle_sort(key),
        class_name="sortable-header",
    )


def _status_badge(status) -> rx.Component:
    return rx.badge(
        status,
        color_scheme=rx.match(
            status,
            ("Paid", "green"),
            ("Pending", "yellow"),
            ("Overdue", "red"),
            "gray",
        ),
        radius="full",
    )


def _invoice_row(invoice: InvoiceModel) -> rx.Component:
    """Build a table row for one invoice."""
    return rx.table.row(
        rx.table.cell(invoice.id),
        rx.table.cell(invoice.client),
        rx.table.cell(invoice.issue_date),
        rx.table.cell(invoice.due_date),
        rx.table.cell(invoice.amount),
        rx.table.cell(_status_badge(invoice.status)),
        rx.table.cell(
            rx.button(rx.icon("eye", size=16), "View", variant="ghost"),
            text_align="right",
        ),
        key=invoice.id,
    )


def _empty_row() -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            "No invoices match your filter criteria",
            custom_attrs={"colSpan": len(SORT_COLUMNS) + 1},
            text_align="center",
            class_name="muted",
        ),
    )


def _pagination() -> rx.Component:
    return rx.hstack(
        rx.text(InvoiceTableState.entries_summary, size="2"),
        rx.hstack(
            rx.button(
                "Previous",
                variant="ghost",
                disabled=~InvoiceTableState.has_previous,
                on_click=InvoiceTableState.previous_page,
            ),
            rx.button(
                "Next",
                variant="outline",
                disabled=~InvoiceTableState.has_next,
                on_click=InvoiceTableState.next_page,
            ),
            spacing="3",
        ),
        justify="between",
        align="center",
        class_name="pagination",
    )


def invoice_table() -> rx.Component:
    """
    Build the invoice table and pagination footer.

    Returns:
        The table card component.
    """
    return rx.box(
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    *[_header_cell(key, label) for key, label in SORT_COLUMNS.items()],
                    rx.table.column_header_cell("Actions", text_align="right"),
                )
            ),
            rx.table.body(
                rx.cond(
                    InvoiceTableState.invoices.length() > 0,
                    rx.foreach(InvoiceTableState.invoices, _invoice_row),
                    _empty_row(),
                )
            ),
            width="100%",
        ),
        _pagination(),
        class_name="card table-card",
    )
