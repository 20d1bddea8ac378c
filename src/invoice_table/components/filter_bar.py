"""
Applied filter pills with the "Add Filter" and "Clear all" actions.
"""

import reflex as rx

from invoice_table.models.reflex_models import FilterModel
from invoice_table.state import InvoiceTableState


def _filter_pill(applied: FilterModel) -> rx.Component:
    """Build a pill for one applied filter with its remove button."""
    return rx.box(
        rx.text(applied.display),
        rx.icon_button(
            rx.icon("x", size=12),
            on_click=InvoiceTableState.remove_filter(applied.id),
            variant="ghost",
            size="1",
        ),
        class_name="filter-pill",
    )


def filter_bar() -> rx.Component:
    """
    Build the row of applied filters.

    Returns:
        The filter bar component.
    """
    return rx.hstack(
        rx.foreach(InvoiceTableState.filters, _filter_pill),
        rx.button(
            rx.icon("plus", size=16),
            "Add Filter",
            on_click=InvoiceTableState.open_filter_builder,
            size="2",
            radius="full",
        ),
        rx.cond(
            InvoiceTableState.has_filters,
            rx.button(
                "Clear all",
                on_click=InvoiceTableState.clear_all_filters,
                variant="ghost",
                size="2",
            ),
        ),
        class_name="filter-bar",
        wrap="wrap",
    )
