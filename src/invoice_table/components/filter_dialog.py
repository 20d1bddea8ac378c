"""
"Add Filter" dialog.

Renders the filter builder: a type selector, then either the date tabs
(preset ranges or a custom after/before date) or the amount comparison.
The "Add Filter" button stays disabled until the builder allows a commit.
"""

import reflex as rx

from invoice_table.models.filters import AMOUNT_OPERATORS, DATE_OPERATORS
from invoice_table.query.presets import DATE_PRESETS
from invoice_table.state import InvoiceTableState


def _select(options: dict[str, str], value, on_change) -> rx.Component:
    """Build a select whose items show labels but submit option keys."""
    return rx.select.root(
        rx.select.trigger(),
        rx.select.content(
            *[rx.select.item(label, value=key) for key, label in options.items()]
        ),
        value=value,
        on_change=on_change,
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.vstack(rx.text(label, weight="medium", size="2"), control, spacing="1")


def _preset_tab() -> rx.Component:
    return rx.radio_group.root(
        rx.vstack(
            *[
                rx.hstack(
                    rx.radio_group.item(value=key),
                    rx.text(label),
                    align="center",
                )
                for key, label in DATE_PRESETS.items()
            ],
            spacing="2",
        ),
        value=InvoiceTableState.date_preset,
        on_change=InvoiceTableState.change_date_preset,
    )


def _custom_tab() -> rx.Component:
    return rx.hstack(
        _field(
            "Condition",
            _select(
                DATE_OPERATORS,
                InvoiceTableState.date_operator,
                InvoiceTableState.change_date_operator,
            ),
        ),
        _field(
            "Date",
            rx.input(
                type="date",
                value=InvoiceTableState.date_value,
                on_change=InvoiceTableState.change_date_value,
            ),
        ),
        spacing="4",
    )


def _date_section() -> rx.Component:
    return rx.tabs.root(
        rx.tabs.list(
            rx.tabs.trigger("Preset Ranges", value="preset"),
            rx.tabs.trigger("Custom Range", value="custom"),
        ),
        rx.tabs.content(_preset_tab(), value="preset", padding_top="1em"),
        rx.tabs.content(_custom_tab(), value="custom", padding_top="1em"),
        value=InvoiceTableState.date_tab,
        on_change=InvoiceTableState.change_date_tab,
    )


def _amount_section() -> rx.Component:
    return rx.hstack(
        _field(
            "Condition",
            _select(
                AMOUNT_OPERATORS,
                InvoiceTableState.amount_operator,
                InvoiceTableState.change_amount_operator,
            ),
        ),
        _field(
            "Amount",
            rx.input(
                type="number",
                min="0",
                value=InvoiceTableState.amount_value,
                on_change=InvoiceTableState.change_amount_value,
            ),
        ),
        spacing="4",
    )


def filter_dialog() -> rx.Component:
    """
    Build the "Add Filter" dialog bound to the filter builder.

    Returns:
        The dialog component.
    """
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("Add Filter"),
            rx.vstack(
                _field(
                    "Filter Type",
                    _select(
                        {"date": "Date", "amount": "Amount"},
                        InvoiceTableState.filter_type,
                        InvoiceTableState.change_filter_type,
                    ),
                ),
                rx.cond(
                    InvoiceTableState.filter_type == "date",
                    _date_section(),
                    _amount_section(),
                ),
                spacing="4",
                padding_y="1em",
            ),
            rx.hstack(
                rx.button(
                    "Cancel",
                    variant="outline",
                    on_click=InvoiceTableState.close_filter_builder,
                ),
                rx.button(
                    "Add Filter",
                    on_click=InvoiceTableState.commit_filter,
                    disabled=~InvoiceTableState.can_commit_filter,
                ),
                justify="end",
                spacing="3",
            ),
        ),
        open=InvoiceTableState.is_filter_dialog_open,
        on_open_change=InvoiceTableState.set_filter_dialog_open,
    )
