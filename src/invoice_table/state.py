"""
Reflex state management for the invoice table.

InvoiceTableState is a thin adapter: each event handler forwards the user
action to the client's InvoiceTableSession and then copies the derived
view into the frontend vars the components render.
"""

import os

import reflex as rx

from invoice_table.lib import logs
from invoice_table.models.common import SORT_ASC
from invoice_table.models.filters import DATE_FILTER
from invoice_table.models.invoice import ALL_STATUSES
from invoice_table.models.reflex_models import (
    FilterModel,
    InvoiceModel,
    filter_to_model,
    invoice_to_model,
)
from invoice_table.query.builder import (
    DEFAULT_AMOUNT_OPERATOR,
    DEFAULT_DATE_OPERATOR,
    PRESET_TAB,
)
from invoice_table.query.presets import DEFAULT_PRESET
from invoice_table.query.session import InvoiceTableSession
from invoice_table.services import get_invoice_service

LOG = logs.logger(__file__)

# Configuration from environment
APP_TITLE = os.getenv("INVOICE_TABLE_TITLE", "Invoices")
APP_SUBTITLE = "Browse, filter and sort your invoices."


class InvoiceTableState(rx.State):
    """
    Main application state for the invoice table.

    Handles status tabs, search, sorting, applied filters, the filter
    builder dialog and pagination.
    """

    # Current page using Reflex-compatible models
    invoices: list[InvoiceModel] = []
    filters: list[FilterModel] = []
    is_loading: bool = True

    # Query selections
    status_tab: str = ALL_STATUSES
    search_text: str = ""
    sort_key: str = ""
    sort_order: str = SORT_ASC

    # Pagination metadata
    current_page: int = 1
    total_invoices: int = 0
    total_pages: int = 0
    start_entry: int = 1
    end_entry: int = 0
    has_previous: bool = False
    has_next: bool = False

    # Filter builder
    is_filter_dialog_open: bool = False
    filter_type: str = DATE_FILTER
    date_tab: str = PRESET_TAB
    date_preset: str = DEFAULT_PRESET
    date_operator: str = DEFAULT_DATE_OPERATOR
    date_value: str = ""
    amount_operator: str = DEFAULT_AMOUNT_OPERATOR
    amount_value: str = ""
    can_commit_filter: bool = True

    # Backend-only session, one per client
    _session: InvoiceTableSession | None = None

    @rx.var
    def entries_summary(self) -> str:
        """Generate the "Showing x - y of z invoices" footer text."""
        return (
            f"Showing {self.start_entry} - {self.end_entry} "
            f"of {self.total_invoices} invoices"
        )

    @rx.var
    def has_filters(self) -> bool:
        """Check if the "Clear all" button should be shown."""
        return len(self.filters) > 0

    @rx.event
    def on_load(self):
        """Event handler for initial page load; fetches the invoice list."""
        self.is_loading = True
        try:
            invoices = get_invoice_service().list_invoices()
            self._get_session().load(invoices)
        except Exception as e:
            LOG.error("Loading invoices failed: %s", e, exc_info=True)
            self._get_session().load([])
        finally:
            self.is_loading = False
        self._sync()

    @rx.event
    def change_status_tab(self, status_tab: str):
        self._get_session().set_status_tab(status_tab)
        self._sync()

    @rx.event
    def change_search_text(self, search_text: str):
        self._get_session().set_search_text(search_text)
        self._sync()

    @rx.event
    def toggle_sort(self, key: str):
        self._get_session().toggle_sort(key)
        self._sync()

    @rx.event
    def previous_page(self):
        self._get_session().go_to_page(-1)
        self._sync()

    @rx.event
    def next_page(self):
        self._get_session().go_to_page(1)
        self._sync()

    @rx.event
    def open_filter_builder(self):
        self._get_session().open_filter_builder()
        self._sync()

    @rx.event
    def set_filter_dialog_open(self, is_open: bool):
        """Handle the dialog's own open/close requests (escape, overlay click)."""
        session = self._get_session()
        if is_open:
            session.open_filter_builder()
        else:
            session.close_filter_builder()
        self._sync()

    @rx.event
    def close_filter_builder(self):
        self._get_session().close_filter_builder()
        self._sync()

    @rx.event
    def change_filter_type(self, filter_type: str):
        self._get_session().set_filter_type(filter_type)
        self._sync()

    @rx.event
    def change_date_tab(self, tab: str):
        self._get_session().set_date_tab(tab)
        self._sync()

    @rx.event
    def change_date_preset(self, preset: str):
        self._get_session().set_date_preset(preset)
        self._sync()

    @rx.event
    def change_date_operator(self, operator: str):
        self._get_session().set_date_operator(operator)
        self._sync()

    @rx.event
    def change_date_value(self, value: str):
        self._get_session().set_date_value(value)
        self._sync()

    @rx.event
    def change_amount_operator(self, operator: str):
        self._get_session().set_amount_operator(operator)
        self._sync()

    @rx.event
    def change_amount_value(self, value: str):
        self._get_session().set_amount_value(value)
        self._sync()

    @rx.event
    def commit_filter(self):
        self._get_session().commit_filter()
        self._sync()

    @rx.event
    def remove_filter(self, filter_id: str):
        self._get_session().remove_filter(filter_id)
        self._sync()

    @rx.event
    def clear_all_filters(self):
        self._get_session().clear_all_filters()
        self._sync()

    def _get_session(self) -> InvoiceTableSession:
        """Get this client's session (lazily created)."""
        if self._session is None:
            self._session = InvoiceTableSession()
        return self._session

    def _sync(self) -> None:
        """Copy the session's derived view into the frontend vars."""
        session = self._get_session()
        page = session.page
        self.invoices = [invoice_to_model(invoice) for invoice in page.items]
        self.filters = [filter_to_model(applied) for applied in session.filters]
        self.status_tab = session.status_tab
        self.search_text = session.search_text
        self.sort_key = session.sort_key or ""
        self.sort_order = session.sort_order
        self.current_page = page.page
        self.total_invoices = session.total_invoices
        self.total_pages = page.total_pages
        self.start_entry = page.start_entry
        self.end_entry = page.end_entry
        self.has_previous = page.has_previous
        self.has_next = page.has_next

        builder = session.builder
        self.is_filter_dialog_open = builder.is_open
        self.filter_type = builder.filter_type
        self.date_tab = builder.date_tab
        self.date_preset = builder.date_preset
        self.date_operator = builder.date_operator
        self.date_value = builder.date_value
        self.amount_operator = builder.amount_operator
        self.amount_value = builder.amount_value
        self.can_commit_filter = builder.can_commit
