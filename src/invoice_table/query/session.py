"""
Interactive invoice table session.

InvoiceTableSession owns the query state of one operator and exposes the
commands the front end calls. Every command mutates state, applies the
page-reset rule when the filter set, search text or status tab changed,
and then recomputes the derived view. Readers therefore never see a new
filter set together with a stale page number.
"""

from datetime import datetime
from typing import Callable, Sequence

from invoice_table.lib import logs
from invoice_table.lib.ids import IdGenerator
from invoice_table.models.common import QueryState
from invoice_table.models.filters import Filter
from invoice_table.models.invoice import SORT_KEYS, STATUS_TABS, Invoice, InvoicePage
from invoice_table.query import engine
from invoice_table.query.builder import FilterBuilder
from invoice_table.query.pagination import PAGE_SIZE, paginate
from invoice_table.query.store import FilterStore

LOG = logs.logger(__file__)


class InvoiceTableSession:
    """
    Query state, applied filters and filter builder for one operator.

    Attributes:
        invoices: The read-only invoice collection being browsed.
        state: Current operator selections.
        store: Applied filters.
        builder: The "Add Filter" builder.
        page: The current page of the derived view.
        results: The full filtered and sorted list behind page.
    """

    def __init__(
        self,
        invoices: Sequence[Invoice] = (),
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = datetime.now,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.invoices: tuple[Invoice, ...] = tuple(invoices)
        self.page_size = page_size
        self.state = QueryState()
        self.store = FilterStore()
        self.builder = FilterBuilder(id_generator=id_generator, clock=clock)
        self.results: list[Invoice] = []
        self.page = paginate([], 1, page_size)
        self.recompute()

    # Derived view

    @property
    def filters(self) -> tuple[Filter, ...]:
        return self.store.filters

    @property
    def status_tab(self) -> str:
        return self.state.status_tab

    @property
    def search_text(self) -> str:
        return self.state.search_text

    @property
    def sort_key(self) -> str | None:
        return self.state.sort_key

    @property
    def sort_order(self) -> str:
        return self.state.sort_order

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def total_invoices(self) -> int:
        """Number of invoices matching the current selections."""
        return len(self.results)

    def recompute(self) -> InvoicePage:
        """Re-run the query pipeline and slice out the current page."""
        state = self.state
        self.results = engine.evaluate(
            self.invoices,
            status_tab=state.status_tab,
            search_text=state.search_text,
            filters=self.store.filters,
            sort_key=state.sort_key,
            sort_order=state.sort_order,
        )
        self.page = paginate(self.results, state.current_page, self.page_size)
        return self.page

    def _changed_selection(self) -> InvoicePage:
        self.state.reset_page()
        return self.recompute()

    # Commands

    def load(self, invoices: Sequence[Invoice]) -> InvoicePage:
        """Replace the invoice collection being browsed."""
        self.invoices = tuple(invoices)
        LOG.info("load - invoices:%s", len(self.invoices))
        return self._changed_selection()

    def set_status_tab(self, status_tab: str) -> InvoicePage:
        if status_tab not in STATUS_TABS:
            LOG.warning("set_status_tab - ignoring unknown tab:%s", status_tab)
            return self.page
        if status_tab == self.state.status_tab:
            return self.page
        self.state.status_tab = status_tab
        return self._changed_selection()

    def set_search_text(self, search_text: str | None) -> InvoicePage:
        search_text = search_text or ""
        if search_text == self.state.search_text:
            return self.page
        self.state.search_text = search_text
        return self._changed_selection()

    def toggle_sort(self, key: str) -> InvoicePage:
        """Sort by key, flipping the order when key is already the sort column."""
        if key not in SORT_KEYS:
            LOG.warning("toggle_sort - ignoring unknown key:%s", key)
            return self.page
        self.state.sort_key, self.state.sort_order = engine.toggle_sort(
            self.state.sort_key, self.state.sort_order, key
        )
        LOG.debug("toggle_sort - key:%s order:%s", key, self.state.sort_order)
        return self.recompute()

    def open_filter_builder(self) -> None:
        self.builder.open()

    def close_filter_builder(self) -> None:
        self.builder.close()

    def set_filter_type(self, filter_type: str) -> None:
        self.builder.set_type(filter_type)

    def set_date_tab(self, tab: str) -> None:
        self.builder.set_date_tab(tab)

    def set_date_preset(self, preset: str) -> None:
        self.builder.set_date_preset(preset)

    def set_date_operator(self, operator: str) -> None:
        self.builder.set_date_operator(operator)

    def set_date_value(self, value: str) -> None:
        self.builder.set_date_value(value)

    def set_amount_operator(self, operator: str) -> None:
        self.builder.set_amount_operator(operator)

    def set_amount_value(self, value: str) -> None:
        self.builder.set_amount_value(value)

    def commit_filter(self) -> Filter | None:
        """
        Commit the builder's filter.

        Returns:
            The applied Filter, or None when the builder blocked the commit.
        """
        applied = self.builder.commit(self.store)
        if applied is not None:
            self._changed_selection()
        return applied

    def remove_filter(self, filter_id: str) -> InvoicePage:
        if self.store.remove(filter_id):
            return self._changed_selection()
        return self.page

    def clear_all_filters(self) -> InvoicePage:
        if self.store.clear():
            return self._changed_selection()
        return self.page

    def go_to_page(self, delta: int) -> InvoicePage:
        """Move delta pages; a move outside 1..total_pages is ignored."""
        target = self.state.current_page + delta
        if target < 1 or target > self.page.total_pages:
            LOG.debug(
                "go_to_page - ignoring target:%s total_pages:%s",
                target,
                self.page.total_pages,
            )
            return self.page
        self.state.current_page = target
        return self.recompute()
