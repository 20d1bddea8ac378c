"""
Query engine for the invoice table.

evaluate() turns the raw invoice list plus the operator's selections into
the ordered list shown in the table. The pipeline always runs in the same
order:

1. Sort the full collection (stable, on the raw field text)
2. Keep invoices on the selected status tab
3. Keep invoices whose client contains the search text
4. Keep invoices satisfying every applied filter

The input sequence is never modified; each call builds a new list.
"""

import operator
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from invoice_table.lib import logs
from invoice_table.models.common import SORT_ASC, SORT_DESC
from invoice_table.models.filters import AMOUNT_FILTER, DATE_FILTER, Filter
from invoice_table.models.invoice import ALL_STATUSES, SORT_KEYS, Invoice
from invoice_table.utils import matches_query, parse_amount, parse_date

LOG = logs.logger(__file__)

_AMOUNT_COMPARISONS: dict[str, Callable[[Decimal, Decimal], bool]] = {
    ">": operator.gt,
    ">=": operator.ge,
    "=": operator.eq,
    "<=": operator.le,
    "<": operator.lt,
}


def sort_invoices(
    invoices: Iterable[Invoice], sort_key: str | None, sort_order: str = SORT_ASC
) -> list[Invoice]:
    """
    Return invoices ordered by the raw text of sort_key.

    Dates and amounts are compared as strings, exactly as displayed. Equal
    keys keep their input order in both directions.
    """
    if not sort_key:
        return list(invoices)
    return sorted(
        invoices,
        key=lambda invoice: getattr(invoice, sort_key),
        reverse=sort_order == SORT_DESC,
    )


def toggle_sort(
    current_key: str | None, current_order: str, key: str
) -> tuple[str, str]:
    """
    Return the sort key and order after clicking the column header key.

    Clicking the current column flips the order; another column starts
    ascending.
    """
    if key == current_key:
        return key, SORT_DESC if current_order == SORT_ASC else SORT_ASC
    return key, SORT_ASC


def matches_status(invoice: Invoice, status_tab: str) -> bool:
    return status_tab == ALL_STATUSES or invoice.status == status_tab


def matches_filter(invoice: Invoice, applied: Filter) -> bool:
    """
    Check a single applied filter against an invoice.

    Values that cannot be parsed never match. Unknown filter types and
    unknown amount operators let every invoice through.
    """
    if applied.type == DATE_FILTER:
        return _matches_date(invoice, applied)
    if applied.type == AMOUNT_FILTER:
        return _matches_amount(invoice, applied)
    return True


def _matches_date(invoice: Invoice, applied: Filter) -> bool:
    issue_date = parse_date(invoice.issue_date)
    filter_date = parse_date(applied.value)
    if issue_date is None or filter_date is None:
        LOG.debug(
            "date filter - unparseable issue_date:%r value:%r",
            invoice.issue_date,
            applied.value,
        )
        return False
    if applied.operator == "after":
        return issue_date >= filter_date
    return issue_date <= filter_date


def _matches_amount(invoice: Invoice, applied: Filter) -> bool:
    compare = _AMOUNT_COMPARISONS.get(applied.operator)
    if compare is None:
        return True
    invoice_amount = parse_amount(invoice.amount)
    filter_amount = parse_amount(applied.value)
    if invoice_amount is None or filter_amount is None:
        LOG.debug(
            "amount filter - unparseable amount:%r value:%r",
            invoice.amount,
            applied.value,
        )
        return False
    return compare(invoice_amount, filter_amount)


def evaluate(
    invoices: Sequence[Invoice],
    status_tab: str = ALL_STATUSES,
    search_text: str = "",
    filters: Iterable[Filter] = (),
    sort_key: str | None = None,
    sort_order: str = SORT_ASC,
) -> list[Invoice]:
    """
    Produce the filtered and sorted invoice list.

    Args:
        invoices: The full invoice collection.
        status_tab: "All" or an invoice status.
        search_text: Client search text.
        filters: Applied filters, all of which must match.
        sort_key: One of SORT_KEYS, or None to keep input order.
        sort_order: "asc" or "desc".

    Returns:
        A new list containing the matching invoices in display order.
    """
    if sort_key is not None and sort_key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_key}")
    applied = tuple(filters)
    return [
        invoice
        for invoice in sort_invoices(invoices, sort_key, sort_order)
        if matches_status(invoice, status_tab)
        and matches_query(invoice, search_text)
        and all(matches_filter(invoice, f) for f in applied)
    ]
