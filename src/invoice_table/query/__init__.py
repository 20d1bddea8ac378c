"""
Filtering, sorting and pagination core of the invoice table.

Modules:
- presets: Relative date preset resolution
- builder: The "Add Filter" state machine
- store: Applied filter collection
- engine: Sort and filter pipeline, sort toggling
- pagination: Fixed-size page slicing
- session: Per-operator command surface tying the pieces together
"""

from invoice_table.query.builder import FilterBuilder
from invoice_table.query.engine import evaluate, toggle_sort
from invoice_table.query.pagination import PAGE_SIZE, paginate
from invoice_table.query.presets import DATE_PRESETS, PresetRange, resolve_preset
from invoice_table.query.session import InvoiceTableSession
from invoice_table.query.store import FilterStore

__all__ = [
    "DATE_PRESETS",
    "FilterBuilder",
    "FilterStore",
    "InvoiceTableSession",
    "PAGE_SIZE",
    "PresetRange",
    "evaluate",
    "paginate",
    "resolve_preset",
    "toggle_sort",
]
