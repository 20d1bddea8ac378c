"""
Reflex UI components for the invoice table.

This package provides:
- toolbar: Status tabs and client search
- filter_bar: Applied filter pills, "Add Filter" and "Clear all"
- filter_dialog: The filter builder dialog
- invoice_table: Sortable table with pagination footer
"""

from invoice_table.components.filter_bar import filter_bar
from invoice_table.components.filter_dialog import filter_dialog
from invoice_table.components.invoice_table import invoice_table
from invoice_table.components.toolbar import toolbar

__all__ = ["filter_bar", "filter_dialog", "invoice_table", "toolbar"]
