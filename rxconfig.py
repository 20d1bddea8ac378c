"""Reflex configuration for the invoice table application."""

import reflex as rx

config = rx.Config(
    app_name="invoice_table",
    # Use the src directory structure
    app_module_import="invoice_table.app",
)
