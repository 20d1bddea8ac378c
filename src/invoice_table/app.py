"""
Reflex application entry point for the invoice table.

This module initializes the Reflex app and defines the main page layout.
"""

import os

import reflex as rx

from invoice_table.components import filter_bar, filter_dialog, invoice_table, toolbar
from invoice_table.lib import logs
from invoice_table.state import APP_SUBTITLE, APP_TITLE, InvoiceTableState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("INVOICE_TABLE_PORT", "3000"))


def page_header() -> rx.Component:
    """Build the hero text area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header, toolbar, filters and table.
    """
    return rx.box(
        rx.box(
            page_header(),
            toolbar(),
            filter_bar(),
            filter_dialog(),
            invoice_table(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="dark",
        has_background=True,
        radius="large",
        accent_color="purple",
    ),
    stylesheets=["/styles.css"],
)

app.add_page(
    index,
    title=APP_TITLE,
    on_load=InvoiceTableState.on_load,
)


def main() -> None:
    """Entrypoint used via `invoice-table`; production should use `reflex run`."""
    import subprocess
    import sys

    LOG.info("Starting invoice table on port %s", APP_PORT)
    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)]
    )


if __name__ == "__main__":
    main()
