"""
Invoice Table: a Reflex application for browsing seller invoices.

Operators narrow the invoice list with status tabs, client search and
composable date/amount filters, sort by any column and page through the
results seven rows at a time.

Subpackages:
- query: Filtering, sorting, pagination and the filter builder
- models: Invoice, filter and query state models
- services: Data access layer (demo and JSON implementations)
- components: Reflex UI components
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
