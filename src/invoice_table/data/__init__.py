"""
Static demo data for the invoice table.

Modules:
- demo_invoices: Pre-populated Invoice objects used by DemoInvoiceService
"""
