"""
Support modules shared across the invoice table package.

Modules:
    logs: Logger factory
    ids: Filter id generators
"""

from invoice_table.lib import ids, logs

__all__ = ["ids", "logs"]
