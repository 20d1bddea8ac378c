"""Tests for the module logger factory."""

import logging

from invoice_table.lib import logs


class TestLogger:
    """Tests for logs.logger."""

    def test_file_path_is_namespaced(self):
        """Test a module path becomes an invoice_table logger name."""
        log = logs.logger("/srv/app/src/invoice_table/query/session.py")

        assert log.name == "invoice_table.session"

    def test_plain_name_is_kept(self):
        """Test a plain logger name is used as given."""
        assert logs.logger("invoice_table.custom").name == "invoice_table.custom"

    def test_single_handler(self):
        """Test repeated lookups do not stack handlers."""
        first = logs.logger("invoice_table.repeated")
        second = logs.logger("invoice_table.repeated")

        assert first is second
        assert len(second.handlers) == 1
        assert isinstance(second.handlers[0], logging.StreamHandler)
