"""Tests for the Reflex model converters."""

from invoice_table.models.filters import Filter
from invoice_table.models.reflex_models import filter_to_model, invoice_to_model


class TestConverters:
    """Tests for invoice_to_model and filter_to_model."""

    def test_invoice_to_model(self, scenario_invoices):
        """Test every invoice field is carried over."""
        model = invoice_to_model(scenario_invoices[0])

        assert model.id == "INV-1"
        assert model.client == "Acme"
        assert model.issue_date == "2024-01-01"
        assert model.amount == "$100.00 XLM"
        assert model.status == "Paid"

    def test_filter_to_model(self):
        """Test filter pills keep their id and frozen label."""
        applied = Filter(
            id="filter-1",
            type="date",
            operator="after",
            value="2024-03-14",
            display="Yesterday",
            preset="yesterday",
        )

        model = filter_to_model(applied)

        assert model.id == "filter-1"
        assert model.display == "Yesterday"
        assert model.preset == "yesterday"
