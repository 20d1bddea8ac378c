"""Tests for fixed-size pagination."""

import pytest

from invoice_table.data.demo_invoices import DEMO_INVOICES
from invoice_table.query.pagination import PAGE_SIZE, paginate


class TestPaginate:
    """Tests for page slicing and metadata."""

    def test_page_size(self):
        """Test the fixed page size."""
        assert PAGE_SIZE == 7

    def test_first_page(self):
        """Test the first page of 16 invoices."""
        page = paginate(DEMO_INVOICES, 1)

        assert page.items == DEMO_INVOICES[:7]
        assert page.start_entry == 1
        assert page.end_entry == 7
        assert page.total == 16
        assert page.total_pages == 3
        assert page.has_previous is False
        assert page.has_next is True

    def test_last_partial_page(self):
        """Test the last page holds the remainder."""
        page = paginate(DEMO_INVOICES, 3)

        assert [invoice.id for invoice in page.items] == ["INV-1015", "INV-1016"]
        assert page.start_entry == 15
        assert page.end_entry == 16
        assert page.has_previous is True
        assert page.has_next is False

    def test_small_list_fits_one_page(self, scenario_invoices):
        """Test two invoices are shown together on page 1."""
        page = paginate(scenario_invoices, 1)

        assert list(page.items) == scenario_invoices
        assert page.end_entry == 2
        assert page.total_pages == 1
        assert page.has_next is False

    def test_empty_list(self):
        """Test an empty list has no pages and no navigation."""
        page = paginate([], 1)

        assert page.items == []
        assert page.total_pages == 0
        assert page.has_previous is False
        assert page.has_next is False

    @pytest.mark.parametrize("size,pages", [(1, 1), (7, 1), (8, 2), (14, 2), (15, 3)])
    def test_total_pages(self, size, pages):
        """Test total pages rounds up."""
        assert paginate(DEMO_INVOICES[:size], 1).total_pages == pages

    @pytest.mark.parametrize("size", [1, 6, 7, 8, 13, 16])
    def test_pages_cover_list_once(self, size):
        """Test walking every page yields each invoice exactly once, in order."""
        invoices = DEMO_INVOICES[:size]
        total_pages = paginate(invoices, 1).total_pages

        walked = [
            invoice
            for number in range(1, total_pages + 1)
            for invoice in paginate(invoices, number).items
        ]

        assert walked == invoices
