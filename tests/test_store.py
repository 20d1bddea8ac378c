"""Tests for the applied filter store."""

import pytest

from invoice_table.query.store import FilterStore


class TestFilterStore:
    """Tests for add, remove and clear."""

    def test_add_keeps_insertion_order(self, amount_filter, date_filter):
        """Test filters are kept in the order they were added."""
        store = FilterStore()
        first = amount_filter(">", "10", "a")
        second = date_filter("after", "2024-01-01", "b")

        store.add(first)
        store.add(second)

        assert store.filters == (first, second)
        assert list(store) == [first, second]
        assert len(store) == 2

    def test_duplicate_id_rejected(self, amount_filter):
        """Test two filters can never share an id."""
        store = FilterStore()
        store.add(amount_filter(">", "10", "a"))

        with pytest.raises(ValueError):
            store.add(amount_filter("<", "5", "a"))

    def test_remove(self, amount_filter):
        """Test removing by id."""
        store = FilterStore()
        store.add(amount_filter(">", "10", "a"))
        store.add(amount_filter("<", "50", "b"))

        assert store.remove("a") is True
        assert [f.id for f in store] == ["b"]
        assert "a" not in store
        assert "b" in store

    def test_remove_unknown_is_noop(self, amount_filter):
        """Test removing an unknown id changes nothing."""
        store = FilterStore()
        applied = amount_filter(">", "10", "a")
        store.add(applied)

        assert store.remove("missing") is False
        assert store.filters == (applied,)

    def test_clear(self, amount_filter):
        """Test clear empties the store."""
        store = FilterStore()
        store.add(amount_filter(">", "10", "a"))

        assert store.clear() is True
        assert store.filters == ()
        assert store.clear() is False

    def test_snapshot_is_detached(self, amount_filter):
        """Test the filters snapshot does not follow later changes."""
        store = FilterStore()
        store.add(amount_filter(">", "10", "a"))
        snapshot = store.filters

        store.clear()

        assert len(snapshot) == 1
