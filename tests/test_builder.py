"""Tests for the filter builder state machine."""

from datetime import datetime

import pytest

from invoice_table.lib.ids import SequentialIdGenerator
from invoice_table.models.filters import Filter
from invoice_table.query.builder import FilterBuilder, amount_display
from invoice_table.query.store import FilterStore


@pytest.fixture
def builder(fixed_now):
    return FilterBuilder(id_generator=SequentialIdGenerator(), clock=lambda: fixed_now)


@pytest.fixture
def store():
    return FilterStore()


class TestDefaults:
    """Tests for the builder's initial state."""

    def test_initial_state(self, builder):
        """Test the builder starts on the date preset tab."""
        assert builder.is_open is False
        assert builder.filter_type == "date"
        assert builder.date_tab == "preset"
        assert builder.date_preset == "last30days"
        assert builder.date_operator == "after"
        assert builder.amount_operator == ">"
        assert builder.date_value == ""
        assert builder.amount_value == ""

    def test_preset_tab_can_commit(self, builder):
        """Test a preset filter needs no typed value."""
        assert builder.can_commit is True

    def test_open_and_close(self, builder):
        """Test open/close toggle the dialog flag."""
        builder.open()
        assert builder.is_open is True
        builder.close()
        assert builder.is_open is False


class TestDatePreset:
    """Tests for committing preset date filters."""

    def test_commit_yesterday(self, builder, store):
        """Test a preset resolves to an ISO start date and its label."""
        builder.open()
        builder.set_date_preset("yesterday")

        applied = builder.commit(store)

        assert applied == Filter(
            id="filter-1",
            type="date",
            operator="after",
            value="2024-03-14",
            display="Yesterday",
            preset="yesterday",
        )
        assert store.filters == (applied,)
        assert builder.is_open is False

    def test_default_preset(self, builder, store):
        """Test the default preset is the last 30 days."""
        applied = builder.commit(store)

        assert applied.value == "2024-02-14"
        assert applied.display == "Last 30 days"
        assert applied.preset == "last30days"

    def test_display_frozen_at_commit(self, store):
        """Test a later clock does not change a committed filter."""
        now = {"value": datetime(2024, 3, 15, 10)}
        builder = FilterBuilder(
            id_generator=SequentialIdGenerator(), clock=lambda: now["value"]
        )
        builder.set_date_preset("today")
        first = builder.commit(store)

        now["value"] = datetime(2024, 4, 1, 9)
        second = builder.commit(store)

        assert first.value == "2024-03-15"
        assert second.value == "2024-04-01"
        assert store.filters[0] == first


class TestDateCustom:
    """Tests for custom after/before date filters."""

    def test_empty_value_blocks_commit(self, builder, store):
        """Test a custom date cannot be committed without a value."""
        builder.set_date_tab("custom")

        assert builder.can_commit is False
        assert builder.commit(store) is None
        assert len(store) == 0

    def test_commit_before(self, builder, store):
        """Test a custom before filter."""
        builder.set_date_tab("custom")
        builder.set_date_operator("before")
        builder.set_date_value("2024-02-01")

        applied = builder.commit(store)

        assert applied.type == "date"
        assert applied.operator == "before"
        assert applied.value == "2024-02-01"
        assert applied.display == "Before 2024-02-01"
        assert applied.preset is None

    def test_commit_after(self, builder, store):
        """Test a custom after filter."""
        builder.set_date_tab("custom")
        builder.set_date_value("2024-01-15")

        assert builder.commit(store).display == "After 2024-01-15"

    def test_unknown_operator_ignored(self, builder):
        """Test an unknown date operator leaves the selection unchanged."""
        builder.set_date_operator("during")

        assert builder.date_operator == "after"

    def test_unknown_tab_ignored(self, builder):
        """Test an unknown tab leaves the selection unchanged."""
        builder.set_date_tab("relative")

        assert builder.date_tab == "preset"


class TestAmount:
    """Tests for amount filters."""

    def test_empty_value_blocks_commit(self, builder, store):
        """Test an amount cannot be committed without a value."""
        builder.set_type("amount")

        assert builder.can_commit is False
        assert builder.commit(store) is None
        assert store.filters == ()

    def test_commit_amount(self, builder, store):
        """Test the amount filter label includes the currency."""
        builder.set_type("amount")
        builder.set_amount_value("75")

        applied = builder.commit(store)

        assert applied.type == "amount"
        assert applied.operator == ">"
        assert applied.value == "75"
        assert applied.display == "Amount > 75 XLM"

    def test_operator_choice(self, builder, store):
        """Test the chosen comparison is stored."""
        builder.set_type("amount")
        builder.set_amount_operator("<=")
        builder.set_amount_value("100")

        assert builder.commit(store).display == "Amount <= 100 XLM"

    def test_unknown_operator_ignored(self, builder):
        """Test an unknown amount operator leaves the selection unchanged."""
        builder.set_type("amount")
        builder.set_amount_operator("!=")

        assert builder.amount_operator == ">"

    def test_label_for_empty_value(self):
        """Test the label shows 0 when no amount is typed."""
        assert amount_display(">=", "") == "Amount >= 0"
        assert amount_display("<", "250") == "Amount < 250 XLM"


class TestTransitions:
    """Tests for type switching and what survives a commit."""

    def test_set_type_resets_sub_mode(self, builder):
        """Test switching type restores the default tab and operators."""
        builder.set_date_tab("custom")
        builder.set_date_operator("before")
        builder.set_type("amount")
        builder.set_amount_operator("=")

        builder.set_type("date")
        assert builder.date_tab == "preset"
        assert builder.date_operator == "after"

        builder.set_type("amount")
        assert builder.amount_operator == ">"

    def test_unknown_type_ignored(self, builder):
        """Test an unknown filter type leaves the builder unchanged."""
        builder.set_type("status")

        assert builder.filter_type == "date"

    def test_commit_resets_values_keeps_selections(self, builder, store):
        """Test typed values are cleared while selections persist."""
        builder.set_date_tab("custom")
        builder.set_date_operator("before")
        builder.set_date_value("2024-02-01")
        builder.amount_value = "12"
        builder.open()

        builder.commit(store)

        assert builder.is_open is False
        assert builder.date_value == ""
        assert builder.amount_value == ""
        assert builder.filter_type == "date"
        assert builder.date_tab == "custom"
        assert builder.date_operator == "before"

    def test_ids_are_unique(self, builder, store):
        """Test every commit gets a fresh id."""
        ids = [builder.commit(store).id for _ in range(5)]

        assert ids == ["filter-1", "filter-2", "filter-3", "filter-4", "filter-5"]

    def test_default_id_generator(self, store):
        """Test the default generator produces distinct ids."""
        builder = FilterBuilder()
        ids = {builder.commit(store).id for _ in range(50)}

        assert len(ids) == 50
