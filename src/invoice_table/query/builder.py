"""
Filter builder state machine behind the "Add Filter" dialog.

The builder starts out selecting a filter type and moves to configuring
either a date filter (preset or custom tab) or an amount filter. Setters
only record choices; nothing reaches the filter store until commit().

States:
    SelectingType -> ConfiguringDate(preset | custom)
                  -> ConfiguringAmount
"""

from datetime import datetime
from typing import Callable

from invoice_table.lib import logs
from invoice_table.lib.ids import IdGenerator, RandomIdGenerator
from invoice_table.models.filters import (
    AMOUNT_FILTER,
    AMOUNT_OPERATORS,
    DATE_FILTER,
    DATE_OPERATORS,
    FILTER_TYPES,
    Filter,
)
from invoice_table.query.presets import DEFAULT_PRESET, resolve_preset
from invoice_table.query.store import FilterStore
from invoice_table.utils import format_iso_date

LOG = logs.logger(__file__)

PRESET_TAB = "preset"
CUSTOM_TAB = "custom"
DATE_TABS: tuple[str, ...] = (PRESET_TAB, CUSTOM_TAB)

DEFAULT_DATE_OPERATOR = "after"
DEFAULT_AMOUNT_OPERATOR = ">"


def amount_display(operator: str, value: str) -> str:
    """Label for an amount filter; an empty value reads as 0."""
    shown = f"{value} XLM" if value else "0"
    return f"Amount {operator} {shown}"


class FilterBuilder:
    """
    Accumulates the operator's filter choices and commits them as a Filter.

    Selections (type, tab, preset, operators) survive a commit so the next
    filter starts where the last one left off; the typed date and amount
    values are cleared.

    Attributes:
        is_open: Whether the builder dialog is showing.
        filter_type: "date" or "amount".
        date_tab: "preset" or "custom".
        date_preset: Preset key used on the preset tab.
        date_operator: "after" or "before" for custom dates.
        date_value: Raw custom date string.
        amount_operator: Comparison operator for amounts.
        amount_value: Raw amount string.
    """

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._id_generator = id_generator or RandomIdGenerator()
        self._clock = clock
        self.is_open = False
        self.filter_type = DATE_FILTER
        self.date_tab = PRESET_TAB
        self.date_preset = DEFAULT_PRESET
        self.date_operator = DEFAULT_DATE_OPERATOR
        self.date_value = ""
        self.amount_operator = DEFAULT_AMOUNT_OPERATOR
        self.amount_value = ""

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def set_type(self, filter_type: str) -> None:
        """Switch between date and amount, resetting that type's sub-mode."""
        if filter_type not in FILTER_TYPES:
            LOG.warning("set_type - ignoring unknown filter type:%s", filter_type)
            return
        self.filter_type = filter_type
        if filter_type == DATE_FILTER:
            self.date_tab = PRESET_TAB
            self.date_operator = DEFAULT_DATE_OPERATOR
        else:
            self.amount_operator = DEFAULT_AMOUNT_OPERATOR

    def set_date_tab(self, tab: str) -> None:
        if tab not in DATE_TABS:
            LOG.warning("set_date_tab - ignoring unknown tab:%s", tab)
            return
        self.date_tab = tab

    def set_date_preset(self, preset: str) -> None:
        # Unknown presets resolve to the default range at commit time
        self.date_preset = preset

    def set_date_operator(self, operator: str) -> None:
        if operator not in DATE_OPERATORS:
            LOG.warning("set_date_operator - ignoring unknown operator:%s", operator)
            return
        self.date_operator = operator

    def set_date_value(self, value: str) -> None:
        self.date_value = value or ""

    def set_amount_operator(self, operator: str) -> None:
        if operator not in AMOUNT_OPERATORS:
            LOG.warning("set_amount_operator - ignoring unknown operator:%s", operator)
            return
        self.amount_operator = operator

    def set_amount_value(self, value: str) -> None:
        self.amount_value = value or ""

    @property
    def can_commit(self) -> bool:
        """False while a custom date or an amount is still empty."""
        if self.filter_type == AMOUNT_FILTER:
            return bool(self.amount_value)
        if self.date_tab == CUSTOM_TAB:
            return bool(self.date_value)
        return True

    def build(self) -> Filter | None:
        """
        Build the Filter for the current selections without committing it.

        Returns:
            The new Filter with a fresh id, or None when can_commit is False.
        """
        if not self.can_commit:
            return None
        filter_id = self._id_generator()

        if self.filter_type == AMOUNT_FILTER:
            return Filter(
                id=filter_id,
                type=AMOUNT_FILTER,
                operator=self.amount_operator,
                value=self.amount_value,
                display=amount_display(self.amount_operator, self.amount_value),
            )

        if self.date_tab == PRESET_TAB:
            start, display = resolve_preset(self.date_preset, self._clock())
            return Filter(
                id=filter_id,
                type=DATE_FILTER,
                operator=DEFAULT_DATE_OPERATOR,
                value=format_iso_date(start),
                display=display,
                preset=self.date_preset,
            )

        return Filter(
            id=filter_id,
            type=DATE_FILTER,
            operator=self.date_operator,
            value=self.date_value,
            display=f"{DATE_OPERATORS[self.date_operator]} {self.date_value}",
        )

    def commit(self, store: FilterStore) -> Filter | None:
        """
        Commit the current selections into store.

        On success the filter is appended, the builder closes and the typed
        values are cleared.

        Returns:
            The committed Filter, or None when the commit is not allowed.
        """
        applied = self.build()
        if applied is None:
            LOG.debug(
                "commit - blocked type:%s tab:%s", self.filter_type, self.date_tab
            )
            return None
        store.add(applied)
        self.close()
        self.date_value = ""
        self.amount_value = ""
        LOG.debug("commit - id:%s display:%s", applied.id, applied.display)
        return applied
