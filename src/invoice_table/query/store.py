"""Ordered collection of applied filters."""

from typing import Iterator

from invoice_table.lib import logs
from invoice_table.models.filters import Filter

LOG = logs.logger(__file__)


class FilterStore:
    """
    Applied filters in insertion order.

    Insertion order is the display order of the filter pills. All filters
    are ANDed, so evaluation order does not change the result.
    """

    def __init__(self) -> None:
        self._filters: list[Filter] = []

    @property
    def filters(self) -> tuple[Filter, ...]:
        """Snapshot of the applied filters."""
        return tuple(self._filters)

    def add(self, applied: Filter) -> None:
        """
        Append a filter.

        Raises:
            ValueError: If a filter with the same id is already applied.
        """
        if any(existing.id == applied.id for existing in self._filters):
            raise ValueError(f"Duplicate filter id: {applied.id}")
        self._filters.append(applied)

    def remove(self, filter_id: str) -> bool:
        """Remove the filter with filter_id; returns False if it is not applied."""
        for index, existing in enumerate(self._filters):
            if existing.id == filter_id:
                del self._filters[index]
                return True
        LOG.debug("remove - filter_id:%s not applied", filter_id)
        return False

    def clear(self) -> bool:
        """Remove every filter; returns False if there was nothing to remove."""
        if not self._filters:
            return False
        self._filters.clear()
        return True

    def __iter__(self) -> Iterator[Filter]:
        return iter(tuple(self._filters))

    def __len__(self) -> int:
        return len(self._filters)

    def __contains__(self, filter_id: object) -> bool:
        return any(existing.id == filter_id for existing in self._filters)
