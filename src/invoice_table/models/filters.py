"""
Committed filter records.

A Filter is created once by the filter builder and never changes
afterwards. Its display label is frozen at commit time, so a "Last 7 days"
pill keeps the start date it was resolved against.
"""

from dataclasses import asdict, dataclass

DATE_FILTER = "date"
AMOUNT_FILTER = "amount"
FILTER_TYPES: tuple[str, ...] = (DATE_FILTER, AMOUNT_FILTER)

# Date operators with their display labels
DATE_OPERATORS: dict[str, str] = {
    "after": "After",
    "before": "Before",
}

# Amount operators with their display labels
AMOUNT_OPERATORS: dict[str, str] = {
    ">": "Greater than",
    ">=": "Greater than or equal",
    "=": "Equal to",
    "<=": "Less than or equal",
    "<": "Less than",
}


@dataclass(frozen=True, slots=True)
class Filter:
    """
    An applied date or amount predicate.

    Attributes:
        id: Unique identifier, used to remove the filter.
        type: "date" or "amount".
        operator: "after"/"before" for dates, a comparison for amounts.
        value: ISO date string or numeric string.
        display: Human readable pill label.
        preset: Date preset key the value was resolved from, if any.
    """

    id: str
    type: str
    operator: str
    value: str
    display: str
    preset: str | None = None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)
