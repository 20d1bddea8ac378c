"""
Relative date presets for date filters.

A preset such as "last7days" is resolved against an explicit "now" into
the absolute instant the filter starts at. Every branch computes a fresh
datetime; nothing is adjusted in place.
"""

from datetime import datetime, timedelta
from typing import NamedTuple

DEFAULT_PRESET = "last30days"

# Preset keys with their display labels, in the order they are offered
DATE_PRESETS: dict[str, str] = {
    "today": "Today",
    "yesterday": "Yesterday",
    "last7days": "Last 7 days",
    "last30days": "Last 30 days",
    "thisMonth": "This month",
    "lastMonth": "Last month",
}


class PresetRange(NamedTuple):
    """Start instant and label of a resolved preset."""

    start: datetime
    display: str


def _start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_preset(preset: str, now: datetime) -> PresetRange:
    """
    Resolve a named preset against now.

    Unknown presets fall back to the last 30 days.

    Args:
        preset: One of the DATE_PRESETS keys.
        now: The instant "today" refers to.

    Returns:
        PresetRange with the start instant and display label.
    """
    if preset == "today":
        start = _start_of_day(now)
    elif preset == "yesterday":
        start = _start_of_day(now - timedelta(days=1))
    elif preset == "last7days":
        start = now - timedelta(days=7)
    elif preset == "thisMonth":
        start = now.replace(day=1)
    elif preset == "lastMonth":
        # Day 0 of the current month is the last day of the previous one
        start = now.replace(day=1) - timedelta(days=1)
    else:
        preset = DEFAULT_PRESET
        start = now - timedelta(days=30)
    return PresetRange(start=start, display=DATE_PRESETS[preset])
