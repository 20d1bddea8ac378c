"""
Identifier generators for committed filters.

Generators are plain callables returning a new string id on every call.
They are classes rather than closures so that a session holding one can be
pickled along with the rest of the Reflex client state.
"""

import uuid
from typing import Callable

IdGenerator = Callable[[], str]


class RandomIdGenerator:
    """Collision-resistant ids taken from a random UUID."""

    def __init__(self, length: int = 12) -> None:
        self.length = length

    def __call__(self) -> str:
        return uuid.uuid4().hex[: self.length]


class SequentialIdGenerator:
    """
    Monotonic ids such as "filter-1", "filter-2".

    Deterministic, which makes it the generator of choice in tests.
    """

    def __init__(self, prefix: str = "filter", start: int = 1) -> None:
        self.prefix = prefix
        self._next = start

    def __call__(self) -> str:
        value = self._next
        self._next += 1
        return f"{self.prefix}-{value}"
