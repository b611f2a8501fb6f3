"""Fixed-capacity recency list shared by the file and buffer tracks.

Newest entry first. ``push`` inserts at the front and evicts from the tail
in one step, so the length never exceeds the cap observed at push time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Capacity = int | Callable[[], int]


class BoundedHistory(Generic[T]):
    """Most-recent-first list capped at ``capacity`` entries.

    ``capacity`` may be a callable; it is evaluated on every push so a cap
    changed by the user applies to the next insertion.
    """

    def __init__(self, capacity: Capacity, items: list[T] | None = None) -> None:
        self._capacity = capacity
        self._items: list[T] = list(items or [])

    @property
    def capacity(self) -> int:
        cap = self._capacity() if callable(self._capacity) else self._capacity
        return max(int(cap), 0)

    # ── Insertion ────────────────────────────────────────────

    def push(self, item: T) -> list[T]:
        """Insert ``item`` at the front, returning entries evicted from the tail."""
        self._items.insert(0, item)
        cap = self.capacity
        evicted = self._items[cap:]
        del self._items[cap:]
        if evicted:
            logger.debug("Evicted %d entries (cap=%d)", len(evicted), cap)
        return evicted

    # ── Removal ──────────────────────────────────────────────

    def pop(self) -> T | None:
        """Remove and return the most recent entry, or None when empty."""
        if not self._items:
            return None
        return self._items.pop(0)

    def discard(self, item: T) -> int:
        """Remove every entry equal to ``item``. Returns how many were removed."""
        before = len(self._items)
        self._items = [x for x in self._items if x != item]
        return before - len(self._items)

    def take_first(self, predicate: Callable[[T], bool]) -> T | None:
        """Remove and return the first entry matching ``predicate``."""
        for i, x in enumerate(self._items):
            if predicate(x):
                return self._items.pop(i)
        return None

    def clear(self) -> int:
        dropped = len(self._items)
        self._items.clear()
        return dropped

    # ── Read access ──────────────────────────────────────────

    def peek(self) -> T | None:
        return self._items[0] if self._items else None

    def items(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"BoundedHistory(capacity={self.capacity}, items={self._items!r})"
