"""
Reveal Scheduling
=================
The rasterizers compute the whole point sequence up front. A RevealSchedule
only walks an index over that finished sequence, one item per tick, so the
timer that drives it can be stopped at any moment without anything to undo.
"""
from __future__ import annotations

from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class RevealSchedule(Generic[T]):
    """Index-advancing cursor over an immutable sequence."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._index = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def revealed_count(self) -> int:
        return self._index

    @property
    def finished(self) -> bool:
        return self._index >= len(self._items)

    def revealed(self) -> list[T]:
        return list(self._items[:self._index])

    def advance(self) -> Optional[T]:
        """Reveal the next item. Returns None once the sequence is exhausted."""
        if self.finished:
            return None
        item = self._items[self._index]
        self._index += 1
        return item

    def reset(self) -> None:
        self._index = 0
