"""A bounded FIFO queue that overwrites its oldest item when full."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """Fixed-capacity queue; pushing onto a full queue drops the oldest item."""

    def __init__(self, max_items: int) -> None:
        if max_items < 0:
            raise ValueError("max_items must not be negative")
        self.max_items = max_items
        self._items: Deque[T] = deque(maxlen=max_items)
        self.overrun_counter = 0

    def push_back(self, item: T) -> None:
        """Append an item, overrunning the oldest one if there is no room."""
        if len(self._items) == self.max_items:
            self.overrun_counter += 1
        self._items.append(item)

    def pop_front(self) -> T:
        """Remove and return the oldest item."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) == self.max_items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)