"""Thread-safe FIFO queue with blocking take."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class SafeQueue(Generic[T]):
    """FIFO queue shared between producer threads and one consumer."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def wait_for_element(self) -> T:
        """Remove and return the oldest element, waiting until one is there."""
        with self._cond:
            while not self._items:
                self._cond.wait()
            item = self._items.popleft()
            if not self._items:
                self._cond.notify_all()
            return item

    def push_element(self, element: T) -> None:
        """Append an element and wake a waiting consumer."""
        with self._cond:
            self._items.append(element)
            self._cond.notify_all()

    def wait_empty_queue(self) -> None:
        """Block until every element has been taken."""
        with self._cond:
            while self._items:
                self._cond.wait(0.5)