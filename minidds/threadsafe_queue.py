"""A FIFO queue shared between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """First-in first-out queue guarded by a lock and condition."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, value: T) -> None:
        """Append an item and wake one waiter."""
        with self._cond:
            self._items.append(value)
            self._cond.notify()

    def try_pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None when empty."""
        with self._cond:
            if not self._items:
                return None
            return self._items.popleft()

    def wait_and_pop(self) -> T:
        """Block until an item is available, then remove and return it."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def empty(self) -> bool:
        """True when the queue holds nothing."""
        with self._cond:
            return not self._items