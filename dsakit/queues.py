"""Bounded queue and deque containers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_ARRAY_QUEUE_CAPACITY = 100001


class QueueFull(OverflowError):
    """Raised when a value is added to a container with no free slot."""


class QueueEmpty(IndexError):
    """Raised when a value is read from an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class CircularQueue(Generic[T]):
    """A first-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        """Add a value at the back; raise QueueFull when no slot is free."""
        if len(self._items) >= self.capacity:
            raise QueueFull("circular queue is full")
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the front value; raise QueueEmpty when empty."""
        if not self._items:
            raise QueueEmpty("circular queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class BoundedDeque(Generic[T]):
    """A double-ended queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[T] = deque()

    def push_front(self, value: T) -> None:
        """Add a value at the front; raise QueueFull when no slot is free."""
        if self.is_full():
            raise QueueFull("deque is full")
        self._items.appendleft(value)

    def push_rear(self, value: T) -> None:
        """Add a value at the back; raise QueueFull when no slot is free."""
        if self.is_full():
            raise QueueFull("deque is full")
        self._items.append(value)

    def pop_front(self) -> T:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmpty("deque is empty")
        return self._items.popleft()

    def pop_rear(self) -> T:
        """Remove and return the back value."""
        if self.is_empty():
            raise QueueEmpty("deque is empty")
        return self._items.pop()

    def peek_front(self) -> T:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueEmpty("deque is empty")
        return self._items[0]

    def peek_rear(self) -> T:
        """Return the back value without removing it."""
        if self.is_empty():
            raise QueueEmpty("deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class ArrayQueue(Generic[T]):
    """A linear queue over a fixed number of slots.

    Slots freed by dequeuing are not reused until the queue becomes empty,
    at which point all ``capacity`` slots are available again.
    """

    def __init__(self, capacity: int = DEFAULT_ARRAY_QUEUE_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[T] = deque()
        self._slots_used = 0

    def enqueue(self, value: T) -> None:
        """Add a value at the back; raise QueueFull when every slot is used."""
        if self._slots_used == self.capacity:
            raise QueueFull("queue is full")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self) -> T:
        """Remove and return the front value; raise QueueEmpty when empty."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        value = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return value

    def front(self) -> T:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)