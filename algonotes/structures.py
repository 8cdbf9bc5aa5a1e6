"""Fixed-capacity stack, linear queue and circular queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

STACK_SIZE = 10
QUEUE_SIZE = 10


class CapacityError(OverflowError):
    """Raised when adding to a full container."""


class EmptyError(LookupError):
    """Raised when reading from or removing out of an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class Stack:
    """Last-in, first-out stack holding at most capacity items."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def _require_items(self) -> None:
        if self.is_empty():
            raise EmptyError("stack underflow")

    def push(self, value: Any) -> None:
        if self.is_full():
            raise CapacityError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        self._require_items()
        return self._items.pop()

    def peek(self) -> Any:
        self._require_items()
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


class _ArrayQueue:
    """Queue over a fixed slot array, tracked by front and rear indices."""

    _wraps = False

    def __init__(self, capacity: int = QUEUE_SIZE) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _step(self, index: int) -> int:
        following = index + 1
        return following % self.capacity if self._wraps else following

    def _require_items(self) -> None:
        if self.is_empty():
            raise EmptyError("queue is empty")

    def is_full(self) -> bool:
        return self._step(self._rear) == (self._front if self._wraps else self.capacity)

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise CapacityError("queue is full")
        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = self._step(self._rear)
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        self._require_items()
        value = self._slots[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = self._step(self._front)
        return value

    def is_empty(self) -> bool:
        return self._front == -1 and self._rear == -1

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]


class Queue(_ArrayQueue):
    """Array-backed first-in, first-out queue.

    Slots freed by dequeuing are not reused until the queue empties, so the
    queue reports full once capacity items have been enqueued since it was
    last empty.
    """

    def enqueue(self, value: Any) -> None:
        super().enqueue(value)

    def dequeue(self) -> Any:
        return super().dequeue()

    def clear(self) -> None:
        self._require_items()
        self._front = self._rear = -1

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return self._rear == self.capacity - 1


class CircularQueue(_ArrayQueue):
    """Ring-buffer queue that reuses freed slots."""

    _wraps = True

    def enqueue(self, value: Any) -> None:
        super().enqueue(value)

    def dequeue(self) -> Any:
        return super().dequeue()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front