"""Linked lists, and a queue and a stack built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algonotes.structures import EmptyError


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    next: Optional[_DoubleNode] = None
    prev: Optional[_DoubleNode] = None


def _check_position(position: int, low: int, high: int) -> None:
    if not low <= position <= high:
        raise IndexError(f"position {position} outside {low}..{high}")


class _Chain:
    """Shared bookkeeping for node chains that count their length."""

    _base = 0
    _empty_message = "list is empty"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Any] = None
        self._tail: Optional[Any] = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: Any) -> None:
        self.insert(value, self._size + self._base)

    def _nodes(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _node_at(self, position: int) -> Any:
        node = self._head
        for _ in range(position - self._base):
            node = node.next
        return node

    def _require_items(self) -> None:
        if self._head is None:
            raise EmptyError(self._empty_message)

    def _take(self, node: Any) -> Any:
        self._size -= 1
        return node.value

    def search(self, value: Any) -> Optional[int]:
        """Return the position of the first match, or None."""
        for index, item in enumerate(self, start=self._base):
            if item == value:
                return index
        return None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SinglyLinkedList(_Chain):
    """Singly linked list addressed by zero-based positions."""

    def _append(self, value: Any) -> None:
        self.insert_at_end(value)

    def insert_at_beginning(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        self.insert_at(self._size, value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the given position."""
        _check_position(position, 0, self._size)
        if position == 0:
            self.insert_at_beginning(value)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_at_beginning(self) -> Any:
        """Remove the first element and return its value."""
        return self.delete_at(0)

    def delete_at(self, position: int) -> Any:
        """Remove the element at position and return its value."""
        self._require_items()
        _check_position(position, 0, self._size - 1)
        if position == 0:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
        return self._take(removed)

    def search(self, value: Any) -> Optional[int]:
        """Return the zero-based position of the first match, or None."""
        return super().search(value)

    def sort(self) -> None:
        """Sort in place by exchanging values between nodes."""
        for node in self._nodes():
            other = node.next
            while other is not None:
                if node.value > other.value:
                    node.value, other.value = other.value, node.value
                other = other.next

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))


class DoublyLinkedList(_Chain):
    """Doubly linked list addressed by one-based positions."""

    _base = 1

    def insert(self, value: Any, position: int) -> None:
        """Insert value so that it ends up at the one-based position."""
        _check_position(position, 1, self._size + 1)
        previous = self._node_at(position - 1) if position > 1 else None
        following = previous.next if previous is not None else self._head
        node = _DoubleNode(value, following, previous)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        if following is None:
            self._tail = node
        else:
            following.prev = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the element at the one-based position and return its value."""
        self._require_items()
        _check_position(position, 1, self._size)
        removed = self._node_at(position)
        if removed.prev is not None:
            removed.prev.next = removed.next
        else:
            self._head = removed.next
        if removed.next is not None:
            removed.next.prev = removed.prev
        else:
            self._tail = removed.prev
        return self._take(removed)

    def search(self, value: Any) -> Optional[int]:
        """Return the one-based position of the first match, or None."""
        return super().search(value)

    def forward(self) -> list:
        """Values from head to tail."""
        return list(self)

    def backward(self) -> list:
        """Values from tail to head, following the back links."""
        values = []
        node = self._tail
        while node is not None:
            values.append(node.value)
            node = node.prev
        return values

    def __reversed__(self) -> Iterator[Any]:
        return iter(self.backward())


class CircularLinkedList(_Chain):
    """Circular singly linked list addressed by one-based positions."""

    _base = 1

    def insert(self, value: Any, position: int) -> None:
        """Insert value so that it ends up at the one-based position."""
        _check_position(position, 1, self._size + 1)
        node = _Node(value)
        if self._head is None:
            node.next = node
            self._head = self._tail = node
        else:
            previous = self._tail if position == 1 else self._node_at(position - 1)
            node.next = previous.next
            previous.next = node
            if position == 1:
                self._head = node
            elif previous is self._tail:
                self._tail = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the element at the one-based position and return its value."""
        self._require_items()
        _check_position(position, 1, self._size)
        previous = self._tail if position == 1 else self._node_at(position - 1)
        removed = previous.next
        if self._size == 1:
            self._head = self._tail = None
        else:
            previous.next = removed.next
            if removed is self._head:
                self._head = removed.next
            if removed is self._tail:
                self._tail = previous
        return self._take(removed)

    def search(self, value: Any) -> Optional[int]:
        """Return the one-based position of the first match, or None."""
        return super().search(value)

    def cycle(self) -> Iterator[Any]:
        """Iterate around the ring without end (nothing if empty)."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


class LinkedQueue(_Chain):
    """Unbounded first-in, first-out queue of linked nodes."""

    _empty_message = "queue is empty"

    def _append(self, value: Any) -> None:
        self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        self._require_items()
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        return self._take(removed)


class LinkedStack(_Chain):
    """Unbounded last-in, first-out stack of linked nodes."""

    _empty_message = "stack underflow"

    def _append(self, value: Any) -> None:
        self.push(value)

    def push(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        self._require_items()
        removed = self._head
        self._head = removed.next
        return self._take(removed)