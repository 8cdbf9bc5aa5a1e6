import itertools

import pytest

from algonotes.linked import (
    CircularLinkedList,
    DoublyLinkedList,
    LinkedQueue,
    LinkedStack,
    SinglyLinkedList,
)
from algonotes.structures import EmptyError

SAMPLE = [5, 2, 7, 1, 9]


def _ring(cll, count):
    return list(itertools.islice(cll.cycle(), count))


# Behaviour shared by the positional lists

@pytest.mark.parametrize(
    "lst, base",
    [
        (SinglyLinkedList(SAMPLE), 0),
        (DoublyLinkedList(SAMPLE), 1),
        (CircularLinkedList(SAMPLE), 1),
    ],
)
def test_search_positions(lst, base):
    found = [lst.search(value) for value in SAMPLE]
    assert found == list(range(base, base + len(SAMPLE)))
    assert lst.search(100) is None
    assert list(lst) == SAMPLE
    assert len(lst) == len(SAMPLE)


def test_removing_from_empty_raises():
    removals = [
        SinglyLinkedList().delete_at_beginning,
        lambda: SinglyLinkedList().delete_at(0),
        lambda: DoublyLinkedList().delete(1),
        lambda: CircularLinkedList().delete(1),
        LinkedQueue().dequeue,
        LinkedStack().pop,
    ]
    for remove in removals:
        with pytest.raises(EmptyError):
            remove()


# Singly linked list

def test_insert_at_beginning_reverses_order():
    values = [12, 13, 14, 15, 16]
    lst = SinglyLinkedList()
    for value in values:
        lst.insert_at(0, value)
    assert list(lst) == values[::-1]
    lst.delete_at(0)
    lst.delete_at(0)
    assert list(lst) == values[::-1][2:]


def test_insert_at_end_and_position_match_list_insert():
    lst = SinglyLinkedList()
    for value in SAMPLE:
        lst.insert_at_end(value)
    assert list(lst) == SAMPLE
    expected = list(SAMPLE)
    lst.insert_at(3, 42)
    expected.insert(3, 42)
    lst.insert_at(len(expected), 43)
    expected.append(43)
    assert list(lst) == expected


@pytest.mark.parametrize("position", [len(SAMPLE) + 1, -1])
def test_insert_at_invalid_position(position):
    with pytest.raises(IndexError):
        SinglyLinkedList(SAMPLE).insert_at(position, 0)


def test_delete_returns_values():
    lst = SinglyLinkedList(SAMPLE)
    expected = list(SAMPLE)
    assert lst.delete_at_beginning() == expected.pop(0)
    assert lst.delete_at(2) == expected.pop(2)
    assert lst.delete_at(len(expected) - 1) == expected.pop()
    assert list(lst) == expected
    with pytest.raises(IndexError):
        lst.delete_at(len(expected))


@pytest.mark.parametrize(
    "values, expected", [(SAMPLE, [1, 2, 5, 7, 9]), ([], []), ([3, 1, 3, 2, 1], [1, 1, 2, 3, 3])]
)
def test_sort(values, expected):
    lst = SinglyLinkedList(values)
    lst.sort()
    assert list(lst) == expected


# Doubly linked list

def test_doubly_insert_positions_are_one_based():
    dll = DoublyLinkedList()
    dll.insert(12, 1)
    dll.insert(13, 1)
    assert dll.forward() == [13, 12]
    dll.insert(99, 2)
    assert dll.forward() == [13, 99, 12]
    assert dll.backward() == [12, 99, 13]


@pytest.mark.parametrize("position", [0, len(SAMPLE) + 2])
def test_doubly_insert_invalid_position(position):
    with pytest.raises(IndexError):
        DoublyLinkedList(SAMPLE).insert(0, position)


def test_doubly_delete_keeps_links_consistent():
    dll = DoublyLinkedList(SAMPLE)
    assert dll.backward() == SAMPLE[::-1]
    expected = list(SAMPLE)
    assert dll.delete(1) == expected.pop(0)
    assert dll.delete(len(expected)) == expected.pop()
    assert dll.delete(2) == expected.pop(1)
    assert dll.forward() == expected
    assert dll.backward() == expected[::-1]


def test_doubly_delete_until_empty():
    dll = DoublyLinkedList(SAMPLE)
    assert [dll.delete(1) for _ in SAMPLE] == SAMPLE
    assert dll.forward() == [] and dll.backward() == []


# Circular linked list

def test_circular_wraps_around():
    cll = CircularLinkedList()
    for position, value in enumerate(SAMPLE, start=1):
        cll.insert(value, position)
    assert _ring(cll, 2 * len(SAMPLE)) == SAMPLE + SAMPLE
    cll.insert(42, 1)
    assert _ring(cll, len(cll) + 1) == [42] + SAMPLE + [42]


def test_circular_delete_head_and_tail():
    cll = CircularLinkedList(SAMPLE)
    expected = list(SAMPLE)
    assert cll.delete(1) == expected.pop(0)
    assert cll.delete(len(expected)) == expected.pop()
    assert _ring(cll, 2 * len(expected)) == expected + expected


def test_circular_invalid_positions():
    cll = CircularLinkedList()
    with pytest.raises(IndexError):
        cll.insert(1, 2)
    cll.insert(1, 1)
    with pytest.raises(IndexError):
        cll.delete(2)
    assert cll.delete(1) == 1
    assert list(cll.cycle()) == []


# Queue and stack

def test_linked_queue_is_fifo():
    queue = LinkedQueue()
    for value in SAMPLE:
        queue.enqueue(value)
    assert list(queue) == SAMPLE
    assert [queue.dequeue() for _ in SAMPLE] == SAMPLE
    assert len(queue) == 0
    queue.enqueue(2)
    assert list(queue) == [2]


def test_linked_stack_is_lifo():
    stack = LinkedStack()
    for value in SAMPLE:
        stack.push(value)
    assert list(stack) == SAMPLE[::-1]
    assert [stack.pop() for _ in SAMPLE] == SAMPLE[::-1]
    assert len(stack) == 0