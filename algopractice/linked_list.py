"""A singly linked list with head insertion, positional insertion and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """One cell of a singly linked list."""

    data: int
    next: Node | None = None


def _merge_chains(first: Node | None, second: Node | None) -> Node | None:
    """Merge two ascending node chains by relinking; on ties the second chain goes first."""
    anchor = Node(0)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _mid_point(head: Node) -> Node:
    """Return the last node of the first half of a non-empty chain."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _merge_sort_chain(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    mid = _mid_point(head)
    second = mid.next
    mid.next = None
    return _merge_chains(_merge_sort_chain(head), _merge_sort_chain(second))


class LinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, data: int) -> None:
        """Insert ``data`` before the current first element."""
        self.head = Node(data, self.head)

    def insert(self, position: int, data: int) -> None:
        """Insert ``data`` so that it ends up at index ``position``."""
        if position < 0:
            raise IndexError("position must not be negative")
        if position == 0:
            self.push_front(data)
            return
        current = self.head
        for _ in range(position - 1):
            if current is None:
                break
            current = current.next
        if current is None:
            raise IndexError("position is beyond the end of the list")
        current.next = Node(data, current.next)

    def sort(self) -> None:
        """Sort the list in ascending order, in place, by merge sort."""
        self.head = _merge_sort_chain(self.head)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def __str__(self) -> str:
        return "".join(f"{value}-->" for value in self)


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return a new ascending list holding the elements of two ascending lists."""
    merged = LinkedList()
    merged.head = _merge_chains(LinkedList(first).head, LinkedList(second).head)
    return merged