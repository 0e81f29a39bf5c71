"""Singly linked lists: building, reading, sorting and pair swapping."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({list_values(self)!r})"


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order; return its head, or None if empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list from head to tail."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def _merge(left: ListNode | None, right: ListNode | None) -> ListNode | None:
    dummy = ListNode()
    tail = dummy
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a linked list in ascending order by relinking its nodes; return the new head."""
    if head is None or head.next is None:
        return head

    before_middle = head
    slow = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        before_middle = slow
        slow = slow.next
        fast = fast.next.next
    before_middle.next = None

    return _merge(sort_list(head), sort_list(slow))


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes of a linked list; return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next