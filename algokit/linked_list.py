"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return "ListNode(" + " -> ".join(map(str, self)) + ")"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; None if empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [node.val for node in _nodes(head)]


def swap_nodes(head: ListNode | None, k: int) -> ListNode | None:
    """Swap the values of the k-th node from the start and from the end."""
    nodes = list(_nodes(head))
    if not 1 <= k <= len(nodes):
        raise IndexError(f"k={k} is outside a list of length {len(nodes)}")
    front, back = nodes[k - 1], nodes[len(nodes) - k]
    front.val, back.val = back.val, front.val
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists into one, taking from ``l1`` first on ties."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge any number of sorted lists into one sorted list."""
    counter = itertools.count()
    heap = [(node.val, next(counter), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(counter), node.next))
    tail.next = None
    return dummy.next