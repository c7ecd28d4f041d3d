"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def nodes(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as least-significant-digit-first lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    previous: Optional[ListNode] = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the head.

    Raises ValueError when the list has no such node.
    """
    if head is None:
        raise ValueError("cannot remove a node from an empty list")
    if n < 1:
        raise ValueError(f"position must be at least 1, got {n}")
    lead: Optional[ListNode] = head
    for _ in range(n - 1):
        lead = lead.next if lead is not None else None
        if lead is None:
            raise ValueError(f"list is shorter than {n} nodes")
    if lead is None:
        raise ValueError(f"list is shorter than {n} nodes")
    if lead.next is None:
        return head.next
    before = head
    lead = lead.next
    while lead.next is not None:
        before = before.next  # type: ignore[assignment]
        lead = lead.next
    before.next = before.next.next  # type: ignore[union-attr]
    return head


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None:
        return
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first: Optional[ListNode] = head
    while first is not None and second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def merge_k_lists(lists: list[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists into a new sorted list.

    An empty input gives None and a single list is returned as it is.
    """
    if not lists:
        return None
    if len(lists) == 1:
        return lists[0]
    order = itertools.count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        val, _, node = heapq.heappop(heap)
        tail.next = ListNode(val)
        tail = tail.next
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return dummy.next