"""Singly, doubly and randomly linked list nodes and operations on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class RandomNode:
    """A list node that also points to an arbitrary node of the same list."""

    val: int
    next: Optional[RandomNode] = field(default=None, repr=False)
    random: Optional[RandomNode] = field(default=None, repr=False)


@dataclass(eq=False)
class MultilevelNode:
    """A doubly linked node that may own a child list."""

    val: int
    prev: Optional[MultilevelNode] = field(default=None, repr=False)
    next: Optional[MultilevelNode] = field(default=None, repr=False)
    child: Optional[MultilevelNode] = field(default=None, repr=False)


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a singly linked list holding ``values`` in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list from ``head`` onwards."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    return _meeting_point(head) is not None


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is none."""
    meet = _meeting_point(head)
    if meet is None:
        return None
    slow = head
    while slow is not meet:
        slow = slow.next
        meet = meet.next
    return slow


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the new head.

    If ``n`` exceeds the length of the list, the head is removed.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if head is None or head.next is None:
        return None
    fast = head
    for _ in range(n):
        fast = fast.next
        if fast is None:
            return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
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
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take ``list1`` first."""
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


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list ``k`` nodes at a time; a shorter tail stays as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(next=head)
    group_prev = dummy
    while True:
        end = group_prev
        for _ in range(k):
            end = end.next
            if end is None:
                return dummy.next
        group_next = end.next
        first = group_prev.next
        prev, node = group_next, first
        while node is not group_next:
            node.next, prev, node = prev, node, node.next
        group_prev.next = end
        group_prev = first


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; with two middles, the second one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes carry random pointers."""
    if head is None:
        return None
    copies: dict[RandomNode, RandomNode] = {}
    node = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    for original, copy in copies.items():
        copy.next = copies.get(original.next) if original.next is not None else None
        copy.random = copies.get(original.random) if original.random is not None else None
    return copies[head]


def flatten(head: Optional[MultilevelNode]) -> Optional[MultilevelNode]:
    """Flatten a multilevel doubly linked list in place, children first."""
    node = head
    while node is not None:
        if node.child is not None:
            after = node.next
            child_head = flatten(node.child)
            node.next = child_head
            child_head.prev = node
            node.child = None
            while node.next is not None:
                node = node.next
            if after is not None:
                node.next = after
                after.prev = node
        node = node.next
    return head