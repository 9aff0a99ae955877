"""Singly linked lists and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Link ``values`` into a list and return its head, or None if empty."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[Any]:
    """Values of the list starting at ``head``, in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def reverse_linked_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev