"""Persistent singly linked key sequence.

Nodes are never mutated after construction, so any number of maps can share
a tail. ``None`` is the empty list.
"""

from __future__ import annotations

from typing import Any, Iterator


class KeyNode:
    __slots__ = ("key", "next")

    def __init__(self, key: Any, next: KeyNode | None) -> None:
        self.key = key
        self.next = next

    def __repr__(self) -> str:
        return f"KeyNode({list(iter_keys(self))!r})"


def prepend(head: KeyNode | None, key: Any) -> KeyNode:
    return KeyNode(key, head)


def iter_keys(head: KeyNode | None) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node.key
        node = node.next


def length(head: KeyNode | None) -> int:
    count = 0
    node = head
    while node is not None:
        count += 1
        node = node.next
    return count


def remove(head: KeyNode | None, key: Any) -> KeyNode | None:
    """Drop the first node holding ``key``, matched the way dict keys are.

    Only the prefix in front of the match is copied; the rest is shared.
    Returns ``head`` itself when ``key`` is not in the list.
    """
    prefix: list[Any] = []
    node = head
    while node is not None:
        if node.key is key or node.key == key:
            break
        prefix.append(node.key)
        node = node.next
    if node is None:
        return head
    rebuilt = node.next
    for item in reversed(prefix):
        rebuilt = KeyNode(item, rebuilt)
    return rebuilt


def from_oldest(keys: list[Any]) -> KeyNode | None:
    head: KeyNode | None = None
    for key in keys:
        head = KeyNode(key, head)
    return head
