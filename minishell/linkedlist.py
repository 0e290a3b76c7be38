"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One element of a linked list: its content and the node after it."""

    content: T
    next: Optional[Node[T]] = None


class LinkedList(Generic[T]):
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: T) -> Node[T]:
        """Put a new node holding ``content`` at the start; return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: T) -> Node[T]:
        """Put a new node holding ``content`` at the end; return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """The final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[T], U]) -> LinkedList[U]:
        """A new list holding ``f(content)`` for every node, in order."""
        return LinkedList(f(content) for content in self)

    def clear(self, delete: Callable[[T], Any]) -> None:
        """Hand every content to ``delete``, front to back, and empty the list."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following