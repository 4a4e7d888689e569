"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, tail and size."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """A new list holding ``f(content)`` for each content.

        If ``f`` raises part way, ``delete`` is called on every content
        produced so far and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result