"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """Return the last node, or None if the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing every non-None content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None and node.content is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content that is not None."""
        for content in self:
            if content is not None:
                func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result