"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One element of a linked list: its content and the next node."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.append(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end and return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, deleter: Deleter = None) -> None:
        """Remove every node, passing each content to ``deleter`` in order."""
        while self.head is not None:
            node = self.head
            self.head = node.next
            node.next = None
            if deleter is not None:
                deleter(node.content)

    def remove_first(self, deleter: Deleter = None) -> Any:
        """Remove the first node and return its content.

        The content is passed to ``deleter`` first, if one is given. An empty
        list is left alone and None is returned.
        """
        node = self.head
        if node is None:
            return None
        self.head = node.next
        node.next = None
        if deleter is not None:
            deleter(node.content)
        return node.content

    def for_each(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every content, front to back."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self, func: Optional[Callable[[Any], Any]], deleter: Deleter = None
    ) -> LinkedList:
        """Return a new list holding ``func`` applied to every content.

        If ``func`` raises, the contents already produced are passed to
        ``deleter`` and the exception propagates. With no ``func`` the result
        is empty.
        """
        result = LinkedList()
        if func is None:
            return result
        try:
            for content in self:
                result.append(func(content))
        except BaseException:
            result.clear(deleter)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"