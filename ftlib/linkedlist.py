"""A singly linked list whose nodes are visible to callers.

Contents are kept in order from ``head`` to the last node. The methods that
add an element return its ``Node``, so a caller can later remove exactly
that node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

_T = TypeVar("_T")
_U = TypeVar("_U")

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node(Generic[_T]):
    """One element of a ``LinkedList``: its content and the node after it."""

    content: _T
    next: Optional["Node[_T]"] = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


class LinkedList(Generic[_T]):
    """A singly linked list of contents, starting at ``head``."""

    def __init__(self, items: Iterable[_T] = ()) -> None:
        self.head: Optional[Node[_T]] = None
        for item in items:
            self.add_back(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node[_T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: _T) -> Node[_T]:
        """Insert ``content`` before the first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: _T) -> Node[_T]:
        """Append ``content`` after the last element and return its node."""
        node: Node[_T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[_T]]:
        """Return the last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[_T]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to ``delete`` first when given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def remove(self, node: Node[_T], delete: Deleter = None) -> None:
        """Unlink ``node`` from the list.

        Its content is passed to ``delete`` when one is given and the
        content is not ``None``. Raises ``ValueError`` if the node is not
        part of this list.
        """
        previous: Optional[Node[_T]] = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not in this list")
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        node.next = None
        if delete is not None and node.content is not None:
            delete(node.content)

    def for_each(self, f: Callable[[_T], Any]) -> None:
        """Call ``f`` on every content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[_T], _U], delete: Deleter = None) -> "LinkedList[_U]":
        """Return a new list holding ``f(content)`` for every content.

        If ``f`` raises part way through, the contents already produced are
        passed to ``delete`` (when given) and the exception propagates.
        """
        result: LinkedList[_U] = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result