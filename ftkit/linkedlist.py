"""A singly linked list whose nodes can be handed around and relinked."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a piece of content and the node after it."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)


def _check_node(node: Any) -> Node:
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")
    return node


def _check_callable(f: Any, name: str) -> None:
    if not callable(f):
        raise TypeError(f"{name} must be callable")


def delete_one(node: Node, delete: Optional[Callable[[Any], Any]] = None) -> None:
    """Release a single node: pass its content to ``delete`` if one is
    given, and unlink it from the node that followed it."""
    _check_node(node)
    if delete is not None:
        _check_callable(delete, "delete")
        delete(node.content)
    node.next = None


class LinkedList:
    """A chain of ``Node`` objects reached from ``head``.

    Iterating over the list yields the contents of its nodes in order.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Node) -> None:
        """Make ``node`` the new head; the old list follows it."""
        _check_node(node)
        node.next = self.head
        self.head = node

    def push_back(self, node: Node) -> None:
        """Attach ``node``, with any nodes that follow it, after the last node."""
        _check_node(node)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to ``delete``, last node first, and empty the list."""
        _check_callable(delete, "delete")
        nodes = list(self._nodes())
        for node in reversed(nodes):
            delete(node.content)
            node.next = None
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every node in order."""
        _check_callable(f, "f")
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """Return a new list holding ``f(content)`` for each node.

        If ``f`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        _check_callable(f, "f")
        _check_callable(delete, "delete")
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result