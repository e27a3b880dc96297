"""Circular, singly linked intrusive list.

The list keeps a pointer to its tail; the tail links back to the head, so
pushing at either end, popping the head and rotating are O(1).

operation       | runtime | description
----------------|---------|-------------------------------------------
lpush           | O(1)    | insert as head (leftmost node)
lpeek           | O(1)    | get the head without removing it
lpop            | O(1)    | remove and return head
rpush           | O(1)    | append as tail (rightmost node)
rpeek           | O(1)    | get the tail without removing it
rpop            | O(n)    | remove and return tail
lpoprpush       | O(1)    | move the head to the end of the list
contains        | O(n)    | check if the list contains a node
remove          | O(n)    | remove a node

Nodes are :class:`Link` objects embedded in user objects. :class:`TypedList`
works on the owning objects directly, given the name of the attribute that
holds their link.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Link:
    """A list node; embed one in any object that should be listable."""

    __slots__ = ("next", "owner")

    def __init__(self) -> None:
        self.next: Link | None = None
        self.owner: Any = None

    def __repr__(self) -> str:
        return f"<Link at {id(self):#x} linked={self.is_linked()}>"

    def is_linked(self) -> bool:
        """True if this link is currently part of a list."""
        return self.next is not None

    def _clean(self) -> None:
        self.next = None


class List:
    """Circular singly linked list of :class:`Link` nodes."""

    def __init__(self) -> None:
        self._last: Link | None = None

    def __repr__(self) -> str:
        return f"List({list(self)!r})"

    def is_empty(self) -> bool:
        return self._last is None

    def _set_only(self, element: Link) -> None:
        element.next = element
        self._last = element

    def lpush(self, element: Link) -> None:
        """Insert ``element`` at the head of the list."""
        last = self._last
        if last is None:
            self._set_only(element)
        else:
            element.next = last.next
            last.next = element

    def rpush(self, element: Link) -> None:
        """Append ``element`` at the tail of the list."""
        self.lpush(element)
        self._last = element

    def _find_prev(self, element: Link) -> Link | None:
        last = self._last
        if last is None:
            return None
        pos = last
        while True:
            if pos.next is element:
                return pos
            if pos.next is last:
                return None
            pos = pos.next

    def contains(self, element: Link) -> bool:
        return self._find_prev(element) is not None

    def remove(self, element: Link) -> bool:
        """Unlink ``element``; return False if it was not in the list."""
        if self._last is None:
            return False
        if self._last is element:
            self.rpop()
            return True
        prev = self._find_prev(element)
        if prev is None:
            return False
        prev.next = element.next
        element._clean()
        return True

    def lpop(self) -> Link | None:
        """Remove and return the head, or ``None`` if empty."""
        last = self._last
        if last is None:
            return None
        first = last.next
        if first is last:
            self._last = None
        else:
            last.next = first.next
        first._clean()
        return first

    def lpoprpush(self) -> None:
        """Rotate the list so that the head becomes the tail."""
        if self._last is not None:
            self._last = self._last.next

    def lpeek(self) -> Link | None:
        return None if self._last is None else self._last.next

    def rpeek(self) -> Link | None:
        return self._last

    def rpop(self) -> Link | None:
        """Remove and return the tail, or ``None`` if empty."""
        last = self._last
        if last is None:
            return None
        while self._last.next is not last:
            self.lpoprpush()
        return self.lpop()

    def __iter__(self) -> Iterator[Link]:
        last = self._last
        if last is None:
            return
        pos = last.next
        while True:
            following = pos.next
            yield pos
            if pos is last:
                return
            pos = following


class TypedList:
    """A :class:`List` of objects that each carry a :class:`Link` attribute."""

    def __init__(self, attribute: str) -> None:
        self._attribute = attribute
        self._list = List()

    def __repr__(self) -> str:
        return f"TypedList({self._attribute!r}, {list(self)!r})"

    def _link_of(self, element: Any) -> Link:
        link = getattr(element, self._attribute)
        link.owner = element
        return link

    @staticmethod
    def _owner(link: Link | None) -> Any:
        return None if link is None else link.owner

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def lpush(self, element: Any) -> None:
        self._list.lpush(self._link_of(element))

    def rpush(self, element: Any) -> None:
        self._list.rpush(self._link_of(element))

    def lpop(self) -> Any:
        return self._owner(self._list.lpop())

    def rpop(self) -> Any:
        return self._owner(self._list.rpop())

    def lpoprpush(self) -> None:
        self._list.lpoprpush()

    def remove(self, element: Any) -> bool:
        return self._list.remove(self._link_of(element))

    def lpeek(self) -> Any:
        return self._owner(self._list.lpeek())

    def rpeek(self) -> Any:
        return self._owner(self._list.rpeek())

    def __iter__(self) -> Iterator[Any]:
        for link in self._list:
            yield link.owner