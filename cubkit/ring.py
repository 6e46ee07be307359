"""Intrusive doubly linked rings whose elements carry their own links."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

__all__ = ["RingElem", "Ring"]

E = TypeVar("E", bound="RingElem")


class RingElem:
    """Base class for objects that can be linked into one Ring at a time."""

    _ring_next: RingElem | None = None
    _ring_prev: RingElem | None = None
    _ring_owner: Ring | None = None

    def __init__(self) -> None:
        self._ring_next = None
        self._ring_prev = None
        self._ring_owner = None

    @property
    def in_ring(self) -> bool:
        """True while the element is linked into a ring."""
        return self._ring_owner is not None

    def remove(self) -> None:
        """Unlink this element from the ring it is in."""
        if self._ring_owner is None:
            raise ValueError("element is not in a ring")
        prev, nxt = self._ring_prev, self._ring_next
        prev._ring_next = nxt
        nxt._ring_prev = prev
        self._ring_next = None
        self._ring_prev = None
        self._ring_owner = None


class _Sentinel(RingElem):
    """The head of a ring; never handed out as an element."""


class Ring(Generic[E]):
    """A circular doubly linked list of RingElem objects."""

    def __init__(self) -> None:
        self._head = _Sentinel()
        self._reset_head()

    def _reset_head(self) -> None:
        self._head._ring_next = self._head
        self._head._ring_prev = self._head

    def _check_free(self, elem: RingElem) -> None:
        if not isinstance(elem, RingElem) or isinstance(elem, _Sentinel):
            raise TypeError("ring elements must be RingElem instances")
        if elem._ring_owner is not None:
            raise ValueError("element is already in a ring")

    def _check_member(self, elem: RingElem) -> None:
        if elem._ring_owner is not self:
            raise ValueError("element is not in this ring")

    def _link_after(self, anchor: RingElem, elem: RingElem) -> None:
        nxt = anchor._ring_next
        elem._ring_prev = anchor
        elem._ring_next = nxt
        nxt._ring_prev = elem
        anchor._ring_next = elem
        elem._ring_owner = self

    def _wrap(self, elem: RingElem) -> E | None:
        return None if elem is self._head else elem  # type: ignore[return-value]

    def push_back(self, elem: E) -> None:
        """Append ``elem`` after the last element."""
        self._check_free(elem)
        self._link_after(self._head._ring_prev, elem)

    def push_front(self, elem: E) -> None:
        """Insert ``elem`` before the first element."""
        self._check_free(elem)
        self._link_after(self._head, elem)

    def pop_front(self) -> E:
        """Remove and return the first element."""
        if self.is_empty():
            raise IndexError("pop from an empty ring")
        elem = self._head._ring_next
        elem.remove()
        return elem  # type: ignore[return-value]

    def pop_back(self) -> E:
        """Remove and return the last element."""
        if self.is_empty():
            raise IndexError("pop from an empty ring")
        elem = self._head._ring_prev
        elem.remove()
        return elem  # type: ignore[return-value]

    def remove(self, elem: E) -> None:
        """Unlink ``elem``, which must belong to this ring."""
        self._check_member(elem)
        elem.remove()

    def insert_before(self, anchor: E, elem: E) -> None:
        """Insert ``elem`` just before ``anchor``."""
        self._check_member(anchor)
        self._check_free(elem)
        self._link_after(anchor._ring_prev, elem)

    def insert_after(self, anchor: E, elem: E) -> None:
        """Insert ``elem`` just after ``anchor``."""
        self._check_member(anchor)
        self._check_free(elem)
        self._link_after(anchor, elem)

    def _take_all(self, other: Ring[E]) -> tuple[RingElem, RingElem] | None:
        if other is self:
            raise ValueError("cannot join a ring with itself")
        if other.is_empty():
            return None
        first, last = other._head._ring_next, other._head._ring_prev
        for elem in other:
            elem._ring_owner = self
        other._reset_head()
        return first, last

    def _splice_after(self, anchor: RingElem, first: RingElem, last: RingElem) -> None:
        nxt = anchor._ring_next
        first._ring_prev = anchor
        last._ring_next = nxt
        nxt._ring_prev = last
        anchor._ring_next = first

    def concat(self, other: Ring[E]) -> None:
        """Move all of ``other`` onto the end of this ring, leaving it empty."""
        span = self._take_all(other)
        if span is not None:
            self._splice_after(self._head._ring_prev, *span)

    def prepend(self, other: Ring[E]) -> None:
        """Move all of ``other`` onto the front of this ring, leaving it empty."""
        span = self._take_all(other)
        if span is not None:
            self._splice_after(self._head, *span)

    def first(self) -> E | None:
        """The first element, or None when empty."""
        return self._wrap(self._head._ring_next)

    def last(self) -> E | None:
        """The last element, or None when empty."""
        return self._wrap(self._head._ring_prev)

    def next_of(self, elem: E) -> E | None:
        """The element after ``elem``, or None at the end."""
        self._check_member(elem)
        return self._wrap(elem._ring_next)

    def prev_of(self, elem: E) -> E | None:
        """The element before ``elem``, or None at the start."""
        self._check_member(elem)
        return self._wrap(elem._ring_prev)

    def is_empty(self) -> bool:
        return self._head._ring_next is self._head

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, elem: object) -> bool:
        return isinstance(elem, RingElem) and elem._ring_owner is self

    def __iter__(self) -> Iterator[E]:
        """Iterate front to back; the current element may be removed."""
        node = self._head._ring_next
        while node is not self._head:
            nxt = node._ring_next
            yield node  # type: ignore[misc]
            node = nxt

    def __reversed__(self) -> Iterator[E]:
        """Iterate back to front; the current element may be removed."""
        node = self._head._ring_prev
        while node is not self._head:
            prv = node._ring_prev
            yield node  # type: ignore[misc]
            node = prv