"""Allocation of indexes into a caller's sequence, tracked on free and busy rings."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from cubkit.ring import Ring, RingElem
from cubkit.status import CUB_FAILURE, StatusError, expect

__all__ = ["LinkedAllocator"]


class _LinkNode(RingElem):
    def __init__(self, index: int) -> None:
        super().__init__()
        self.index = index
        self.is_used = False


class LinkedAllocator:
    """Hands out indexes of ``elements``, at most ``max_size`` of them at a time."""

    def __init__(self, elements: Sequence[Any], max_size: int) -> None:
        self._elements = elements
        self.max_size = max(0, min(len(elements), max_size))
        self._nodes = [_LinkNode(index) for index in range(self.max_size)]
        self._free: Ring[_LinkNode] = Ring()
        self._busy: Ring[_LinkNode] = Ring()
        for node in self._nodes:
            self._free.push_back(node)

    @property
    def elements(self) -> Sequence[Any]:
        """The sequence whose indexes are allocated."""
        return self._elements

    def alloc(self) -> int | None:
        """Take the oldest free index, or return None when all are in use."""
        if self._free.is_empty():
            return None
        node = self._free.pop_front()
        self._busy.push_back(node)
        node.is_used = True
        return node.index

    def dealloc(self, index: int) -> None:
        """Return ``index`` to the free ring; raise StatusError if it is not in use."""
        expect(0 <= index < self.max_size, f"index {index} < max size {self.max_size}")
        node = self._nodes[index]
        if not node.is_used:
            raise StatusError(CUB_FAILURE, f"index {index} is not allocated")
        self._busy.remove(node)
        self._free.push_back(node)
        node.is_used = False

    def is_busy_list_empty(self) -> bool:
        return self._busy.is_empty()

    def is_free_list_empty(self) -> bool:
        return self._free.is_empty()

    def visit_all_busy_elems(self, visitor: Callable[[Any], object]) -> None:
        """Call ``visitor`` on each allocated element in allocation order.

        An exception raised by the visitor stops the walk and propagates.
        """
        for node in self._busy:
            visitor(self._elements[node.index])