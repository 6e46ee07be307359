"""A fixed-capacity pool of numbered slots handed out first-in, first-out."""

from __future__ import annotations

from collections import deque

from cubkit.status import expect

__all__ = ["ObjectAllocator"]

_MAX_CAPACITY = 0xFFFF


class ObjectAllocator:
    """Hands out slot numbers in ``range(capacity)``; freed slots go to the back of the queue."""

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity <= _MAX_CAPACITY:
            raise ValueError(f"capacity must be between 0 and {_MAX_CAPACITY}")
        self.capacity = capacity
        self._free: deque[int] = deque(range(capacity))
        self._used = [False] * capacity

    def __repr__(self) -> str:
        return f"ObjectAllocator(capacity={self.capacity}, free={len(self._free)})"

    def has_free_slot(self) -> bool:
        """True while at least one slot can be allocated."""
        return bool(self._free)

    def free_slot_num(self) -> int:
        """Number of slots that are currently free."""
        return len(self._free)

    def alloc(self) -> int | None:
        """Take the oldest free slot, or return None when the pool is exhausted."""
        if not self._free:
            return None
        slot = self._free.popleft()
        self._used[slot] = True
        return slot

    def free(self, slot: int | None) -> None:
        """Give ``slot`` back to the pool; None is ignored."""
        if slot is None:
            return
        expect(self.within(slot), f"slot {slot!r} is outside the allocator")
        expect(self._used[slot], f"slot {slot} is already free")
        self._used[slot] = False
        self._free.append(slot)

    def within(self, slot: object) -> bool:
        """True when ``slot`` is a slot number of this allocator."""
        return (
            isinstance(slot, int)
            and not isinstance(slot, bool)
            and 0 <= slot < self.capacity
        )