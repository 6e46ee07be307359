"""Message buffers drawn from fixed pools of power-of-two sized blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import TracebackType

from cubkit.object_allocator import ObjectAllocator
from cubkit.status import CubError

__all__ = ["MsgBlock", "MsgAllocator", "AutoMsg", "default_allocator"]

_log = logging.getLogger(__name__)

_K = 1024
_POOL_LAYOUT = (
    (32 * _K, 16),
    (64 * _K, 8),
    (128 * _K, 4),
    (256 * _K, 2),
    (512 * _K, 1),
)


@dataclass(eq=False)
class MsgBlock:
    """A block handed out by a MsgAllocator."""

    size: int
    capacity: int
    slot: int
    buffer: bytearray = field(repr=False)
    _pool: _BlockPool = field(repr=False)

    @property
    def data(self) -> memoryview:
        """The first ``size`` bytes of the block."""
        return memoryview(self.buffer)[: self.size]


class _BlockPool:
    def __init__(self, block_size: int, block_num: int) -> None:
        self.block_size = block_size
        self._slots = ObjectAllocator(block_num)
        self._buffers: dict[int, bytearray] = {}
        self._live: dict[int, MsgBlock] = {}

    def try_alloc(self, size: int) -> bool:
        return size <= self.block_size and self._slots.has_free_slot()

    def alloc(self, size: int) -> MsgBlock:
        slot = self._slots.alloc()
        assert slot is not None
        buffer = self._buffers.get(slot)
        if buffer is None:
            buffer = self._buffers[slot] = bytearray(self.block_size)
        block = MsgBlock(size, self.block_size, slot, buffer, self)
        self._live[slot] = block
        return block

    def owns(self, block: MsgBlock) -> bool:
        return block._pool is self

    def free(self, block: MsgBlock) -> None:
        if self._live.get(block.slot) is not block:
            raise CubError("message block is already freed")
        del self._live[block.slot]
        self._slots.free(block.slot)


class MsgAllocator:
    """Allocates message blocks from pools of 32K to 512K bytes."""

    def __init__(self) -> None:
        self._pools = [_BlockPool(size, num) for size, num in _POOL_LAYOUT]

    def alloc(self, size: int) -> MsgBlock:
        """Take a block of at least ``size`` bytes from the smallest pool with room.

        Raises MemoryError when no pool can serve the request.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        for pool in self._pools:
            if pool.try_alloc(size):
                return pool.alloc(size)
        _log.debug("The specified size is too big for allocator, size = %d!", size)
        raise MemoryError(f"no message block available for size {size}")

    def free(self, block: MsgBlock) -> None:
        """Return ``block`` to its pool; blocks of other allocators are ignored."""
        for pool in self._pools:
            if isinstance(block, MsgBlock) and pool.owns(block):
                pool.free(block)
                return
        _log.debug("The freed block (%r) is not in any MsgAllocator!", block)

    def within(self, block: object) -> bool:
        """True when ``block`` was handed out by this allocator."""
        return isinstance(block, MsgBlock) and any(pool.owns(block) for pool in self._pools)


default_allocator = MsgAllocator()


class AutoMsg:
    """A message block that is freed when the context ends or on ``close``."""

    def __init__(self, size: int, allocator: MsgAllocator | None = None) -> None:
        self._allocator = allocator if allocator is not None else default_allocator
        self.block: MsgBlock | None = self._allocator.alloc(size)

    @property
    def data(self) -> memoryview:
        """The message bytes; raises ValueError once closed."""
        if self.block is None:
            raise ValueError("message is closed")
        return self.block.data

    @property
    def closed(self) -> bool:
        return self.block is None

    def close(self) -> None:
        """Free the block; further calls do nothing."""
        if self.block is not None:
            self._allocator.free(self.block)
            self.block = None

    def __enter__(self) -> AutoMsg:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()