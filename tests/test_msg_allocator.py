import pytest

from cubkit.msg_allocator import AutoMsg, MsgAllocator, default_allocator
from cubkit.status import CubError


def test_auto_msg_not_in_stack():
    with AutoMsg(16 * 1024) as msg:
        assert default_allocator.within(msg.block) is True
        assert len(msg.data) == 16 * 1024


def test_auto_msg_with_own_allocator_frees_on_exit():
    allocator = MsgAllocator()
    with AutoMsg(512 * 1024, allocator) as msg:
        assert allocator.within(msg.block) is True
        with pytest.raises(MemoryError):
            allocator.alloc(512 * 1024)
    assert msg.closed is True
    block = allocator.alloc(512 * 1024)
    assert block.capacity == 512 * 1024


def test_auto_msg_data_after_close_raises():
    allocator = MsgAllocator()
    msg = AutoMsg(10, allocator)
    msg.close()
    msg.close()
    assert msg.closed is True
    with pytest.raises(ValueError):
        _ = msg.data
    block = allocator.alloc(32 * 1024)
    assert block.capacity == 32 * 1024


def test_small_request_uses_smallest_pool():
    allocator = MsgAllocator()
    block = allocator.alloc(100)
    assert block.capacity == 32 * 1024
    assert block.size == 100
    assert len(block.data) == 100


def test_full_pool_falls_through_to_next():
    allocator = MsgAllocator()
    blocks = [allocator.alloc(1000) for _ in range(16)]
    assert all(b.capacity == 32 * 1024 for b in blocks)
    assert allocator.alloc(1000).capacity == 64 * 1024


def test_large_request_picks_matching_pool():
    allocator = MsgAllocator()
    assert allocator.alloc(32 * 1024 + 1).capacity == 64 * 1024
    assert allocator.alloc(256 * 1024).capacity == 256 * 1024


def test_too_big_raises_memory_error():
    allocator = MsgAllocator()
    with pytest.raises(MemoryError):
        allocator.alloc(512 * 1024 + 1)


def test_free_makes_block_available_again():
    allocator = MsgAllocator()
    block = allocator.alloc(512 * 1024)
    allocator.free(block)
    again = allocator.alloc(512 * 1024)
    assert again.capacity == 512 * 1024
    assert allocator.within(again) is True


def test_double_free_raises():
    allocator = MsgAllocator()
    block = allocator.alloc(10)
    allocator.free(block)
    with pytest.raises(CubError):
        allocator.free(block)


def test_foreign_block_is_not_within_and_free_ignores_it():
    first = MsgAllocator()
    second = MsgAllocator()
    block = first.alloc(512 * 1024)
    assert second.within(block) is False
    second.free(block)
    with pytest.raises(MemoryError):
        first.alloc(512 * 1024)
    assert second.within("not a block") is False


def test_block_data_is_writable():
    allocator = MsgAllocator()
    block = allocator.alloc(4)
    block.data[:] = b"abcd"
    assert bytes(block.buffer[:4]) == b"abcd"