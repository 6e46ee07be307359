# cubkit

A library of small, self-contained building blocks. It has no dependencies
outside the standard library.

## Modules

- `cubkit.status`: 32-bit status words with a reserved failure bit.
  `succ_status`, `fail_status`, `is_succ_status` and `is_fail_status` build and
  test them. The constants include `CUB_SUCCESS`, `CUB_FAILURE`,
  `CUB_FATAL_BUG`, `CUB_INVALID_U16` and `CUB_INVALID_U32`. `check_status`
  returns a success status and raises `StatusError` for a failure.
  `expect(condition, message)` raises `CubError` when the condition is false.
  `StatusError` is a subclass of `CubError` and keeps the code in `.status`.
- `cubkit.bits`: `bit_mask(n)`, `bit_value(target, offset, length)` and
  `is_bit_on(target, offset)` work on Python integers of any size.
- `cubkit.search`: `binary_search(seq, value)` returns the index of the first
  matching item in a sorted sequence, or `None`. `between(value, low, high)`
  clamps a value into a range, and `is_between` tests whether it already lies in it.
- `cubkit.ringnumber`: `RingNumber(value, max_value)` is a counter modulo
  `max_value`. `>>` and `<<` return the value moved forward or backward. `>>=`
  and `<<=` move the counter in place. `increment()` and `decrement()` step it
  by one. `a - b` gives the forward distance from `b` to `a`.
- `cubkit.ring`: `Ring` and `RingElem` form an intrusive circular doubly
  linked list, where elements carry their own links and sit in one ring at a
  time. It offers `push_back`, `push_front`, `pop_front`, `pop_back`, `remove`,
  `insert_before`, `insert_after`, `concat`, `prepend`, `first`, `last`,
  `next_of`, `prev_of`, `is_empty`, `len()` and forward and reversed iteration.
  Iteration lets you remove the current element.
- `cubkit.object_allocator`: `ObjectAllocator(capacity)` hands out slot
  numbers. It reuses freed slots first-in, first-out. `alloc()` returns `None`
  when the pool is exhausted. Freeing a slot that is out of range or already
  free raises `CubError`.
- `cubkit.linked_allocator`: `LinkedAllocator(elements, max_size)` hands out
  indexes into a sequence. It tracks them on free and busy rings.
  `dealloc(index)` raises `StatusError` for an index that is not allocated.
  `visit_all_busy_elems(visitor)` calls the visitor on each allocated element
  in the order they were allocated.
- `cubkit.msg_allocator`: `MsgAllocator` serves `MsgBlock` buffers from pools
  of 32K (16 blocks), 64K (8), 128K (4), 256K (2) and 512K (1) bytes. A
  request takes the smallest pool that has room, and `MemoryError` is raised
  when none has. `AutoMsg(size, allocator=None)` holds a block and frees it on
  `close()` or when its `with` block ends. Without an allocator it uses the
  shared `default_allocator`.
- `cubkit.shared_object`: `SharedObject` counts references with `add_ref` and
  `sub_ref`. When the count drops to zero the object is marked `released`, or
  `destroy()` is called if `need_destroy()` returns True.
- `cubkit.transdata`: `TransData` holds a value whose changes stay pending
  until confirmed. `update`, `force_update`, `modify`, `touch` and `release`
  start a change. `confirm`, `revert` and `reset` end it. `state` reports a
  `TransState`. `modify()` deep-copies the active value and raises
  `StatusError` outside the ACTIVE state.
- `cubkit.executor`: `Executor(thread_num)` is a fixed pool of worker threads.
  `execute(func, *args, **kwargs)` returns a `concurrent.futures.Future`.
  `shutdown()`, or leaving a `with` block, runs the queued tasks to the end
  and then joins the workers.
- `cubkit.patterns`: `Singleton.get_instance()` returns one shared instance per
  subclass. `Role` and `ListBasedRole` are the role base classes.
  `as_role(obj, role)` returns the object that plays a role. That is either
  `obj` itself or what its `provide_role` hook returns, and `TypeError` is
  raised when neither plays it.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

```python
from cubkit.bits import bit_value, is_bit_on
from cubkit.ringnumber import RingNumber
from cubkit.executor import Executor

assert bit_value(0xAA, 3, 3) == 0x5
assert not is_bit_on(0xAA, 2)

assert RingNumber(1, 10) == RingNumber(11, 10)

with Executor(2) as executor:
    assert executor.execute(sum, [1, 2, 3]).result() == 6
```

```python
from cubkit.transdata import TransData

data = TransData()
data.update(10)
data.confirm()
data.update(20)
data.revert()          # back to the confirmed value
assert data.value == 10
```

```python
from cubkit.msg_allocator import AutoMsg

with AutoMsg(16 * 1024) as msg:
    msg.data[0] = 0xFF
```

## What it does not do

This is a library only. It provides no command-line tool. Message blocks are
ordinary `bytearray` objects held in memory and are not shared between
processes.

## Tests

```
pytest
```