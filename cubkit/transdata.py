"""A value with transactional semantics: updates are pending until confirmed or reverted."""

from __future__ import annotations

import copy
from enum import IntEnum
from typing import Generic, TypeVar

from cubkit.status import CUB_FAILURE, StatusError

__all__ = ["TransState", "TransData"]

T = TypeVar("T")

_VALID = 0x01
_STABLE = 0x02
_MEMOED = 0x04
_DIFF = 0x08
_COW = 0x10


class TransState(IntEnum):
    """The states of a TransData; each value is a combination of state flags."""

    IDLE = _STABLE
    ACTIVE = _VALID | _STABLE | _COW
    NEW = _VALID
    MODIFIED = _VALID | _MEMOED | _DIFF
    TOUCHED = _VALID | _COW
    SHADOWED = _VALID | _MEMOED
    RELEASED = _MEMOED


class TransData(Generic[T]):
    """Holds a current value and, while a change is pending, the previous one.

    ``update``, ``modify``, ``touch`` and ``release`` start a change;
    ``confirm`` makes it permanent, ``revert`` rolls it back and ``reset``
    drops everything.
    """

    def __init__(self) -> None:
        self._values: list[T | None] = [None, None]
        self._index = 0
        self._state = TransState.IDLE

    def __repr__(self) -> str:
        return f"TransData(state={self._state.name}, value={self.value!r}, old={self.old_value!r})"

    @property
    def state(self) -> TransState:
        return self._state

    @property
    def index(self) -> int:
        """Which of the two slots holds the current value."""
        return self._index

    @property
    def value(self) -> T | None:
        """The current value, or None when no value is present."""
        return self._values[self._index] if self.is_present() else None

    @value.setter
    def value(self, new_value: T) -> None:
        """Replace the current value in place, without changing the state."""
        if not self.is_present():
            raise ValueError("no value is present")
        self._values[self._index] = new_value

    @property
    def old_value(self) -> T | None:
        """The value before the pending change, or None when there is none."""
        return self._values[self._other] if self.is_old_present() else None

    @property
    def _other(self) -> int:
        return 1 - self._index

    def is_stable(self) -> bool:
        return bool(self._state & _STABLE)

    def is_present(self) -> bool:
        return bool(self._state & _VALID)

    def is_old_present(self) -> bool:
        return bool(self._state & _MEMOED)

    def is_new(self) -> bool:
        return self._state is TransState.NEW

    def is_changed(self, restart: bool = False) -> bool:
        """Whether the pending change alters the value.

        With ``restart`` the question is whether any value is present at all.
        """
        if restart:
            return self.is_present()
        if self.is_stable():
            return False
        if self._state & _DIFF:
            return self._values[self._index] != self._values[self._other]
        return True

    def revert(self) -> None:
        """Roll back the pending change."""
        if self.is_stable():
            return
        if self._state in (TransState.NEW, TransState.MODIFIED, TransState.SHADOWED):
            self._free_current()
        if self._state & _MEMOED:
            self._switch()
        self._state = TransState.IDLE if self._state is TransState.NEW else TransState.ACTIVE

    def confirm(self) -> None:
        """Make the pending change permanent."""
        if self.is_stable():
            return
        self._free_old()
        self._state = (
            TransState.IDLE if self._state is TransState.RELEASED else TransState.ACTIVE
        )

    def force_update(self) -> None:
        """Enter the updated state without assigning a new value."""
        self._backup()
        self._prepare_for_update()

    def update(self, value: T) -> None:
        """Set a new pending value."""
        self.force_update()
        self._values[self._index] = value

    def modify(self) -> None:
        """Keep a copy of the active value as the old one so the current can be changed.

        Raises StatusError unless the data is in the ACTIVE state.
        """
        if self._state is not TransState.ACTIVE:
            raise StatusError(CUB_FAILURE, f"cannot modify in {self._state.name} state")
        self._values[self._other] = copy.deepcopy(self._values[self._index])
        self._state = TransState.MODIFIED

    def touch(self) -> None:
        """Mark an active value as changed without changing it."""
        if self._state is TransState.ACTIVE:
            self._state = TransState.TOUCHED

    def release(self) -> None:
        """Drop the value, pending confirmation."""
        if self.is_present() and not self._state & _COW:
            self._free_current()
        self._backup()
        if self._state in (TransState.IDLE, TransState.NEW):
            self._state = TransState.IDLE
        else:
            self._state = TransState.RELEASED

    def reset(self) -> None:
        """Drop both values and return to IDLE."""
        self._free_old()
        self._free_current()
        self._state = TransState.IDLE

    def _free_old(self) -> None:
        if self.is_old_present():
            self._values[self._other] = None

    def _free_current(self) -> None:
        if self.is_present():
            self._values[self._index] = None

    def _backup(self) -> None:
        if self._state & _COW:
            self._switch()

    def _switch(self) -> None:
        self._index = self._other

    def _prepare_for_update(self) -> None:
        transitions = {
            TransState.IDLE: TransState.NEW,
            TransState.RELEASED: TransState.SHADOWED,
            TransState.ACTIVE: TransState.MODIFIED,
            TransState.TOUCHED: TransState.SHADOWED,
        }
        self._state = transitions.get(self._state, self._state)