"""Integers that wrap around a fixed modulus."""

from __future__ import annotations

__all__ = ["RingNumber"]


class RingNumber:
    """A counter in the range [0, max_value) that wraps in both directions."""

    __hash__ = None  # mutable

    def __init__(self, value: int, max_value: int) -> None:
        if max_value <= 0:
            raise ValueError("max_value must be positive")
        self.max_value = max_value
        self.value = value % max_value

    def __repr__(self) -> str:
        return f"RingNumber({self.value}, {self.max_value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingNumber):
            return NotImplemented
        return self.value == other.value and self.max_value == other.max_value

    def __rshift__(self, offset: int) -> int:
        """Value moved forward by ``offset``, wrapped."""
        return (self.value + offset) % self.max_value

    def __lshift__(self, offset: int) -> int:
        """Value moved backward by ``offset``, wrapped."""
        return (self.value - offset) % self.max_value

    def __irshift__(self, offset: int) -> RingNumber:
        self.value = self >> offset
        return self

    def __ilshift__(self, offset: int) -> RingNumber:
        self.value = self << offset
        return self

    def __sub__(self, other: RingNumber) -> int:
        """Forward distance from ``other`` to this number."""
        if not isinstance(other, RingNumber):
            return NotImplemented
        return self << other.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def increment(self) -> RingNumber:
        """Step forward by one and return self."""
        self >>= 1
        return self

    def decrement(self) -> RingNumber:
        """Step backward by one and return self."""
        self <<= 1
        return self