"""Bit masks and bit field extraction on unbounded integers."""

__all__ = ["bit_mask", "bit_value", "is_bit_on"]


def bit_mask(bit_num: int) -> int:
    """Return a mask with the lowest ``bit_num`` bits set."""
    if bit_num < 0:
        raise ValueError("bit_num must not be negative")
    return (1 << bit_num) - 1


def bit_value(target: int, offset: int, length: int) -> int:
    """Return the ``length`` bits of ``target`` starting at bit ``offset``."""
    if offset < 0:
        raise ValueError("offset must not be negative")
    return (target >> offset) & bit_mask(length)


def is_bit_on(target: int, offset: int) -> bool:
    """Return True when bit ``offset`` of ``target`` is set."""
    return bit_value(target, offset, 1) > 0