"""Searching sorted sequences and clamping values to a range."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from typing import Any

__all__ = ["binary_search", "between", "is_between"]


def binary_search(seq: Sequence[Any], value: Any) -> int | None:
    """Return the index of the first item equal to ``value`` in sorted ``seq``, or None."""
    index = bisect.bisect_left(seq, value)
    if index != len(seq) and seq[index] == value:
        return index
    return None


def between(value: Any, low: Any, high: Any) -> Any:
    """Clamp ``value`` into the closed range [low, high]."""
    return max(low, min(value, high))


def is_between(value: Any, low: Any, high: Any) -> bool:
    """Return True when ``low <= value <= high``."""
    return low <= value <= high