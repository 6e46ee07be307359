"""Status codes with a reserved failure bit, and the exceptions raised for them."""

from __future__ import annotations

import logging

__all__ = [
    "CUB_RESERVED_FAILURE",
    "CUB_SUCCESS",
    "CUB_FATAL_BUG",
    "CUB_FAILURE",
    "CUB_INVALID_U16",
    "CUB_INVALID_U32",
    "CubError",
    "StatusError",
    "is_succ_status",
    "is_fail_status",
    "succ_status",
    "fail_status",
    "check_status",
    "expect",
]

_log = logging.getLogger(__name__)

_U32_MASK = 0xFFFFFFFF

CUB_RESERVED_FAILURE = 0x80000000

CUB_INVALID_U16 = 0xFFFF
CUB_INVALID_U32 = 0xFFFFFFFF


def is_succ_status(status: int) -> bool:
    """Return True when the failure bit of ``status`` is clear."""
    return (status & CUB_RESERVED_FAILURE) == 0


def is_fail_status(status: int) -> bool:
    """Return True when the failure bit of ``status`` is set."""
    return not is_succ_status(status)


def succ_status(status: int) -> int:
    """Build a success status from a plain code, kept to 32 bits."""
    return status & _U32_MASK


def fail_status(status: int) -> int:
    """Build a failure status by setting the reserved failure bit."""
    return (status | CUB_RESERVED_FAILURE) & _U32_MASK


CUB_SUCCESS = succ_status(0)
CUB_FATAL_BUG = fail_status(0x7FFFFFFE)
CUB_FAILURE = fail_status(0x7FFFFFFF)


class CubError(Exception):
    """Base class for errors raised by this package."""


class StatusError(CubError):
    """A call reported a failure status."""

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        text = f"status = [{status:X}]"
        if message:
            text = f"{message}: {text}"
        super().__init__(text)


def check_status(status: int) -> int:
    """Return ``status`` if it is a success; raise StatusError otherwise."""
    if is_fail_status(status):
        _log.error("call failed with status [%X]", status)
        raise StatusError(status)
    return status


def expect(condition: object, message: str) -> None:
    """Raise CubError when ``condition`` is false."""
    if not condition:
        _log.error("assertion failed: %s", message)
        raise CubError(f"assertion failed: {message}")