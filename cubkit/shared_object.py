"""Reference-counted objects released when the last reference goes."""

from __future__ import annotations

from cubkit.status import CubError

__all__ = ["SharedObject"]


class SharedObject:
    """Counts references; when the count reaches zero it is released or destroyed.

    Subclasses that return True from ``need_destroy`` have ``destroy`` called
    instead of being marked released.
    """

    def __init__(self) -> None:
        self._count = 0
        self._released = False

    @property
    def ref_count(self) -> int:
        return self._count

    @property
    def released(self) -> bool:
        """True once the object has been let go by its last reference."""
        return self._released

    def _ensure_alive(self) -> None:
        if self._released:
            raise CubError("shared object is already released")

    def add_ref(self) -> None:
        self._ensure_alive()
        self._count += 1

    def sub_ref(self) -> None:
        """Drop one reference; at zero, destroy or release the object."""
        self._ensure_alive()
        if self._count > 0:
            self._count -= 1
        if self._count == 0:
            if self.need_destroy():
                self.destroy()
            else:
                self._released = True

    def only_this_ref(self) -> bool:
        return self._count == 1

    def need_destroy(self) -> bool:
        """Whether ``destroy`` handles the last release."""
        return False

    def destroy(self) -> None:
        """Tear the object down; by default it is marked released."""
        self._count = 0
        self._released = True