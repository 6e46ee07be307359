"""Singletons, and roles that objects play either directly or through a member."""

from __future__ import annotations

import threading
from typing import Any, TypeVar

from cubkit.ring import RingElem

__all__ = ["Singleton", "Role", "ListBasedRole", "as_role"]

S = TypeVar("S", bound="Singleton")
R = TypeVar("R")

_instances: dict[type, Any] = {}
_instances_lock = threading.RLock()


class Singleton:
    """Base class whose subclasses each have one shared instance from ``get_instance``."""

    @classmethod
    def get_instance(cls: type[S]) -> S:
        """Return the single instance of this exact class, creating it once."""
        with _instances_lock:
            instance = _instances.get(cls)
            if instance is None:
                instance = cls()
                _instances[cls] = instance
            return instance

    def __copy__(self) -> Any:
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")

    def __deepcopy__(self, memo: dict) -> Any:
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")


class Role:
    """Base class for roles.

    An object plays a role by inheriting it, or by returning an object that
    plays it from ``provide_role``.
    """

    def role(self, role_type: type[R]) -> R:
        """Return the object playing ``role_type`` for this one."""
        return as_role(self, role_type)

    def provide_role(self, role_type: type) -> Any:
        """Hook for roles played by a member; return None when not provided."""
        return None


class ListBasedRole(Role, RingElem):
    """A role whose players can be linked into a Ring."""

    def __init__(self) -> None:
        RingElem.__init__(self)


def as_role(obj: Any, role: type[R]) -> R:
    """Return the object that plays ``role`` for ``obj``; raise TypeError if none does."""
    if isinstance(obj, role):
        return obj
    if isinstance(obj, Role):
        provided = obj.provide_role(role)
        if provided is not None:
            if not isinstance(provided, role):
                raise TypeError(
                    f"{type(obj).__name__} provided {type(provided).__name__} "
                    f"for role {role.__name__}"
                )
            return provided
    raise TypeError(f"{type(obj).__name__} does not play role {role.__name__}")