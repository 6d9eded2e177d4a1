"""Permission model and the per-type field permission registry."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from policy_store.exceptions import StoreConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Permission(str, Enum):
    """Access policy attached to a single field."""

    NONE = "none"
    READ = "r"
    WRITE = "w"
    READ_WRITE = "rw"

    @property
    def can_read(self) -> bool:
        return self in (Permission.READ, Permission.READ_WRITE)

    @property
    def can_write(self) -> bool:
        return self in (Permission.WRITE, Permission.READ_WRITE)

    @classmethod
    def coerce(cls, value: Permission | str) -> Permission:
        """Return *value* as a :class:`Permission`, accepting its string form."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(repr(p.value) for p in cls)
            raise StoreConfigError(
                f"Unknown permission {value!r}. Expected one of: {allowed}"
            ) from None


class PermissionRegistry:
    """Static table mapping ``(store type, field)`` to a declared permission.

    Entries are recorded once, when a store type is defined, and are shared
    by every instance of that type.  Lookups walk the MRO so a subclass sees
    its bases' entries unless it declares its own for the same field.
    """

    def __init__(self) -> None:
        self._table: dict[type, dict[str, Permission]] = {}

    def register(self, store_type: type, field: str, permission: Permission | str) -> None:
        """Record *permission* for *field* on *store_type*.  Last write wins."""
        self._table.setdefault(store_type, {})[field] = Permission.coerce(permission)

    def register_all(self, store_type: type, permissions: Mapping[str, Permission | str]) -> None:
        for field, permission in permissions.items():
            self.register(store_type, field, permission)

    def lookup(self, store_type: type, field: str) -> Permission | None:
        """Return the declared permission for *field*, or ``None`` if undeclared."""
        for klass in store_type.__mro__:
            declared = self._table.get(klass)
            if declared is not None and field in declared:
                return declared[field]
        return None

    def permissions_for(self, store_type: type) -> dict[str, Permission]:
        """Return the merged table visible to *store_type*."""
        merged: dict[str, Permission] = {}
        for klass in reversed(store_type.__mro__):
            merged.update(self._table.get(klass, {}))
        return merged


registry = PermissionRegistry()


def register_permission(store_type: type, field: str, permission: Permission | str) -> None:
    """Declare *permission* for *field* on *store_type* in the shared registry."""
    registry.register(store_type, field, permission)
