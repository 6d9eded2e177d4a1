"""Store — the permission-enforcing, path-addressable container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from policy_store.base import Container
from policy_store.exceptions import InvalidPathError
from policy_store.paths import SEPARATOR, read_path, wrap, write_path
from policy_store.permissions import Permission, registry
from policy_store.values import Undefined, ValueKind, classify, is_plain_object

if TYPE_CHECKING:
    from collections.abc import Mapping


class Store(Container):
    """In-memory hierarchical key/value store with per-field permissions.

    A store holds two kinds of slots:

    * **declared fields** — fixed at construction, either through the
      ``fields`` argument or by calling :meth:`declare` from a subclass
      ``__init__``.  A declared field may hold a primitive, a list, a child
      store, or an *accessor* (a zero-argument callable invoked on every read).
    * **dynamic entries** — an open mapping populated by writes to keys that
      are not declared.

    Every field's effective permission is the one declared for it on the
    store's type, falling back to ``default_policy``.  Permissions are
    declared once per type with a static table::

        class Account(Store, permissions={"password": "w", "id": "r"}):
            pass

    or with :func:`policy_store.permissions.register_permission`.

    Parameters:
        entries:        Initial JSON object, bulk-written after construction.
        default_policy: Fallback permission for undeclared fields.  Defaults
                        to the class attribute (``"rw"`` unless overridden).
        fields:         Declared fields and their initial values.
    """

    _store_type: ClassVar[str] = "store"

    default_policy: Permission = Permission.READ_WRITE

    def __init_subclass__(
        cls,
        *,
        permissions: Mapping[str, Permission | str] | None = None,
        default_policy: Permission | str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if default_policy is not None:
            cls.default_policy = Permission.coerce(default_policy)
        if permissions:
            registry.register_all(cls, permissions)

    def __init__(
        self,
        entries: Mapping[str, Any] | None = None,
        *,
        default_policy: Permission | str | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        self._fields: dict[str, Any] = {}
        self._data: dict[str, Any] = {}
        if default_policy is not None:
            self.default_policy = Permission.coerce(default_policy)
        for name, value in (fields or {}).items():
            self.declare(name, value)
        if entries:
            self.write_entries(entries)

    # ── permissions ──────────────────────────────────────────

    def permission_for(self, key: str) -> Permission:
        """Return the effective permission for *key* on this store."""
        declared = registry.lookup(type(self), key)
        if declared is not None:
            return declared
        return Permission.coerce(self.default_policy)

    def allowed_to_read(self, key: str) -> bool:
        return self.permission_for(key).can_read

    def allowed_to_write(self, key: str) -> bool:
        return self.permission_for(key).can_write

    # ── declared fields ──────────────────────────────────────

    def declare(self, name: str, value: Any = Undefined) -> None:
        """Declare a field on this instance.

        Plain mappings are wrapped into a child store.  Declaring a name that
        already has a dynamic entry moves it out of the dynamic entries.
        """
        if not name or SEPARATOR in name:
            raise InvalidPathError(name, "field names must be non-empty and contain no separator")
        if is_plain_object(value):
            value = wrap(self, value)
        self._data.pop(name, None)
        self._fields[name] = value

    # ── public operations ────────────────────────────────────

    def read(self, path: str) -> Any:
        return read_path(self, path)

    def write(self, path: str, value: Any) -> Any:
        return write_path(self, path, value)

    def write_entries(self, entries: Mapping[str, Any]) -> None:
        """Write every pair of *entries* in iteration order.

        Not transactional: the first failure aborts the remaining keys and
        leaves the ones already written in place.
        """
        for key, value in entries.items():
            to_write = wrap(self, value) if is_plain_object(value) else value
            self.write(key, to_write)

    def entries(self) -> dict[str, Any]:
        """Return a shallow snapshot of readable fields.

        Declared accessors are left out, they are not invoked.  Dynamic
        entries are included whatever they hold.  Child stores are included
        as they are; they are not flattened.
        """
        snapshot: dict[str, Any] = {}
        for key, value in self._fields.items():
            if classify(value) in (ValueKind.ACCESSOR, ValueKind.UNDEFINED):
                continue
            if self.allowed_to_read(key):
                snapshot[key] = value
        for key, value in self._data.items():
            if self.allowed_to_read(key):
                snapshot[key] = value
        return snapshot

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable description of this store's policy."""
        return {
            "type": self._store_type,
            "default_policy": Permission.coerce(self.default_policy).value,
            "permissions": {
                field: permission.value
                for field, permission in registry.permissions_for(type(self)).items()
            },
        }

    # ── slot access ──────────────────────────────────────────

    def lookup(self, key: str) -> Any:
        value = self._fields.get(key, Undefined)
        if value is Undefined:
            value = self._data.get(key, Undefined)
        return value

    def assign(self, key: str, value: Any, *, dynamic: bool = False) -> None:
        if not dynamic and key in self._fields:
            self._fields[key] = value
            self._data.pop(key, None)
        elif value is Undefined:
            self._data.pop(key, None)
        else:
            self._data[key] = value

    def new_child(self) -> Store:
        return Store()

    # ── dunder ───────────────────────────────────────────────

    def __contains__(self, key: object) -> bool:
        return self.lookup(key) is not Undefined if isinstance(key, str) else False

    def __repr__(self) -> str:
        keys = list(dict.fromkeys([*self._fields, *self._data]))
        return (
            f"{type(self).__name__}(default_policy="
            f"{Permission.coerce(self.default_policy).value!r}, keys={keys!r})"
        )
