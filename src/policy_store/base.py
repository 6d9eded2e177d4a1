"""Container protocol — the addressable unit of the hierarchy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Container(ABC):
    """Abstract base for every addressable node.

    A container owns a set of named fields and enforces a permission on each
    of them.  Values are addressed with ``:``-delimited paths, one segment per
    nesting level (``"user:profile:email"``).
    """

    @abstractmethod
    def allowed_to_read(self, key: str) -> bool:
        """Return ``True`` if *key* may be read."""
        ...

    @abstractmethod
    def allowed_to_write(self, key: str) -> bool:
        """Return ``True`` if *key* may be written."""
        ...

    @abstractmethod
    def read(self, path: str) -> Any:
        """Return the value at *path*, or ``Undefined`` if nothing is there."""
        ...

    @abstractmethod
    def write(self, path: str, value: Any) -> Any:
        """Store *value* at *path* and return it unchanged."""
        ...

    @abstractmethod
    def write_entries(self, entries: dict[str, Any]) -> None:
        """Write every key of *entries* in iteration order."""
        ...

    @abstractmethod
    def entries(self) -> dict[str, Any]:
        """Return a shallow snapshot of every readable field."""
        ...

    # ── slot access (no permission checks) ───────────────────

    @abstractmethod
    def lookup(self, key: str) -> Any:
        """Return the raw value stored under *key*, or ``Undefined``.

        Accessors are returned uninvoked.
        """
        ...

    @abstractmethod
    def assign(self, key: str, value: Any, *, dynamic: bool = False) -> None:
        """Place *value* under *key*.

        With ``dynamic=True`` the value always goes to the dynamic entries,
        even if a declared field of the same name exists.
        """
        ...

    @abstractmethod
    def new_child(self) -> Container:
        """Return a fresh, empty container to hold a nested object."""
        ...
