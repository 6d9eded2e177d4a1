# Copyright (c) 2026 policy-store contributors
# SPDX-License-Identifier: Apache-2.0
"""Store factory for creating store instances from configuration.

Uses the Registry pattern to map type strings to store classes,
allowing extensibility without modifying factory code.
"""

from __future__ import annotations

import types
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import ValidationError

from policy_store.exceptions import InvalidPathError, PermissionDeniedError, StoreConfigError
from policy_store.permissions import Permission
from policy_store.store import Store

from .schema import StoreConfigSchema


_DerivedKey = tuple[type[Store], frozenset[tuple[str, Permission]]]


class StoreFactoryError(StoreConfigError):
    """Raised when store creation fails."""


class StoreFactory:
    """Creates store instances from configuration.

    Store types are registered at class level and can be extended via the
    `register` class method.  A configuration that carries its own
    ``permissions`` table gets a dedicated subclass of its type, so field
    overrides stay scoped to that configuration.

    Example:
        factory = StoreFactory()
        configs = [
            StoreConfigSchema(name="settings", entries={"theme": "dark"}),
            StoreConfigSchema(name="vault", permissions={"token": "w"}),
        ]
        stores = factory.create_all(configs)
    """

    _registry: ClassVar[dict[str, type[Store]]] = {
        "store": Store,
    }

    # Subclasses derived for configured permission tables, reused per table
    _derived: ClassVar[dict[_DerivedKey, type[Store]]] = {}

    def __init__(self) -> None:
        self._instances: dict[str, Store] = {}

    @classmethod
    def register(cls, type_name: str, store_class: type[Store]) -> None:
        """Register a custom store type.

        Args:
            type_name: Type string to use in configuration
            store_class: Store subclass to instantiate

        Raises:
            ValueError: If store_class._store_type doesn't match type_name

        Example:
            StoreFactory.register("account", AccountStore)
        """
        declared_type = store_class._store_type
        if declared_type != "store" and declared_type != type_name:
            raise ValueError(
                f"Store {store_class.__name__} has _store_type='{declared_type}' "
                f"but is being registered as '{type_name}'"
            )
        cls._registry[type_name] = store_class

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered store type names."""
        return list(cls._registry.keys())

    @classmethod
    def define(
        cls,
        type_name: str,
        permissions: Mapping[str, Permission | str],
        *,
        base: type[Store] = Store,
        default_policy: Permission | str | None = None,
    ) -> type[Store]:
        """Build a Store subclass carrying *permissions* as its static table.

        The new class is not registered; pass it to `register` to make it
        available by name.
        """
        class_name = "".join(part.capitalize() for part in type_name.split("_")) or "Derived"
        if not class_name.endswith("Store"):
            class_name = f"{class_name}Store"
        kwds: dict[str, Any] = {"permissions": dict(permissions)}
        if default_policy is not None:
            kwds["default_policy"] = default_policy
        return types.new_class(
            class_name,
            (base,),
            kwds,
            lambda ns: ns.update({"_store_type": type_name, "__module__": __name__}),
        )

    def create(self, config: StoreConfigSchema) -> Store:
        """Create a single store from configuration.

        Args:
            config: Store configuration

        Returns:
            Created store instance

        Raises:
            StoreFactoryError: If the type is unknown or the entries are rejected
        """
        store_class = self._registry.get(config.type)
        if not store_class:
            available = ", ".join(sorted(self.registered_types()))
            raise StoreFactoryError(
                f"Unknown store type: '{config.type}'. Available types: {available}"
            )

        if config.permissions:
            store_class = self._derive(store_class, config.type, config.permissions)

        try:
            store = store_class(default_policy=config.default_policy)
            store.write_entries(config.entries)
        except (InvalidPathError, PermissionDeniedError) as e:
            raise StoreFactoryError(
                f"Failed to create store '{config.name or config.type}': {e}"
            ) from e

        if config.name:
            self._instances[config.name] = store
        return store

    @classmethod
    def _derive(
        cls, base: type[Store], type_name: str, permissions: Mapping[str, Permission]
    ) -> type[Store]:
        """Return the subclass of *base* for *permissions*, defining it once."""
        key = (base, frozenset(permissions.items()))
        derived = cls._derived.get(key)
        if derived is None:
            derived = cls.define(type_name, permissions, base=base)
            cls._derived[key] = derived
        return derived

    def create_all(self, configs: list[StoreConfigSchema]) -> dict[str, Store]:
        """Create all stores from a configuration list, keyed by name.

        Raises:
            StoreFactoryError: If a name is missing or used twice
        """
        stores: dict[str, Store] = {}
        for config in configs:
            if not config.name:
                raise StoreFactoryError(f"Store of type '{config.type}' requires a name")
            if config.name in stores:
                raise StoreFactoryError(f"Duplicate store name: '{config.name}'")
            stores[config.name] = self.create(config)
        return stores

    def get_instance(self, name: str) -> Store | None:
        """Get a created store instance by name.

        Args:
            name: Store name

        Returns:
            Store instance or None if not found
        """
        return self._instances.get(name)


def load_store(data: Mapping[str, Any], factory: StoreFactory | None = None) -> Store:
    """Validate a raw mapping as a :class:`StoreConfigSchema` and build the store."""
    try:
        config = StoreConfigSchema.model_validate(data)
    except ValidationError as e:
        raise StoreFactoryError(f"Invalid store configuration: {e}") from e
    return (factory or StoreFactory()).create(config)
