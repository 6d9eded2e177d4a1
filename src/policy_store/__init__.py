"""policy_store — an in-memory, permission-enforcing hierarchical store.

Every field carries a permission (``none``, ``r``, ``w``, ``rw``).  Values are
addressed with ``:``-delimited paths that walk nested stores, and every
segment is checked before any data is touched.
"""

import logging

from policy_store.base import Container
from policy_store.exceptions import (
    InvalidPathError,
    PermissionDeniedError,
    StoreConfigError,
    StoreError,
)
from policy_store.permissions import Permission, PermissionRegistry, register_permission
from policy_store.store import Store
from policy_store.values import Undefined, ValueKind, classify

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Container",
    "InvalidPathError",
    "Permission",
    "PermissionDeniedError",
    "PermissionRegistry",
    "Store",
    "StoreConfigError",
    "StoreError",
    "Undefined",
    "ValueKind",
    "classify",
    "register_permission",
]
