"""Path resolution — splitting paths and walking them for read and write.

A path is a ``:``-delimited string with one segment per nesting level.  There
is no escaping: a key that itself contains ``:`` cannot be addressed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from policy_store.base import Container
from policy_store.exceptions import InvalidPathError, PermissionDeniedError
from policy_store.values import Undefined, ValueKind, classify, is_plain_object

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

SEPARATOR = ":"


def split_path(path: str) -> list[str]:
    """Split *path* into its segments.

    Raises:
        InvalidPathError: If *path* is empty or contains an empty segment.
    """
    if not isinstance(path, str) or not path:
        raise InvalidPathError(str(path), "path must be a non-empty string")
    segments = path.split(SEPARATOR)
    if not all(segments):
        raise InvalidPathError(path, "empty segment")
    return segments


def resolve(container: Container, key: str) -> tuple[Any, bool]:
    """Return ``(value, from_accessor)`` for *key* on *container*.

    Accessors are invoked with no arguments on every call, never cached.
    Permission is not checked here.
    """
    raw = container.lookup(key)
    if classify(raw) is ValueKind.ACCESSOR:
        return raw(), True
    return raw, False


def wrap(container: Container, value: Mapping[str, Any]) -> Container:
    """Convert a plain mapping into a child store owned by *container*."""
    child = container.new_child()
    child.write_entries(value)
    return child


def read_path(root: Container, path: str) -> Any:
    """Walk *path* from *root*, checking read permission at every segment.

    Returns ``Undefined`` as soon as a segment resolves to nothing, or when a
    segment would have to descend into a value that is not a container.
    """
    current: Any = root
    for key in split_path(path):
        if not isinstance(current, Container):
            return Undefined
        if not current.allowed_to_read(key):
            logger.debug("read denied for key %r in path %r", key, path)
            raise PermissionDeniedError(key, "read")
        value, _ = resolve(current, key)
        if value is Undefined:
            return Undefined
        current = value
    return current


def materialize_or_wrap(
    container: Container, key: str, value: Any, from_accessor: bool, path: str
) -> Container:
    """Return a container to descend into for the intermediate segment *key*.

    - nothing stored → a new empty child, stored in the dynamic slot
    - a plain mapping → wrapped into a child, which replaces the mapping
    - a store → returned as is

    A declared accessor is never written over: the replacement for its
    result goes to the dynamic slot instead.  An accessor that is itself a
    dynamic entry shares that slot, so it is replaced.
    """
    kind = classify(value)
    if kind is ValueKind.STORE:
        return value
    if kind is ValueKind.UNDEFINED:
        logger.debug("materializing empty store at %r in path %r", key, path)
        child = container.new_child()
        container.assign(key, child, dynamic=True)
        return child
    if kind is ValueKind.OBJECT:
        logger.debug("wrapping plain object at %r in path %r", key, path)
        child = wrap(container, value)
        container.assign(key, child, dynamic=from_accessor)
        return child
    raise InvalidPathError(path, f"cannot descend into {kind.name.lower()} value at '{key}'")


def write_path(root: Container, path: str, value: Any) -> Any:
    """Store *value* at *path* and return *value* unchanged.

    Intermediate segments require **read** permission: traversing into a
    substructure counts as reading it, so a write-only field cannot be
    descended into.  The last segment requires write permission.
    """
    *parents, last = split_path(path)
    current = root
    for key in parents:
        if not current.allowed_to_read(key):
            logger.debug("traversal denied for key %r in path %r", key, path)
            raise PermissionDeniedError(key, "traverse")
        resolved, from_accessor = resolve(current, key)
        current = materialize_or_wrap(current, key, resolved, from_accessor, path)

    if not current.allowed_to_write(last):
        logger.debug("write denied for key %r in path %r", last, path)
        raise PermissionDeniedError(last, "write")

    to_store = wrap(current, value) if is_plain_object(value) else value
    current.assign(last, to_store)
    return value
