"""StoreValue classification.

Every value that enters or leaves a store falls into exactly one
:class:`ValueKind`.  Traversal and storage logic match on the kind instead of
probing the value's shape ad hoc.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from typing import Any

from policy_store.base import Container


class _Undefined:
    """Sentinel for absence.  Distinct from ``None``, which is JSON null."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Undefined"


Undefined = _Undefined()


class ValueKind(Enum):
    UNDEFINED = auto()
    PRIMITIVE = auto()
    OBJECT = auto()
    ARRAY = auto()
    STORE = auto()
    ACCESSOR = auto()


def classify(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*.

    - ``Undefined`` → UNDEFINED
    - a :class:`Container` → STORE
    - any other ``Mapping`` → OBJECT (auto-wrapped before storage)
    - ``list`` / ``tuple`` → ARRAY (stored verbatim)
    - any other callable → ACCESSOR (invoked on every read)
    - everything else (str, int, float, bool, None, ...) → PRIMITIVE
    """
    if value is Undefined:
        return ValueKind.UNDEFINED
    if isinstance(value, Container):
        return ValueKind.STORE
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if callable(value):
        return ValueKind.ACCESSOR
    return ValueKind.PRIMITIVE


def is_plain_object(value: Any) -> bool:
    return classify(value) is ValueKind.OBJECT
