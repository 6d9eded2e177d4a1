# Copyright (c) 2026 policy-store contributors
# SPDX-License-Identifier: Apache-2.0
"""Declarative store configuration.

Exports:
    StoreConfigSchema: Pydantic model describing one store
    StoreFactory: Creates store instances from configuration
    load_store: Validate a raw mapping and build the store
"""

from .factory import StoreFactory, StoreFactoryError, load_store
from .schema import StoreConfigSchema

__all__ = [
    "StoreConfigSchema",
    "StoreFactory",
    "StoreFactoryError",
    "load_store",
]
