# Copyright (c) 2026 policy-store contributors
# SPDX-License-Identifier: Apache-2.0
"""Configuration schemas for building stores from plain data.

These Pydantic models describe a store declaratively so it can be created
from a JSON or YAML document instead of code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from policy_store.permissions import Permission
from policy_store.paths import SEPARATOR


class StoreConfigSchema(BaseModel):
    """Single store configuration.

    Attributes:
        name: Identifier for this store instance
        type: Registered store type (e.g., "store")
        default_policy: Fallback permission; ``None`` keeps the type's default
        permissions: Field overrides, applied to a subclass derived for this config
        entries: Initial JSON object written into the store
    """

    name: str = ""
    type: str = "store"
    default_policy: Permission | None = None
    permissions: dict[str, Permission] = Field(default_factory=dict)
    entries: dict[str, Any] = Field(default_factory=dict)

    @field_validator("permissions")
    @classmethod
    def _check_field_names(cls, value: dict[str, Permission]) -> dict[str, Permission]:
        for field in value:
            if not field or SEPARATOR in field:
                raise ValueError(f"invalid field name {field!r}")
        return value
