"""Custom exceptions for the policy_store package."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all store-related errors."""


class PermissionDeniedError(StoreError):
    """Raised when a read or write touches a field its permission forbids."""

    def __init__(self, field: str, operation: str) -> None:
        self.field = field
        self.operation = operation
        super().__init__(f"{operation.capitalize()} access denied for key: {field}")


class InvalidPathError(StoreError):
    """Raised when a path cannot be split or traversed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class StoreConfigError(StoreError):
    """Raised when a permission or store configuration is malformed."""
