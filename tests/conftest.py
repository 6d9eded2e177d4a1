"""Shared test fixtures."""

import itertools

import pytest

from policy_store import Store


class ProfileStore(Store, permissions={"secret": "none", "token": "w", "id": "r"}):
    """A store with declared fields and a mix of field permissions."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        counter = itertools.count(1)
        self.declare("id", "user-1")
        self.declare("name", "Alice")
        self.declare("secret", "hunter2")
        self.declare("token", "t0k3n")
        self.declare("tags", ["admin", "ops"])
        self.declare("now", lambda: next(counter))


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def profile():
    return ProfileStore()
