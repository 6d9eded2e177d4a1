"""Tests for Permission and PermissionRegistry."""

import pytest

from policy_store import Permission, PermissionRegistry, Store, StoreConfigError
from policy_store.permissions import register_permission, registry


def test_permission_values():
    assert [p.value for p in Permission] == ["none", "r", "w", "rw"]


@pytest.mark.parametrize(
    ("permission", "can_read", "can_write"),
    [
        (Permission.NONE, False, False),
        (Permission.READ, True, False),
        (Permission.WRITE, False, True),
        (Permission.READ_WRITE, True, True),
    ],
)
def test_permission_capabilities(permission, can_read, can_write):
    assert permission.can_read is can_read
    assert permission.can_write is can_write


def test_coerce_accepts_strings_and_members():
    assert Permission.coerce("r") is Permission.READ
    assert Permission.coerce(Permission.WRITE) is Permission.WRITE


def test_coerce_rejects_unknown():
    with pytest.raises(StoreConfigError) as exc_info:
        Permission.coerce("read")
    assert "'read'" in str(exc_info.value)


# ── registry ─────────────────────────────────────────────────


class _Base:
    pass


class _Child(_Base):
    pass


def test_lookup_undeclared_returns_none():
    reg = PermissionRegistry()
    assert reg.lookup(_Base, "anything") is None


def test_register_last_write_wins():
    reg = PermissionRegistry()
    reg.register(_Base, "f", "r")
    reg.register(_Base, "f", Permission.NONE)
    assert reg.lookup(_Base, "f") is Permission.NONE


def test_lookup_is_type_scoped():
    reg = PermissionRegistry()
    reg.register(_Child, "f", "none")
    assert reg.lookup(_Child, "f") is Permission.NONE
    assert reg.lookup(_Base, "f") is None


def test_subclass_inherits_and_overrides():
    reg = PermissionRegistry()
    reg.register_all(_Base, {"a": "r", "b": "w"})
    reg.register(_Child, "b", "rw")
    assert reg.lookup(_Child, "a") is Permission.READ
    assert reg.lookup(_Child, "b") is Permission.READ_WRITE
    assert reg.permissions_for(_Child) == {"a": Permission.READ, "b": Permission.READ_WRITE}


def test_register_rejects_bad_permission():
    reg = PermissionRegistry()
    with pytest.raises(StoreConfigError):
        reg.register(_Base, "f", "x")


# ── effective permission on stores ───────────────────────────


def test_default_policy_allows_everything(store):
    for key in ("a", "b", "anything"):
        assert store.allowed_to_read(key)
        assert store.allowed_to_write(key)


def test_none_overrides_default_policy():
    class Locked(Store):
        pass

    register_permission(Locked, "f", "none")
    s = Locked()
    assert not s.allowed_to_read("f")
    assert not s.allowed_to_write("f")
    assert s.allowed_to_read("g")


def test_class_keyword_table_registers_once():
    class Vault(Store, permissions={"key": "w"}):
        pass

    assert registry.lookup(Vault, "key") is Permission.WRITE
    assert registry.lookup(Store, "key") is None


def test_instance_default_policy():
    s = Store(default_policy="r")
    assert s.permission_for("x") is Permission.READ
    assert s.allowed_to_read("x")
    assert not s.allowed_to_write("x")


def test_class_default_policy_keyword():
    class ReadOnly(Store, default_policy="r", permissions={"inbox": "rw"}):
        pass

    s = ReadOnly()
    assert not s.allowed_to_write("x")
    assert s.allowed_to_write("inbox")


def test_explicit_override_beats_instance_default(profile):
    profile.default_policy = Permission.READ_WRITE
    assert profile.permission_for("secret") is Permission.NONE
    assert profile.permission_for("token") is Permission.WRITE
    assert profile.permission_for("id") is Permission.READ
    assert profile.permission_for("name") is Permission.READ_WRITE
