"""Tests for StoreValue classification."""

import pickle

import pytest

from policy_store import Store, Undefined, ValueKind, classify


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (Undefined, ValueKind.UNDEFINED),
        (None, ValueKind.PRIMITIVE),
        ("text", ValueKind.PRIMITIVE),
        (42, ValueKind.PRIMITIVE),
        (1.5, ValueKind.PRIMITIVE),
        (False, ValueKind.PRIMITIVE),
        ({"a": 1}, ValueKind.OBJECT),
        ([1, 2], ValueKind.ARRAY),
        ((1, 2), ValueKind.ARRAY),
        (lambda: 1, ValueKind.ACCESSOR),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_store_is_not_an_object():
    assert classify(Store()) is ValueKind.STORE


def test_undefined_is_falsy_singleton():
    assert not Undefined
    assert Undefined is not None
    assert repr(Undefined) == "Undefined"
    assert type(Undefined)() is Undefined


def test_undefined_survives_pickle():
    assert pickle.loads(pickle.dumps(Undefined)) is Undefined
