"""
Tests for register, update and delegate.

Critical: rejected calls must leave every collection untouched.
"""

import pytest

from commitvault.backend import Collection
from commitvault.core import (
    CallContext,
    EntityConflict,
    InvalidParameters,
    ResourceMissing,
)


def test_register_creates_open_commitment(store, backend, alice):
    assert store.register(alice, "finish report") == "Commitment registered"
    assert backend.get(Collection.VAULT, "alice") == {
        "declaration": "finish report",
        "completed": False,
    }


def test_register_twice_conflicts_without_overwrite(store, backend, alice):
    """Second register must fail and keep the first record."""
    store.register(alice, "first")
    before = backend.snapshot()

    with pytest.raises(EntityConflict):
        store.register(alice, "second")

    assert backend.snapshot() == before
    assert backend.get(Collection.VAULT, "alice")["declaration"] == "first"


def test_register_conflict_wins_over_empty_text(store, alice):
    """Existence is checked before content."""
    store.register(alice, "first")
    with pytest.raises(EntityConflict):
        store.register(alice, "")


@pytest.mark.parametrize("text", ["", "x" * 101, None, 42])
def test_register_rejects_invalid_text(store, backend, alice, text):
    with pytest.raises(InvalidParameters):
        store.register(alice, text)
    assert backend.snapshot()["vault"] == {}


def test_register_length_counts_characters_not_bytes(store, backend, alice):
    text = "é" * 100  # 200 bytes in UTF-8
    store.register(alice, text)
    assert backend.get(Collection.VAULT, "alice")["declaration"] == text


def test_register_accepts_exactly_max_length(store, alice):
    assert store.register(alice, "x" * 100) == "Commitment registered"


def test_update_replaces_record(store, backend, alice):
    store.register(alice, "finish report")
    assert store.update(alice, "finish report v2", True) == "Commitment updated"
    assert backend.get(Collection.VAULT, "alice") == {
        "declaration": "finish report v2",
        "completed": True,
    }


def test_update_can_reopen(store, backend, alice):
    store.register(alice, "a")
    store.update(alice, "a", True)
    store.update(alice, "a", False)
    assert backend.get(Collection.VAULT, "alice")["completed"] is False


def test_update_unregistered_is_missing_and_creates_nothing(store, backend, alice):
    with pytest.raises(ResourceMissing):
        store.update(alice, "text", True)
    assert not backend.exists(Collection.VAULT, "alice")


def test_update_missing_wins_over_invalid_inputs(store, alice):
    with pytest.raises(ResourceMissing):
        store.update(alice, "", None)


def test_update_empty_text_leaves_record(store, backend, alice):
    store.register(alice, "keep me")
    with pytest.raises(InvalidParameters):
        store.update(alice, "", True)
    assert backend.get(Collection.VAULT, "alice") == {"declaration": "keep me", "completed": False}


@pytest.mark.parametrize("flag", [None, 1, "true", 0])
def test_update_rejects_non_bool_completed(store, backend, alice, flag):
    """completed must be a real bool; truthy stand-ins are not coerced."""
    store.register(alice, "keep me")
    with pytest.raises(InvalidParameters):
        store.update(alice, "new text", flag)
    assert backend.get(Collection.VAULT, "alice")["declaration"] == "keep me"


def test_delegate_creates_record_for_other_identity(store, backend, alice):
    assert store.delegate(alice, "bob", "review PR") == "Commitment delegated"
    assert backend.get(Collection.VAULT, "bob") == {"declaration": "review PR", "completed": False}
    assert not backend.exists(Collection.VAULT, "alice")


def test_delegate_to_self_behaves_like_register(store, backend, alice):
    store.delegate(alice, "alice", "self-assigned")
    with pytest.raises(EntityConflict):
        store.register(alice, "again")


def test_delegate_then_register_or_delegate_conflicts(store, alice):
    bob = CallContext(caller="bob", height=500)
    carol = CallContext(caller="carol", height=500)
    store.delegate(alice, "bob", "review PR")

    with pytest.raises(EntityConflict):
        store.register(bob, "my own")
    with pytest.raises(EntityConflict):
        store.delegate(carol, "bob", "another")


def test_delegated_record_is_owned_by_target(store, alice):
    bob = CallContext(caller="bob", height=500)
    store.delegate(alice, "bob", "review PR")

    assert store.update(bob, "review PR", True) == "Commitment updated"
    with pytest.raises(ResourceMissing):
        store.update(alice, "review PR", True)


@pytest.mark.parametrize("target", ["", None, 7])
def test_delegate_rejects_invalid_target(store, backend, alice, target):
    with pytest.raises(InvalidParameters):
        store.delegate(alice, target, "text")
    assert backend.snapshot()["vault"] == {}


def test_delegate_rejects_empty_text(store, backend, alice):
    with pytest.raises(InvalidParameters):
        store.delegate(alice, "bob", "")
    assert not backend.exists(Collection.VAULT, "bob")
