"""
Tests for deadline and priority satellite records.
"""

import pytest

from commitvault.backend import Collection
from commitvault.core import CallContext, InvalidParameters, ResourceMissing


def test_deadline_is_height_plus_duration(store, backend, alice):
    """register("A") then set_deadline(100) at height 500 -> deadline 600."""
    store.register(alice, "A")
    assert store.set_deadline(alice, 100) == "Deadline set"
    assert backend.get(Collection.TEMPORAL, "alice") == {
        "deadline_height": 600,
        "alert_sent": False,
    }


def test_deadline_overwrite_uses_call_height(store, backend, alice):
    store.register(alice, "A")
    store.set_deadline(alice, 100)
    store.set_deadline(CallContext(caller="alice", height=700), 5)
    assert backend.get(Collection.TEMPORAL, "alice")["deadline_height"] == 705


@pytest.mark.parametrize("duration", [0, -1, True, 1.5, "10"])
def test_deadline_rejects_non_positive_or_non_int(store, backend, alice, duration):
    store.register(alice, "A")
    with pytest.raises(InvalidParameters):
        store.set_deadline(alice, duration)
    assert not backend.exists(Collection.TEMPORAL, "alice")


def test_deadline_requires_commitment(store, backend, alice):
    with pytest.raises(ResourceMissing):
        store.set_deadline(alice, 10)
    assert backend.snapshot()["temporal"] == {}


def test_deadline_missing_wins_over_bad_duration(store, alice):
    with pytest.raises(ResourceMissing):
        store.set_deadline(alice, 0)


@pytest.mark.parametrize("tier", [1, 2, 3])
def test_priority_valid_tiers(store, backend, alice, tier):
    store.register(alice, "A")
    assert store.set_priority(alice, tier) == "Priority set"
    assert backend.get(Collection.PRIORITY, "alice") == {"tier": tier}


@pytest.mark.parametrize("tier", [0, 4, -1, True, None])
def test_priority_rejects_out_of_range(store, backend, alice, tier):
    store.register(alice, "A")
    with pytest.raises(InvalidParameters):
        store.set_priority(alice, tier)
    assert not backend.exists(Collection.PRIORITY, "alice")


@pytest.mark.parametrize("tier", [1, 5])
def test_priority_without_commitment_is_missing(store, backend, alice, tier):
    """Missing entity takes precedence even when the tier is invalid."""
    with pytest.raises(ResourceMissing):
        store.set_priority(alice, tier)
    assert backend.snapshot()["priority"] == {}


def test_priority_overwrite(store, backend, alice):
    store.register(alice, "A")
    store.set_priority(alice, 1)
    store.set_priority(alice, 3)
    assert backend.get(Collection.PRIORITY, "alice") == {"tier": 3}


def test_update_keeps_satellite_records(store, backend, alice):
    store.register(alice, "A")
    store.set_deadline(alice, 10)
    store.set_priority(alice, 2)
    store.update(alice, "B", True)
    assert backend.exists(Collection.TEMPORAL, "alice")
    assert backend.exists(Collection.PRIORITY, "alice")


def test_acknowledge_alert_keeps_deadline(store, backend, alice):
    store.register(alice, "A")
    store.set_deadline(alice, 100)
    assert store.acknowledge_alert(alice) == "Alert acknowledged"
    assert backend.get(Collection.TEMPORAL, "alice") == {
        "deadline_height": 600,
        "alert_sent": True,
    }


def test_new_deadline_resets_alert(store, backend, alice):
    store.register(alice, "A")
    store.set_deadline(alice, 100)
    store.acknowledge_alert(alice)
    store.set_deadline(alice, 50)
    assert backend.get(Collection.TEMPORAL, "alice")["alert_sent"] is False


def test_acknowledge_without_deadline_is_missing(store, backend, alice):
    store.register(alice, "A")
    with pytest.raises(ResourceMissing):
        store.acknowledge_alert(alice)
    assert not backend.exists(Collection.TEMPORAL, "alice")


def test_acknowledge_without_commitment_is_missing(store, alice):
    with pytest.raises(ResourceMissing):
        store.acknowledge_alert(alice)
