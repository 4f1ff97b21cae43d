"""
Tests for the host adapter: dispatch, height monotonicity, logging.
"""

import logging

import pytest

from commitvault.backend import MemoryBackend
from commitvault.core import (
    DeterminismError,
    EntityConflict,
    HeightClock,
    UnknownOperation,
)
from commitvault.host import OPERATIONS, Host
from commitvault.store import CommitmentStore


@pytest.fixture
def host() -> Host:
    return Host(CommitmentStore(MemoryBackend()))


def test_every_operation_is_dispatchable(host):
    for name in OPERATIONS:
        assert callable(host._handlers[name])


def test_invoke_builds_context_from_height(host):
    host.invoke("register", caller="alice", height=500, text="A")
    host.invoke("set_deadline", caller="alice", height=500, duration=100)
    status = host.invoke("deadline_status", caller="alice", height=650)
    assert status.deadline_height == 600
    assert status.overdue is True


def test_invoke_without_height_keeps_last(host):
    host.invoke("health", caller="alice", height=42)
    report = host.invoke("health", caller="bob")
    assert report.height == 42
    assert report.caller == "bob"


def test_height_regression_rejected_before_store(host):
    host.invoke("register", caller="alice", height=500, text="A")
    before = host.store.backend.snapshot()

    with pytest.raises(DeterminismError):
        host.invoke("set_deadline", caller="alice", height=499, duration=1)

    assert host.store.backend.snapshot() == before
    assert host.height == 500


def test_initial_clock_is_respected():
    host = Host(CommitmentStore(MemoryBackend()), clock=HeightClock(1000))
    with pytest.raises(DeterminismError):
        host.invoke("health", caller="alice", height=10)


def test_unknown_operation(host):
    with pytest.raises(UnknownOperation):
        host.invoke("drop_table", caller="alice")


def test_domain_errors_propagate_unchanged(host):
    host.invoke("register", caller="alice", text="A")
    with pytest.raises(EntityConflict):
        host.invoke("register", caller="alice", text="B")


def test_rejection_logged_with_trace_id(host, caplog):
    caplog.set_level(logging.DEBUG)
    host.invoke("register", caller="alice", text="A")
    with pytest.raises(EntityConflict):
        host.invoke("register", caller="alice", text="B")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].trace_id == "alice"
    assert warnings[0].error == "entity-conflict"


def test_mutation_logged_at_info(host, caplog):
    caplog.set_level(logging.DEBUG)
    host.invoke("delegate", caller="alice", height=3, target="bob", text="review")

    infos = [r for r in caplog.records if r.levelno == logging.INFO]
    assert [r.operation for r in infos] == ["delegate"]
    assert infos[0].height == 3


def test_read_logged_at_debug_only(host, caplog):
    caplog.set_level(logging.DEBUG)
    host.invoke("register", caller="alice", text="A")
    caplog.clear()

    host.invoke("inspect", caller="alice")

    assert [r.levelno for r in caplog.records] == [logging.DEBUG]
    assert caplog.records[0].operation == "inspect"
    assert caplog.records[0].trace_id == "alice"
