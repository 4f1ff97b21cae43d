import logging

import pytest

from commitvault.backend import MemoryBackend
from commitvault.core import CallContext
from commitvault.store import CommitmentStore


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> CommitmentStore:
    return CommitmentStore(backend)


@pytest.fixture
def alice() -> CallContext:
    return CallContext(caller="alice", height=500)
