"""
RecordBackend abstract interface.

Defines the keyed-store contract the commitment store depends on.
"""

import enum
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence


class Collection(str, enum.Enum):
    """The three fixed per-identity collections."""
    VAULT = "vault"
    TEMPORAL = "temporal"
    PRIORITY = "priority"


@dataclass(frozen=True)
class Write:
    """
    One pending mutation.

    value=None deletes the key; deleting an absent key is a no-op.
    """

    collection: Collection
    key: str
    value: Optional[Dict[str, Any]] = None

    @property
    def is_delete(self) -> bool:
        return self.value is None


class WriteBatch:
    """Collects writes for a single all-or-nothing commit."""

    def __init__(self) -> None:
        self.writes: List[Write] = []

    def set(self, collection: Collection, key: str, value: Dict[str, Any]) -> None:
        self.writes.append(Write(collection, key, dict(value)))

    def delete(self, collection: Collection, key: str) -> None:
        self.writes.append(Write(collection, key, None))

    def __len__(self) -> int:
        return len(self.writes)


class RecordBackend(ABC):
    """
    Abstract keyed record storage.

    All implementations must guarantee:
    - Whole-record values (no partial field updates)
    - Atomic commit (every write in a batch lands, or none does)
    - get() returns a copy; callers cannot mutate stored state in place
    """

    @abstractmethod
    def get(self, collection: Collection, key: str) -> Optional[Dict[str, Any]]:
        """
        Read one record.

        Returns:
            Record dict, or None if the key is absent

        Raises:
            BackendError: If the read fails
        """
        ...

    @abstractmethod
    def commit(self, writes: Sequence[Write]) -> None:
        """
        Apply writes atomically, in order.

        Raises:
            BackendError: If the commit fails (nothing is applied)
        """
        ...

    @abstractmethod
    def snapshot(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """
        Return a copy of all collections, keyed by collection value.
        """
        ...

    def exists(self, collection: Collection, key: str) -> bool:
        return self.get(collection, key) is not None

    def set(self, collection: Collection, key: str, value: Dict[str, Any]) -> None:
        self.commit([Write(collection, key, dict(value))])

    def delete(self, collection: Collection, key: str) -> None:
        self.commit([Write(collection, key, None)])

    @contextmanager
    def transaction(self) -> Iterator["RecordBackend"]:
        """
        Hold exclusive access across a read-check-write sequence.

        Reads and commits issued inside the block see no interleaved writes
        from other handles on the same storage. The default is a no-op for
        backends that are only ever reached through one serialized caller.

        Usage:
            with backend.transaction():
                if backend.exists(Collection.VAULT, "alice"):
                    ...
                backend.set(Collection.VAULT, "alice", record)
        """
        yield self

    @contextmanager
    def batch(self) -> Iterator[WriteBatch]:
        """
        Collect writes and commit them when the block exits cleanly.

        If the block raises, nothing is written and the exception propagates.

        Usage:
            with backend.batch() as b:
                b.delete(Collection.VAULT, "alice")
                b.delete(Collection.TEMPORAL, "alice")
        """
        b = WriteBatch()
        yield b
        if b.writes:
            self.commit(b.writes)


def empty_snapshot() -> Dict[str, Dict[str, Dict[str, Any]]]:
    return {c.value: {} for c in Collection}
