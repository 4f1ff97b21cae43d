"""
In-memory record backend.

Process-lifetime state with no persistence; the default backend for tests.
"""

import copy
from typing import Any, Dict, Optional, Sequence

from ..core.errors import BackendError
from .base import Collection, RecordBackend, Write, empty_snapshot


class MemoryBackend(RecordBackend):
    """Dict-of-dicts backend keyed by collection then identity."""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Dict[str, Any]]]] = None) -> None:
        self._data = empty_snapshot()
        for name, records in (initial or {}).items():
            self._data[Collection(name).value].update(copy.deepcopy(records))

    def get(self, collection: Collection, key: str) -> Optional[Dict[str, Any]]:
        rec = self._data[Collection(collection).value].get(key)
        return dict(rec) if rec is not None else None

    def commit(self, writes: Sequence[Write]) -> None:
        # Validate the whole batch before touching state
        for w in writes:
            if not isinstance(w, Write):
                raise BackendError(f"not a Write: {w!r}")
            try:
                Collection(w.collection)
            except ValueError as ex:
                raise BackendError(f"unknown collection: {w.collection!r}") from ex

        for w in writes:
            table = self._data[Collection(w.collection).value]
            if w.is_delete:
                table.pop(w.key, None)
            else:
                table[w.key] = dict(w.value)

    def snapshot(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        return copy.deepcopy(self._data)
