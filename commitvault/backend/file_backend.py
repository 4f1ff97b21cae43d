"""
File-based record backend using a single canonical JSON document.

Document shape: {"priority": {...}, "temporal": {...}, "vault": {...}}
Each commit rewrites the document through a temp file and os.replace(), so
readers see either the previous state or the new one, never a mix.
"""

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Sequence

from ..core.canonical import canonical_json_str
from ..core.errors import BackendError
from .base import Collection, RecordBackend, Write, empty_snapshot

try:
    import fcntl
except ImportError:  # Windows or unsupported platform
    fcntl = None


class FileBackend(RecordBackend):
    """
    JSON file record backend.

    Guarantees:
    - Atomic replace per commit
    - Fsync before replace (durability)
    - Exclusive lock on a sidecar lock file while committing or inside transaction()
    """

    def __init__(self, path: str) -> None:
        """
        Initialize file backend.

        Args:
            path: Path to the JSON state file (created if missing)
        """
        self.path = path
        self.lock_path = f"{self.path}.lock"
        self._mutex = threading.RLock()
        self._depth = 0

        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            if not os.path.exists(path):
                self._write(empty_snapshot())
        except OSError as ex:
            raise BackendError(str(ex)) from ex

    def _open_lock(self):
        try:
            lf = open(self.lock_path, "a+b")
            if fcntl:
                fcntl.flock(lf.fileno(), fcntl.LOCK_EX)
        except OSError as ex:
            raise BackendError(f"cannot lock {self.lock_path}: {ex}") from ex
        return lf

    @contextmanager
    def _locked(self) -> Iterator[None]:
        # Reentrant per handle: commit() inside transaction() reuses the held lock
        with self._mutex:
            if self._depth:
                self._depth += 1
                try:
                    yield
                finally:
                    self._depth -= 1
                return

            lf = self._open_lock()
            self._depth = 1
            try:
                yield
            finally:
                self._depth = 0
                if fcntl:
                    fcntl.flock(lf.fileno(), fcntl.LOCK_UN)
                lf.close()

    @contextmanager
    def transaction(self) -> Iterator["FileBackend"]:
        """
        Hold the sidecar file lock across reads and commits.

        Other FileBackend handles on the same path, in this or another
        process, block until the block exits.
        """
        with self._locked():
            yield self

    def _read(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as ex:
            raise BackendError(str(ex)) from ex

        data = empty_snapshot()
        if not raw.strip():
            return data
        try:
            loaded = json.loads(raw)
        except ValueError as ex:
            raise BackendError(f"corrupt state file {self.path}: {ex}") from ex
        if not isinstance(loaded, dict):
            raise BackendError(f"corrupt state file {self.path}: top level is not an object")

        for c in Collection:
            records = loaded.get(c.value, {})
            if not isinstance(records, dict):
                raise BackendError(f"corrupt state file {self.path}: {c.value} is not an object")
            data[c.value] = records
        return data

    def _write(self, data: Dict[str, Dict[str, Dict[str, Any]]]) -> None:
        directory = os.path.dirname(self.path) or "."
        fd, tmp_path = tempfile.mkstemp(prefix=".commitvault-", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(canonical_json_str(data))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, collection: Collection, key: str) -> Optional[Dict[str, Any]]:
        rec = self._read()[Collection(collection).value].get(key)
        return dict(rec) if rec is not None else None

    def commit(self, writes: Sequence[Write]) -> None:
        try:
            with self._locked():
                data = self._read()
                for w in writes:
                    table = data[Collection(w.collection).value]
                    if w.is_delete:
                        table.pop(w.key, None)
                    else:
                        table[w.key] = dict(w.value)
                self._write(data)
        except ValueError as ex:
            raise BackendError(f"invalid write: {ex}") from ex
        except OSError as ex:
            raise BackendError(str(ex)) from ex

    def snapshot(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        return self._read()
