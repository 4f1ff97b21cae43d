"""
Canonical serialization for persisted record state.

The file backend writes state through these helpers so identical collections
always produce identical bytes on disk.
"""

import hashlib
import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested dict/list data to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string.

    Compact separators, sorted keys, UTF-8 kept as-is (ensure_ascii=False).
    """
    return json.dumps(canonicalize(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def state_digest(obj: Any) -> str:
    """SHA-256 hex digest of the canonical JSON bytes of obj."""
    return hashlib.sha256(canonical_json_str(obj).encode("utf-8")).hexdigest()
