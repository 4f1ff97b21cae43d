"""
commitvault

Per-identity commitments with optional deadlines and priority tiers, kept in
three keyed collections with cross-record consistency rules.
"""

from .backend import Collection, FileBackend, MemoryBackend, RecordBackend
from .core import (
    CallContext,
    CommitmentError,
    EntityConflict,
    HeightClock,
    InvalidParameters,
    ResourceMissing,
)
from .host import Host
from .store import CommitmentStore

__version__ = "0.1.0"

__all__ = [
    "CallContext",
    "Collection",
    "CommitmentError",
    "CommitmentStore",
    "EntityConflict",
    "FileBackend",
    "HeightClock",
    "Host",
    "InvalidParameters",
    "MemoryBackend",
    "RecordBackend",
    "ResourceMissing",
]
