"""
Keyed record storage.

This module provides:
- RecordBackend: Abstract interface (get / commit / snapshot per collection)
- MemoryBackend: Process-lifetime dict storage
- FileBackend: Single JSON document with atomic replace
"""

from .base import Collection, RecordBackend, Write, WriteBatch
from .memory import MemoryBackend
from .file_backend import FileBackend

__all__ = [
    "Collection",
    "RecordBackend",
    "Write",
    "WriteBatch",
    "MemoryBackend",
    "FileBackend",
]
