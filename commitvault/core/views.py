"""
Read-only result shapes.

Reads never fail: absence of data is represented by the default instance
of each view (all flags False, all counters zero).
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Inspection:
    exists: bool = False
    length: int = 0
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Analytics:
    exists: bool = False
    completed: bool = False
    priority_configured: bool = False
    temporal_configured: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Metadata:
    """Superset of Inspection and Analytics."""
    exists: bool = False
    length: int = 0
    priority_assigned: bool = False
    deadline_configured: bool = False
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeadlineStatus:
    """
    Deadline position relative to the current height.

    remaining is clamped at zero once the deadline height is reached.
    """
    configured: bool = False
    deadline_height: int = 0
    remaining: int = 0
    overdue: bool = False
    alert_sent: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HealthReport:
    operational: bool
    caller: str
    height: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
