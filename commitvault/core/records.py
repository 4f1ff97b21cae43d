"""
Record models for the three per-identity collections.

Records are immutable. Every write replaces the whole record, so each model
converts to and from the plain dict shape kept by the backend.
"""

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type

from .errors import BackendError

MAX_DECLARATION_LENGTH = 100


class PriorityTier(enum.IntEnum):
    """Importance classification of a commitment."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3


MIN_TIER = int(min(PriorityTier))
MAX_TIER = int(max(PriorityTier))


_MISSING = object()


def _field(data: Any, key: str, kinds: Tuple[Type, ...], default: Any = _MISSING) -> Any:
    """Read one stored field without coercion; mistyped or missing values are corrupt state."""
    if not isinstance(data, dict):
        raise BackendError(f"corrupt record: expected an object, got {type(data).__name__}")
    if key not in data:
        if default is _MISSING:
            raise BackendError(f"corrupt record: missing field {key!r}")
        return default
    value = data[key]
    # bool is an int subclass; only accept it where bool is the declared kind
    if not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds):
        raise BackendError(f"corrupt record: field {key!r} has type {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Commitment:
    """
    Vault entry.

    Fields:
        declaration: Non-empty text, at most 100 characters
        completed: Completion flag (False on creation)
    """
    declaration: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"declaration": self.declaration, "completed": self.completed}

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> Optional["Commitment"]:
        if data is None:
            return None
        return Commitment(
            declaration=_field(data, "declaration", (str,)),
            completed=_field(data, "completed", (bool,), False),
        )


@dataclass(frozen=True)
class TemporalConstraint:
    """
    Deadline attached to a commitment.

    Fields:
        deadline_height: Absolute height (creation height + duration)
        alert_sent: Whether the deadline alert was acknowledged
    """
    deadline_height: int
    alert_sent: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"deadline_height": self.deadline_height, "alert_sent": self.alert_sent}

    def with_alert_sent(self) -> "TemporalConstraint":
        return TemporalConstraint(deadline_height=self.deadline_height, alert_sent=True)

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> Optional["TemporalConstraint"]:
        if data is None:
            return None
        return TemporalConstraint(
            deadline_height=_field(data, "deadline_height", (int,)),
            alert_sent=_field(data, "alert_sent", (bool,), False),
        )


@dataclass(frozen=True)
class PriorityRecord:
    """Priority entry holding a tier in [1, 3]."""
    tier: int

    def to_dict(self) -> Dict[str, Any]:
        return {"tier": self.tier}

    @staticmethod
    def from_dict(data: Optional[Dict[str, Any]]) -> Optional["PriorityRecord"]:
        if data is None:
            return None
        return PriorityRecord(tier=_field(data, "tier", (int,)))
