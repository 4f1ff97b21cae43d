"""
Core primitives for the commitment store.

This module provides the foundational abstractions:
- Records: Commitment, TemporalConstraint, PriorityRecord
- Views: read-only result shapes
- Clock: monotonic height source
- CallContext: caller identity and height for one invocation
- Errors: typed error hierarchy
- Canonical: deterministic serialization
"""

from .records import (
    Commitment,
    TemporalConstraint,
    PriorityRecord,
    PriorityTier,
    MAX_DECLARATION_LENGTH,
)
from .views import Inspection, Analytics, Metadata, DeadlineStatus, HealthReport
from .clock import HeightClock
from .context import CallContext
from .canonical import canonicalize, canonical_json_str, state_digest
from .errors import (
    CommitmentError,
    EntityConflict,
    InvalidParameters,
    ResourceMissing,
    DeterminismError,
    BackendError,
    ConfigError,
    UnknownOperation,
)

__all__ = [
    "Commitment",
    "TemporalConstraint",
    "PriorityRecord",
    "PriorityTier",
    "MAX_DECLARATION_LENGTH",
    "Inspection",
    "Analytics",
    "Metadata",
    "DeadlineStatus",
    "HealthReport",
    "HeightClock",
    "CallContext",
    "canonicalize",
    "canonical_json_str",
    "state_digest",
    "CommitmentError",
    "EntityConflict",
    "InvalidParameters",
    "ResourceMissing",
    "DeterminismError",
    "BackendError",
    "ConfigError",
    "UnknownOperation",
]
