"""
Read-only query helpers over the record backend.

None of these raise domain errors; a missing record yields the default view.
"""

from typing import Optional, Tuple

from .backend.base import Collection, RecordBackend
from .core.records import Commitment, PriorityRecord, TemporalConstraint
from .core.views import Analytics, DeadlineStatus, Inspection, Metadata


def _load(
    backend: RecordBackend, identity: str
) -> Tuple[Optional[Commitment], Optional[TemporalConstraint], Optional[PriorityRecord]]:
    commitment = Commitment.from_dict(backend.get(Collection.VAULT, identity))
    if commitment is None:
        return None, None, None
    temporal = TemporalConstraint.from_dict(backend.get(Collection.TEMPORAL, identity))
    priority = PriorityRecord.from_dict(backend.get(Collection.PRIORITY, identity))
    return commitment, temporal, priority


def _priority_set(priority: Optional[PriorityRecord]) -> bool:
    return priority is not None and priority.tier != 0


def get_commitment(backend: RecordBackend, identity: str) -> Optional[Commitment]:
    return Commitment.from_dict(backend.get(Collection.VAULT, identity))


def get_temporal(backend: RecordBackend, identity: str) -> Optional[TemporalConstraint]:
    return TemporalConstraint.from_dict(backend.get(Collection.TEMPORAL, identity))


def get_priority(backend: RecordBackend, identity: str) -> Optional[PriorityRecord]:
    return PriorityRecord.from_dict(backend.get(Collection.PRIORITY, identity))


def inspect(backend: RecordBackend, identity: str) -> Inspection:
    commitment = get_commitment(backend, identity)
    if commitment is None:
        return Inspection()
    return Inspection(
        exists=True,
        length=len(commitment.declaration),
        completed=commitment.completed,
    )


def analytics(backend: RecordBackend, identity: str) -> Analytics:
    commitment, temporal, priority = _load(backend, identity)
    if commitment is None:
        return Analytics()
    return Analytics(
        exists=True,
        completed=commitment.completed,
        priority_configured=_priority_set(priority),
        temporal_configured=temporal is not None,
    )


def metadata(backend: RecordBackend, identity: str) -> Metadata:
    commitment, temporal, priority = _load(backend, identity)
    if commitment is None:
        return Metadata()
    return Metadata(
        exists=True,
        length=len(commitment.declaration),
        priority_assigned=_priority_set(priority),
        deadline_configured=temporal is not None,
        completed=commitment.completed,
    )


def deadline_status(backend: RecordBackend, identity: str, height: int) -> DeadlineStatus:
    """
    Compare the identity's deadline with the given height.

    Only reported while the owning Vault entry exists.
    """
    commitment, temporal, _ = _load(backend, identity)
    if commitment is None or temporal is None:
        return DeadlineStatus()
    return DeadlineStatus(
        configured=True,
        deadline_height=temporal.deadline_height,
        remaining=max(temporal.deadline_height - height, 0),
        overdue=height >= temporal.deadline_height,
        alert_sent=temporal.alert_sent,
    )
