"""
Commitment store: the request handlers over the three keyed collections.

Every mutating handler runs inside backend.transaction(), checks current state
first and only then writes, so a rejected call touches zero records. Check order is
significant: it decides which error a doubly-invalid call receives.

The store never logs, retries or swallows errors; that belongs to the host.
"""

from typing import Any

from . import query
from .backend.base import Collection, RecordBackend
from .core.context import CallContext
from .core.errors import EntityConflict, ResourceMissing
from .core.records import Commitment, PriorityRecord, TemporalConstraint
from .core.validation import (
    check_completed,
    check_declaration,
    check_duration,
    check_identity,
    check_tier,
)
from .core.views import Analytics, DeadlineStatus, HealthReport, Inspection, Metadata


class CommitmentStore:
    """
    Per-identity commitments with optional deadline and priority.

    Usage:
        store = CommitmentStore(MemoryBackend())
        ctx = CallContext(caller="alice", height=500)
        store.register(ctx, "finish report")
        store.set_deadline(ctx, 100)   # deadline_height == 600
    """

    def __init__(self, backend: RecordBackend) -> None:
        self.backend = backend

    # Lifecycle

    def _require_absent(self, identity: str) -> None:
        if self.backend.exists(Collection.VAULT, identity):
            raise EntityConflict(f"commitment already registered for {identity}")

    def _require_present(self, identity: str) -> None:
        if not self.backend.exists(Collection.VAULT, identity):
            raise ResourceMissing(f"no commitment registered for {identity}")

    def _create(self, identity: str, text: Any) -> None:
        with self.backend.transaction():
            self._require_absent(identity)
            declaration = check_declaration(text)
            self.backend.set(Collection.VAULT, identity, Commitment(declaration).to_dict())

    def register(self, ctx: CallContext, text: Any) -> str:
        """
        Create the caller's commitment.

        Raises:
            EntityConflict: Caller already has a commitment
            InvalidParameters: Text empty, too long or not a string
        """
        self._create(ctx.caller, text)
        return "Commitment registered"

    def update(self, ctx: CallContext, text: Any, completed: Any) -> str:
        """
        Replace the caller's commitment wholesale.

        completed must be a real bool; None or other values are rejected
        rather than coerced.

        Raises:
            ResourceMissing: Caller has no commitment
            InvalidParameters: Text invalid, or completed not a bool
        """
        with self.backend.transaction():
            self._require_present(ctx.caller)
            declaration = check_declaration(text)
            flag = check_completed(completed)
            self.backend.set(
                Collection.VAULT,
                ctx.caller,
                Commitment(declaration=declaration, completed=flag).to_dict(),
            )
        return "Commitment updated"

    def delegate(self, ctx: CallContext, target: Any, text: Any) -> str:
        """
        Create a commitment for another identity.

        Any caller may delegate to any target; no consent from the target is
        required.

        Raises:
            InvalidParameters: Target identity or text invalid
            EntityConflict: Target already has a commitment
        """
        identity = check_identity(target)
        self._create(identity, text)
        return "Commitment delegated"

    # Temporal and priority

    def set_deadline(self, ctx: CallContext, duration: Any) -> str:
        """
        Set or overwrite the caller's deadline at ctx.height + duration.

        Resets alert_sent to False.

        Raises:
            ResourceMissing: Caller has no commitment
            InvalidParameters: Duration not a positive integer
        """
        with self.backend.transaction():
            self._require_present(ctx.caller)
            blocks = check_duration(duration)
            constraint = TemporalConstraint(deadline_height=ctx.height + blocks)
            self.backend.set(Collection.TEMPORAL, ctx.caller, constraint.to_dict())
        return "Deadline set"

    def set_priority(self, ctx: CallContext, tier: Any) -> str:
        """
        Set or overwrite the caller's priority tier.

        Raises:
            ResourceMissing: Caller has no commitment (wins over a bad tier)
            InvalidParameters: Tier outside [1, 3]
        """
        with self.backend.transaction():
            self._require_present(ctx.caller)
            value = check_tier(tier)
            self.backend.set(Collection.PRIORITY, ctx.caller, PriorityRecord(tier=value).to_dict())
        return "Priority set"

    def acknowledge_alert(self, ctx: CallContext) -> str:
        """
        Mark the caller's deadline alert as sent.

        Raises:
            ResourceMissing: Caller has no commitment, or no deadline
        """
        with self.backend.transaction():
            self._require_present(ctx.caller)
            temporal = query.get_temporal(self.backend, ctx.caller)
            if temporal is None:
                raise ResourceMissing(f"no deadline configured for {ctx.caller}")
            self.backend.set(Collection.TEMPORAL, ctx.caller, temporal.with_alert_sent().to_dict())
        return "Alert acknowledged"

    # Reads

    def inspect(self, ctx: CallContext) -> Inspection:
        return query.inspect(self.backend, ctx.caller)

    def analytics(self, ctx: CallContext) -> Analytics:
        return query.analytics(self.backend, ctx.caller)

    def metadata(self, ctx: CallContext) -> Metadata:
        return query.metadata(self.backend, ctx.caller)

    def deadline_status(self, ctx: CallContext) -> DeadlineStatus:
        return query.deadline_status(self.backend, ctx.caller, ctx.height)

    def health(self, ctx: CallContext) -> HealthReport:
        return HealthReport(operational=True, caller=ctx.caller, height=ctx.height)

    # Purge

    def purge(self, ctx: CallContext) -> str:
        """
        Remove all three records for the caller in one batch.

        Satellite records are deleted whether or not they were ever set.

        Raises:
            ResourceMissing: Caller has no commitment
        """
        with self.backend.transaction():
            self._require_present(ctx.caller)
            with self.backend.batch() as b:
                b.delete(Collection.VAULT, ctx.caller)
                b.delete(Collection.TEMPORAL, ctx.caller)
                b.delete(Collection.PRIORITY, ctx.caller)
        return "Commitment purged"
