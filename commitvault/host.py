"""
Host adapter: the execution environment around the commitment store.

The host owns what the store treats as external facts: it serializes
invocations (one runs to completion before the next starts), keeps the
height counter monotonic, and builds the CallContext for each call. It is
also where outcomes get logged.
"""

import threading
from typing import Any, Callable, Dict, Optional

from .core.clock import HeightClock
from .core.context import CallContext
from .core.errors import CommitmentError, UnknownOperation
from .logging_config import get_logger
from .store import CommitmentStore

MUTATIONS = (
    "register",
    "update",
    "delegate",
    "set_deadline",
    "set_priority",
    "acknowledge_alert",
    "purge",
)
READS = ("inspect", "analytics", "metadata", "deadline_status", "health")
OPERATIONS = MUTATIONS + READS


class Host:
    """
    Serializing front door for a CommitmentStore.

    Usage:
        host = Host(CommitmentStore(MemoryBackend()))
        host.invoke("register", caller="alice", height=500, text="finish report")
        host.invoke("set_deadline", caller="alice", height=500, duration=100)
    """

    def __init__(self, store: CommitmentStore, clock: Optional[HeightClock] = None) -> None:
        self.store = store
        self.clock = clock or HeightClock()
        self._lock = threading.Lock()
        self._handlers: Dict[str, Callable[..., Any]] = {
            name: getattr(store, name) for name in OPERATIONS
        }

    @property
    def height(self) -> int:
        return self.clock.now()

    def invoke(self, operation: str, caller: str, height: Optional[int] = None, **params: Any) -> Any:
        """
        Run one operation as caller at the given height.

        Args:
            operation: Operation name (see OPERATIONS)
            caller: Invoking identity
            height: Current height; None keeps the last observed height
            **params: Operation parameters

        Returns:
            Confirmation string for mutations, view dataclass for reads

        Raises:
            UnknownOperation: operation is not registered
            DeterminismError: height is lower than a previously observed height
            CommitmentError: the store rejected the call
        """
        handler = self._handlers.get(operation)
        if handler is None:
            raise UnknownOperation(f"No handler for operation: {operation}")

        logger = get_logger(__name__, trace_id=caller)
        with self._lock:
            if height is not None:
                self.clock = self.clock.advance_to(height)
            ctx = CallContext(caller=caller, height=self.clock.now())

            try:
                result = handler(ctx, **params)
            except CommitmentError as ex:
                logger.warning(
                    "%s rejected: %s",
                    operation,
                    ex.message,
                    extra={"operation": operation, "error": ex.code, "height": ctx.height},
                )
                raise

        if operation in MUTATIONS:
            logger.info(
                "%s committed",
                operation,
                extra={"operation": operation, "height": ctx.height},
            )
        else:
            logger.debug("%s read", operation, extra={"operation": operation, "height": ctx.height})
        return result
