"""
Call context supplied by the host for every store operation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallContext:
    """
    Immutable invocation facts.

    Fields:
        caller: Identity of the invoker (authenticated by the host)
        height: Current value of the host's height counter
    """
    caller: str
    height: int = 0
