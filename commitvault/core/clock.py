"""
Height clock implementation.

Provides the monotonic height counter used as the time basis for deadlines.
"""

from dataclasses import dataclass

from .errors import DeterminismError


@dataclass(frozen=True)
class HeightClock:
    """
    Immutable height source.

    In production: the host supplies the ledger height for each call.
    In tests: you can tick manually.

    Heights never go backwards; advance_to() refuses a lower value.
    """
    current: int = 0

    def now(self) -> int:
        """Get current height without advancing."""
        return self.current

    def tick(self, step: int = 1) -> "HeightClock":
        """
        Advance clock by step and return new clock instance.

        Since HeightClock is immutable, this returns a new instance.
        """
        if step < 0:
            raise DeterminismError(f"negative tick: {step}")
        return HeightClock(self.current + step)

    def advance_to(self, height: int) -> "HeightClock":
        """
        Move the clock to an absolute height.

        Raises:
            DeterminismError: If height is lower than the current height
        """
        if height < self.current:
            raise DeterminismError(
                f"height regressed: {height} < {self.current}"
            )
        return HeightClock(height)
