"""
SinkClock - Wall-clock provider for segment filenames.

Segment names carry the local time at which the segment was opened. The
clock is injected into sinks so that tests can freeze it and predict the
exact filenames a recording produces.

Usage:
    from segrec import sink_clock

    # Instead of datetime.now()
    now = sink_clock.now()

    # Freeze time for testing
    sink_clock.freeze(datetime(2024, 1, 1, 12, 0, 0))
    assert sink_clock.stamp() == "2024-01-01_12-00-00"

    # Unfreeze
    sink_clock.unfreeze()
"""

import threading
from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


class SinkClock:
    """
    A local wall clock that can be frozen.

    Unfrozen, it returns the real local time truncated to whole seconds.
    Frozen, it always returns the frozen time.
    """

    def __init__(self, frozen_time: Optional[datetime] = None):
        """
        Initialize the SinkClock.

        Args:
            frozen_time: If provided, the clock will always return this time
        """
        self._frozen_time: Optional[datetime] = frozen_time
        self._lock = threading.Lock()

    def now(self) -> datetime:
        """
        Get the current local time at second precision.

        Returns:
            Current time (frozen or real)
        """
        with self._lock:
            if self._frozen_time is not None:
                return self._frozen_time

        return datetime.now().replace(microsecond=0)

    def stamp(self) -> str:
        """Current time formatted for use in a segment filename."""
        return self.now().strftime(TIMESTAMP_FORMAT)

    def freeze(self, dt: datetime) -> None:
        """
        Freeze the clock at a specific time.

        Args:
            dt: The time to freeze at
        """
        with self._lock:
            self._frozen_time = dt

    def unfreeze(self) -> None:
        """Unfreeze the clock to return real time."""
        with self._lock:
            self._frozen_time = None

    @property
    def is_frozen(self) -> bool:
        """Check if the clock is frozen."""
        with self._lock:
            return self._frozen_time is not None


# Global instance
sink_clock = SinkClock()
