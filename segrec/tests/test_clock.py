"""Tests for segrec.clock module."""

import time
from datetime import datetime

from segrec.clock import SinkClock, sink_clock


class TestSinkClock:
    """Tests for SinkClock class."""

    def test_unfrozen_returns_current_time(self):
        clock = SinkClock()
        before = datetime.now().replace(microsecond=0)
        clock_time = clock.now()
        after = datetime.now()

        assert before <= clock_time <= after

    def test_unfrozen_has_second_precision(self):
        assert SinkClock().now().microsecond == 0

    def test_frozen_returns_fixed_time(self):
        frozen_time = datetime(2024, 6, 15, 12, 30, 0)
        clock = SinkClock(frozen_time=frozen_time)

        assert clock.now() == frozen_time

        # Multiple calls return same time
        time.sleep(0.01)
        assert clock.now() == frozen_time

    def test_stamp_format(self):
        clock = SinkClock(frozen_time=datetime(2024, 1, 2, 3, 4, 5))
        assert clock.stamp() == "2024-01-02_03-04-05"

    def test_freeze_and_unfreeze(self):
        clock = SinkClock()

        assert not clock.is_frozen

        clock.freeze(datetime(2024, 1, 1, 0, 0, 0))

        assert clock.is_frozen
        assert clock.stamp() == "2024-01-01_00-00-00"

        clock.unfreeze()

        assert not clock.is_frozen


class TestGlobalClock:
    """Tests for the global sink_clock instance."""

    def test_global_clock_unfrozen_by_default(self):
        assert isinstance(sink_clock, SinkClock)
        assert not sink_clock.is_frozen

    def test_freeze_global_clock(self):
        sink_clock.freeze(datetime(2024, 3, 20, 10, 0, 0))

        assert sink_clock.stamp() == "2024-03-20_10-00-00"
