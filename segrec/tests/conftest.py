"""Pytest fixtures for segrec tests."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from segrec.clock import SinkClock, sink_clock

FROZEN_TIME = datetime(2024, 6, 15, 12, 30, 45)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def frozen_clock():
    """A SinkClock frozen at FROZEN_TIME."""
    return SinkClock(frozen_time=FROZEN_TIME)


@pytest.fixture(autouse=True)
def reset_global_clock():
    """Unfreeze the global clock after each test."""
    yield
    sink_clock.unfreeze()
