"""
Sink factory - builds an output sink from configuration.

Both builders return None when no output path is configured; callers skip
recording entirely in that case and nothing on disk is touched.
"""

from typing import Optional

from segrec.clock import SinkClock
from segrec.config import RecordConfig
from segrec.sink import OutputSink, SegmentedFileSink, SingleFileSink


def create_file_sink(
    config: RecordConfig,
    channel: str,
    clock: Optional[SinkClock] = None,
) -> Optional[SegmentedFileSink]:
    """
    Create a segmented file sink for a channel.

    Args:
        config: Recording configuration
        channel: Channel identifier embedded in segment names
        clock: Clock for segment timestamps (default: global sink_clock)

    Returns:
        The sink, or None if recording is disabled
    """
    if not config.enabled:
        return None

    return SegmentedFileSink(
        config.path,
        channel,
        overwrite=config.overwrite,
        max_attempts=config.max_attempts,
        clock=clock,
    )


def create_sink(
    config: RecordConfig,
    channel: str,
    clock: Optional[SinkClock] = None,
) -> Optional[OutputSink]:
    """Create the sink selected by config.segmented, or None if disabled."""
    if not config.enabled:
        return None

    if not config.segmented:
        return SingleFileSink(config.path, overwrite=config.overwrite)

    return create_file_sink(config, channel, clock=clock)
