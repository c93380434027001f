"""
segrec - Segmented, crash-safe recording of byte streams to disk

This package provides:
- Output sinks with a shared header/write_all/flush contract
- Rotating segment files with collision-safe, timestamped names
- A single continuous file sink and an in-memory sink
- A factory that builds sinks from YAML/CLI configuration
- A stream recorder and the `segrec` command line tool
"""

from segrec.clock import SinkClock, sink_clock
from segrec.config import RecordConfig, load_config
from segrec.errors import ConfigError, SegmentNamesExhausted, SinkContractError
from segrec.factory import create_file_sink, create_sink
from segrec.recorder import RecordStats, record_stream
from segrec.sink import (
    InMemorySink,
    OutputSink,
    SegmentedFileSink,
    SingleFileSink,
)
from segrec.sink.naming import segment_path, split_stem_ext

__version__ = "0.1.0"

__all__ = [
    # Clock
    "SinkClock",
    "sink_clock",
    # Config
    "RecordConfig",
    "load_config",
    # Errors
    "ConfigError",
    "SegmentNamesExhausted",
    "SinkContractError",
    # Sinks
    "OutputSink",
    "SegmentedFileSink",
    "SingleFileSink",
    "InMemorySink",
    "create_file_sink",
    "create_sink",
    # Naming
    "segment_path",
    "split_stem_ext",
    # Recorder
    "RecordStats",
    "record_stream",
]
