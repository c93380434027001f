"""
Stream recorder - pumps a byte stream into an OutputSink.

Rotation policy lives here, not in the sink: after every chunk the recorder
checks how much went into the current segment and calls flush() once the
configured size is reached.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional

from segrec.sink import OutputSink

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class RecordStats:
    """Counters for one record_stream() run."""
    bytes_written: int = 0
    chunks: int = 0
    rotations: int = 0


def record_stream(
    source: BinaryIO,
    sink: OutputSink,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    rotate_bytes: Optional[int] = None,
) -> RecordStats:
    """
    Copy source into sink until EOF.

    Args:
        source: Readable binary stream
        sink: Destination sink
        chunk_size: Maximum bytes per read
        rotate_bytes: Rotate after this many bytes in a segment; None never
            rotates before the end of the stream

    Returns:
        RecordStats for the run

    The sink is always flushed at the end, including when a read or write
    fails; the original error is re-raised.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if rotate_bytes is not None and rotate_bytes < 1:
        raise ValueError(f"rotate_bytes must be positive, got {rotate_bytes}")

    stats = RecordStats()
    in_segment = 0

    try:
        while True:
            chunk = source.read(chunk_size)
            if not chunk:
                break

            sink.write_all(chunk)
            stats.bytes_written += len(chunk)
            stats.chunks += 1
            in_segment += len(chunk)

            if rotate_bytes is not None and in_segment >= rotate_bytes:
                sink.flush()
                stats.rotations += 1
                in_segment = 0
    finally:
        sink.flush()

    logger.debug(
        f"Recorded {stats.bytes_written} bytes in {stats.chunks} chunks, "
        f"{stats.rotations} rotations"
    )
    return stats
