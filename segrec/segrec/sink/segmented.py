"""
SegmentedFileSink - Rotating segment files on local disk.

Each flush() closes the current segment; the next write_all() opens a new
one. Segment files are named by sink.naming:

    {dir}/{stem}_{channel}_{YYYY-MM-DD_HH-MM-SS}_{index:05d}.{ext}

Segment creation:
    overwrite=True   create or truncate the candidate file
    overwrite=False  exclusive create; if the name exists, move on to the
                     next index with the same timestamp and try again
"""

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from . import OutputSink, write_fully
from .naming import segment_path
from ..clock import SinkClock, sink_clock
from ..errors import SegmentNamesExhausted

logger = logging.getLogger(__name__)

MAX_SEGMENT_INDEX = 2**64 - 1


class SegmentedFileSink(OutputSink):
    """
    File sink that writes a sequence of rotating segment files.

    At most one segment is open at a time and the file object is owned by
    the sink. Segment numbers are never reused within one instance, even
    when pre-existing files force some indices to be skipped.
    """

    def __init__(
        self,
        base_path: Union[str, Path],
        channel: str,
        overwrite: bool = False,
        max_attempts: Optional[int] = None,
        clock: Optional[SinkClock] = None,
    ):
        """
        Initialize the sink. No file is created until the first write.

        Args:
            base_path: Template path supplying directory, stem and extension
            channel: Channel identifier embedded in every segment name
            overwrite: Replace existing files instead of skipping their names
            max_attempts: Cap on name collisions per segment; None retries
                until a free name is found
            clock: Clock used to stamp segment names
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.base_path = Path(base_path)
        self.channel = channel
        self.overwrite = overwrite
        self.max_attempts = max_attempts
        self.clock = clock or sink_clock

        self._header: Optional[bytes] = None
        self._current: Optional[BinaryIO] = None
        self._current_path: Optional[Path] = None
        self._segment_index = 0
        self._segments: List[Path] = []

        logger.info(f"Recording segments to: {base_path}")

    def set_header(self, header: bytes) -> None:
        """
        Store the header for segments created from now on.

        The open segment, if any, is left as it is.
        """
        self._header = bytes(header)

    def write_all(self, data: bytes) -> None:
        """
        Write data to the current segment, opening one if needed.

        Errors propagate unchanged and the segment stays open.
        """
        self._ensure_file()
        write_fully(self._current, data)

    def flush(self) -> None:
        """
        Flush and release the current segment.

        The segment is released even if flushing fails, so the next write
        always starts a new segment.
        """
        current = self._current
        if current is None:
            return

        self._current = None
        self._current_path = None
        try:
            current.flush()
        finally:
            current.close()

    @property
    def header(self) -> Optional[bytes]:
        """Header applied to new segments."""
        return self._header

    @property
    def segment_index(self) -> int:
        """Index the next segment will try first."""
        return self._segment_index

    @property
    def is_open(self) -> bool:
        """Whether a segment is currently open."""
        return self._current is not None

    @property
    def current_path(self) -> Optional[Path]:
        """Path of the open segment, or None."""
        return self._current_path

    @property
    def segments(self) -> List[Path]:
        """Paths of all segments created by this sink, oldest first."""
        return list(self._segments)

    def _ensure_file(self) -> None:
        if self._current is not None:
            return

        self._current_path, self._current = self._create_segment_file()

    def _create_segment_file(self):
        # One timestamp for all attempts of this segment
        timestamp = self.clock.stamp()
        mode = "wb" if self.overwrite else "xb"
        attempt = 0

        while True:
            index = min(self._segment_index + attempt, MAX_SEGMENT_INDEX)
            path = segment_path(self.base_path, self.channel, timestamp, index)

            try:
                file = open(path, mode, buffering=0)
            except FileExistsError:
                if self.overwrite:
                    raise
                attempt += 1
                if self.max_attempts is not None and attempt >= self.max_attempts:
                    raise SegmentNamesExhausted(path, self._segment_index, attempt)
                continue

            if self._header is not None:
                try:
                    write_fully(file, self._header)
                except BaseException:
                    file.close()
                    raise

            if self._segment_index == 0 and attempt == 0:
                logger.info(f"Recording to: {path}")
            else:
                logger.debug(f"Recording to: {path}")

            self._segment_index = min(index + 1, MAX_SEGMENT_INDEX)
            self._segments.append(path)
            return path, file
