"""
In-memory sink that keeps every segment as a bytes object.

Follows the same rotation rules as SegmentedFileSink without touching the
filesystem, for exercising stream-pumping code.
"""

from typing import List, Optional

from . import OutputSink


class InMemorySink(OutputSink):
    """Segments are bytearrays; flush() seals the current one."""

    def __init__(self):
        self._header: Optional[bytes] = None
        self._current: Optional[bytearray] = None
        self._sealed: List[bytes] = []
        self.flush_count = 0

    def set_header(self, header: bytes) -> None:
        self._header = bytes(header)

    def write_all(self, data: bytes) -> None:
        if self._current is None:
            self._current = bytearray(self._header or b"")
        self._current.extend(data)

    def flush(self) -> None:
        self.flush_count += 1
        if self._current is not None:
            self._sealed.append(bytes(self._current))
            self._current = None

    @property
    def is_open(self) -> bool:
        return self._current is not None

    @property
    def segments(self) -> List[bytes]:
        """Sealed segments followed by the open one, if any."""
        segments = list(self._sealed)
        if self._current is not None:
            segments.append(bytes(self._current))
        return segments
