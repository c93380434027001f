"""
Output sink interface.

A sink persists a recorded byte stream. Every backend accepts an optional
header, complete writes and a flush that doubles as the rotation trigger.

Implementations:
    SegmentedFileSink: rotating segment files (segmented.py)
    SingleFileSink: one continuous file (single.py)
    InMemorySink: segments kept as bytes (memory.py)
"""

import errno
from abc import ABC, abstractmethod
from typing import BinaryIO

from ..errors import SinkContractError


def write_fully(file: BinaryIO, data: bytes) -> None:
    """
    Write all of data to an unbuffered file, looping over short writes.

    Raises:
        OSError: from the underlying write, or EIO if the file accepts no
            bytes at all
    """
    view = memoryview(data)
    while view:
        written = file.write(view)
        if not written:
            raise OSError(errno.EIO, "failed to write whole buffer")
        view = view[written:]


class OutputSink(ABC):
    """
    Abstract base class for output sinks.

    All operations are blocking and run to completion before returning.
    Sinks are not thread-safe; callers serialize access.
    """

    @abstractmethod
    def set_header(self, header: bytes) -> None:
        """
        Set the header written at the start of every segment.

        Args:
            header: Byte prefix for new segments
        """

    @abstractmethod
    def write_all(self, data: bytes) -> None:
        """
        Write all of data to the active segment.

        Opens a segment if none is active. On failure some prefix of data
        may have reached storage; callers treat any error as fatal to the
        segment.

        Args:
            data: Bytes to write
        """

    @abstractmethod
    def flush(self) -> None:
        """
        Flush the active segment and release it.

        The next write_all() after a flush starts a new segment.
        """

    def write(self, data: bytes) -> int:
        """Partial writes are not part of the sink contract."""
        raise SinkContractError(
            f"{type(self).__name__} does not support partial writes; use write_all()"
        )

    def close(self) -> None:
        """
        Close the sink and release any resources.
        """
        self.flush()

    def __enter__(self) -> "OutputSink":
        return self

    def __exit__(self, *args) -> None:
        self.close()


from .memory import InMemorySink  # noqa: E402
from .segmented import MAX_SEGMENT_INDEX, SegmentedFileSink  # noqa: E402
from .single import SingleFileSink  # noqa: E402

__all__ = [
    'OutputSink',
    'SegmentedFileSink',
    'SingleFileSink',
    'InMemorySink',
    'MAX_SEGMENT_INDEX',
    'write_fully',
]
