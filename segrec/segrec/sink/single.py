"""
SingleFileSink - One continuous output file.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from . import OutputSink, write_fully

logger = logging.getLogger(__name__)


class SingleFileSink(OutputSink):
    """
    Writes the whole stream to exactly one file.

    The header is written as soon as it is set. flush() pushes buffered
    data to the OS but keeps the file open; only close() releases it.
    An existing file is an error unless overwrite is set.
    """

    def __init__(self, path: Union[str, Path], overwrite: bool = False):
        self.path = Path(path)
        self.overwrite = overwrite
        self._file: Optional[BinaryIO] = None
        self._closed = False

    def set_header(self, header: bytes) -> None:
        self._ensure_file()
        write_fully(self._file, header)

    def write_all(self, data: bytes) -> None:
        self._ensure_file()
        write_fully(self._file, data)

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        file = self._file
        self._file = None
        self._closed = True
        if file is not None:
            try:
                file.flush()
            finally:
                file.close()

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def _ensure_file(self) -> None:
        if self._file is not None:
            return
        if self._closed:
            raise ValueError(f"Sink for {self.path} is closed")

        self._file = open(self.path, "wb" if self.overwrite else "xb", buffering=0)
        logger.info(f"Recording to: {self.path}")
