"""
Exceptions raised by segrec sinks and configuration.

Filesystem failures are not wrapped: sinks let the original OSError
(PermissionError, FileNotFoundError, ...) reach the caller unchanged.
"""

from pathlib import Path


class SinkContractError(AssertionError):
    """Raised when a sink is used in a way its contract forbids.

    This signals a bug in the calling code, not a runtime failure.
    """


class SegmentNamesExhausted(FileExistsError):
    """Raised when every candidate segment name within the retry cap exists."""

    def __init__(self, path: Path, first_index: int, attempts: int):
        self.path = path
        self.first_index = first_index
        self.attempts = attempts
        super().__init__(
            f"No free segment name after {attempts} attempts "
            f"starting at index {first_index}: {path}"
        )


class ConfigError(ValueError):
    """Raised when a recording configuration file is malformed."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")
