"""
Segment filename derivation.

Segments are named:
    {stem}_{channel}_{YYYY-MM-DD_HH-MM-SS}_{index:05d}.{ext}

inside the directory of the configured base path. The stem and extension
come from the base path, falling back to "recording" and "ts".
"""

from datetime import datetime
from pathlib import Path
from typing import Tuple, Union

from ..clock import TIMESTAMP_FORMAT

DEFAULT_STEM = "recording"
DEFAULT_EXT = "ts"


def format_timestamp(dt: datetime) -> str:
    """Format a datetime the way it appears in segment filenames."""
    return dt.strftime(TIMESTAMP_FORMAT)


def split_stem_ext(base_path: Union[str, Path]) -> Tuple[str, str]:
    """
    Split a base path into the stem and extension used for segment names.

    Only the final extension counts, so "cap.tar.gz" gives ("cap.tar", "gz").
    A leading-dot name such as ".ts" has no extension and keeps its whole
    name as the stem. A trailing dot ends the stem: "foo." gives ("foo", "ts").

    Args:
        base_path: Template path from the configuration

    Returns:
        (stem, ext) with the defaults applied for missing parts
    """
    name = Path(base_path).name
    stem, _, ext = name.rpartition(".")
    if not stem or name == "..":
        stem, ext = name, ""
    return stem or DEFAULT_STEM, ext or DEFAULT_EXT


def segment_filename(stem: str, channel: str, timestamp: str, index: int, ext: str) -> str:
    """Build the bare filename of one segment."""
    return f"{stem}_{channel}_{timestamp}_{index:05d}.{ext}"


def segment_path(base_path: Union[str, Path], channel: str, timestamp: str, index: int) -> Path:
    """
    Derive the path of a segment file.

    Pure and deterministic: the same inputs always give the same path.

    Args:
        base_path: Template path supplying directory, stem and extension
        channel: Channel identifier embedded in the name
        timestamp: Formatted timestamp (see format_timestamp)
        index: Segment number, zero-padded to five digits

    Returns:
        Path in the base path's directory, or a relative path when the base
        path has no directory component
    """
    base_path = Path(base_path)
    stem, ext = split_stem_ext(base_path)
    filename = segment_filename(stem, channel, timestamp, index, ext)

    parent = base_path.parent
    if str(parent) in ("", "."):
        return Path(filename)
    return parent / filename
