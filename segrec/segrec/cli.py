"""
segrec - record a byte stream to rotating segment files.

Usage:
    # Record stdin into captures/record_ch1_<time>_00000.ts, ...
    some-producer | segrec -r captures/record.ts --channel ch1

    # Rotate every 10 MB, prefix each segment with a header
    segrec -r captures/record.ts --input dump.bin --rotate-bytes 10000000 \\
        --header-file header.bin

    # Take defaults from a YAML file
    segrec --config record.yaml

Options:
    -r, --record PATH   Output path template (enables recording)
    --overwrite         Replace existing segment files
    --single-file       Write one continuous file instead of segments
    --channel NAME      Channel identifier used in segment names
    --config PATH       YAML file with a `record:` section
    --input PATH        Read from a file instead of stdin
    --chunk-size N      Bytes per read
    --rotate-bytes N    Start a new segment after N bytes
    --header-file PATH  Bytes written at the start of every segment
    --max-attempts N    Give up after N name collisions per segment
    -v, --verbose       Verbose output

Exit codes: 0 on success, 1 on I/O or configuration errors.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from segrec.config import load_config
from segrec.factory import create_sink
from segrec.recorder import DEFAULT_CHUNK_SIZE, record_stream

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL = "default"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="segrec",
        description="Record a byte stream to rotating segment files",
    )
    parser.add_argument(
        "-r", "--record",
        dest="path",
        type=str,
        help="Output path template; recording is disabled without one",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Replace existing files instead of skipping their names",
    )
    parser.add_argument(
        "--single-file",
        action="store_false",
        dest="segmented",
        default=None,
        help="Write one continuous file instead of rotating segments",
    )
    parser.add_argument(
        "--channel",
        type=str,
        default=DEFAULT_CHANNEL,
        help="Channel identifier embedded in segment names",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Read from this file instead of stdin",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Bytes per read",
    )
    parser.add_argument(
        "--rotate-bytes",
        type=int,
        help="Start a new segment after this many bytes",
    )
    parser.add_argument(
        "--header-file",
        type=Path,
        help="File whose contents start every segment",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        help="Give up after this many name collisions per segment",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config).merged(
            path=args.path,
            overwrite=args.overwrite,
            segmented=args.segmented,
            max_attempts=args.max_attempts,
        )
        header = args.header_file.read_bytes() if args.header_file else None

        sink = create_sink(config, args.channel)
        if sink is None:
            logger.info("No output path configured, recording disabled")
            return 0

        with sink:
            if header is not None:
                sink.set_header(header)

            if args.input:
                with open(args.input, "rb") as source:
                    stats = record_stream(source, sink, args.chunk_size, args.rotate_bytes)
            else:
                stats = record_stream(
                    sys.stdin.buffer, sink, args.chunk_size, args.rotate_bytes
                )

    except (OSError, ValueError) as e:
        logger.error(f"Recording failed: {e}")
        return 1

    logger.info(
        f"Recorded {stats.bytes_written} bytes "
        f"({stats.rotations} rotations) on channel {args.channel}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
