"""
Plain Python demo showing the segrec sinks.

This example demonstrates:
1. Building a segmented sink from a RecordConfig
2. A header repeated at the start of every segment
3. Rotating segments with flush()
4. Listing the segments the sink created

Run this script to see segrec in action; segments land in ./demo-out.
"""

import logging
from pathlib import Path

from segrec import RecordConfig, create_file_sink


logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main():
    out_dir = Path("demo-out")
    out_dir.mkdir(exist_ok=True)

    config = RecordConfig(path=str(out_dir / "demo.ts"))
    sink = create_file_sink(config, channel="ch1")

    print("=" * 60)
    print("Writing three segments with a shared header")
    print("=" * 60)

    sink.set_header(b"#DEMO\n")
    for i in range(3):
        sink.write_all(f"segment {i}\n".encode())
        sink.flush()

    print(f"\nCreated {len(sink.segments)} segments:")
    for path in sink.segments:
        print(f"  {path}: {path.read_bytes()!r}")


if __name__ == "__main__":
    main()
