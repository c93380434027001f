"""
End-to-end recording scenarios through the factory and segmented sink.
"""

import os
import shutil
import subprocess
import sys
import tempfile
import textwrap
from datetime import datetime
from pathlib import Path

import pytest

from segrec import RecordConfig, SinkClock, create_file_sink

STAMP = "2024-06-15_12-30-45"
LATER_STAMP = "2024-06-15_12-31-10"


@pytest.fixture
def workdir(monkeypatch):
    """Temporary working directory containing an `out/` subdirectory."""
    dirpath = tempfile.mkdtemp()
    os.mkdir(os.path.join(dirpath, "out"))
    monkeypatch.chdir(dirpath)
    yield Path(dirpath)
    shutil.rmtree(dirpath)


@pytest.fixture
def clock():
    return SinkClock(frozen_time=datetime(2024, 6, 15, 12, 30, 45))


def test_rotating_recording_without_overwrite(workdir, clock):
    config = RecordConfig(path="out/record.ts", overwrite=False)
    sink = create_file_sink(config, "ch1", clock=clock)
    sink.set_header(b"HDR")

    sink.write_all(b"AAA")
    first = Path("out") / f"record_ch1_{STAMP}_00000.ts"
    assert sink.current_path == first

    sink.flush()
    clock.freeze(datetime(2024, 6, 15, 12, 31, 10))

    sink.write_all(b"BBB")
    sink.flush()

    second = Path("out") / f"record_ch1_{LATER_STAMP}_00001.ts"
    assert first.read_bytes() == b"HDRAAA"
    assert second.read_bytes() == b"HDRBBB"
    assert sorted(p.name for p in (workdir / "out").iterdir()) == [first.name, second.name]


def test_overwrite_replaces_preexisting_segment(workdir, clock):
    target = Path("out") / f"record_ch1_{STAMP}_00000.ts"
    target.write_bytes(b"left over from an earlier run")

    config = RecordConfig(path="out/record.ts", overwrite=True)
    sink = create_file_sink(config, "ch1", clock=clock)
    sink.set_header(b"HDR")

    sink.write_all(b"AAA")
    sink.flush()

    assert target.read_bytes() == b"HDRAAA"
    assert sink.segment_index == 1
    assert list((workdir / "out").iterdir()) == [workdir / target]


def test_no_overwrite_keeps_preexisting_segment(workdir, clock):
    target = Path("out") / f"record_ch1_{STAMP}_00000.ts"
    target.write_bytes(b"earlier run")

    sink = create_file_sink(RecordConfig(path="out/record.ts"), "ch1", clock=clock)
    sink.set_header(b"HDR")
    sink.write_all(b"AAA")
    sink.flush()

    assert target.read_bytes() == b"earlier run"
    assert (Path("out") / f"record_ch1_{STAMP}_00001.ts").read_bytes() == b"HDRAAA"


def test_bare_path_writes_to_working_directory(workdir, clock):
    sink = create_file_sink(RecordConfig(path="capture"), "radio", clock=clock)
    sink.write_all(b"x")
    sink.flush()

    assert (workdir / f"capture_radio_{STAMP}_00000.ts").read_bytes() == b"x"


def test_disabled_recording_touches_nothing(workdir):
    assert create_file_sink(RecordConfig(), "ch1") is None
    assert sorted(p.name for p in workdir.iterdir()) == ["out"]
    assert list((workdir / "out").iterdir()) == []


CRASH_SCRIPT = textwrap.dedent("""
    import os
    import sys
    from datetime import datetime

    from segrec import SinkClock, SegmentedFileSink

    clock = SinkClock(frozen_time=datetime(2024, 6, 15, 12, 30, 45))
    sink = SegmentedFileSink(sys.argv[1], "ch1", clock=clock)
    sink.set_header(b"HDR")
    sink.write_all(b"AAA")
    os._exit(0)
""")


def test_written_data_survives_abrupt_exit(workdir):
    pkg_dir = Path(__file__).resolve().parent.parent / "segrec"
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(pkg_dir), env.get("PYTHONPATH")]))

    subprocess.run(
        [sys.executable, "-c", CRASH_SCRIPT, str(workdir / "out" / "record.ts")],
        check=True,
        env=env,
        timeout=30,
    )

    segment = workdir / "out" / f"record_ch1_{STAMP}_00000.ts"
    assert segment.read_bytes() == b"HDRAAA"
