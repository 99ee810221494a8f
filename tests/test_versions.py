"""Tests for versions.py - version counting and rendering."""

from pathlib import Path

from conftest import local_ts
from zfsver.models import SnapshotHit
from zfsver.versions import NOT_FOUND_MESSAGE, count_unique_versions, sorted_lines, summary_line


def _hit(snapshot: str, mtime: float, size: int = 10) -> SnapshotHit:
    return SnapshotHit(
        snapshot=snapshot,
        mtime=int(mtime),
        size=size,
        path=Path("/tank/home/.zfs/snapshot") / snapshot / "notes.txt",
    )


class TestCountUniqueVersions:
    def test_single_hit(self):
        assert count_unique_versions([_hit("s1", local_ts(2024, 1, 1, 8, 0, 0))]) == 1

    def test_no_hits(self):
        assert count_unique_versions([]) == 0

    def test_distinct_clock_times(self):
        hits = [
            _hit("s1", local_ts(2024, 1, 1, 8, 0, 0)),
            _hit("s2", local_ts(2024, 1, 1, 8, 0, 1)),
            _hit("s3", local_ts(2024, 2, 9, 17, 45, 0)),
        ]

        assert count_unique_versions(hits) == 3

    def test_same_clock_time_on_different_days_counts_once(self):
        hits = [
            _hit("s1", local_ts(2024, 1, 1, 8, 0, 0), size=1),
            _hit("s2", local_ts(2024, 1, 5, 8, 0, 0), size=2),
            _hit("s3", local_ts(2023, 7, 20, 8, 0, 0), size=3),
        ]

        assert count_unique_versions(hits) == 1

    def test_same_copy_in_many_snapshots(self):
        mtime = local_ts(2024, 1, 1, 8, 0, 0)
        hits = [_hit(f"s{i}", mtime) for i in range(5)]

        assert count_unique_versions(hits) == 1


class TestRendering:
    def test_render_line(self):
        hit = _hit("s1", local_ts(2024, 3, 1, 10, 15, 30), size=1832)

        assert hit.render() == "2024-03-01 10:15:30 1832 /tank/home/.zfs/snapshot/s1/notes.txt"

    def test_render_custom_format(self):
        hit = _hit("s1", local_ts(2024, 3, 1, 10, 15, 30), size=7)

        assert hit.render("%d/%m/%Y") == "01/03/2024 7 /tank/home/.zfs/snapshot/s1/notes.txt"

    def test_version_key_is_clock_time(self):
        assert _hit("s1", local_ts(2024, 3, 1, 10, 15, 30)).version_key() == "10:15:30"

    def test_sorted_lines_are_lexicographic(self):
        hits = [
            _hit("b", local_ts(2024, 1, 2, 9, 0, 0), size=200),
            _hit("a", local_ts(2024, 1, 2, 9, 0, 0), size=100),
            _hit("c", local_ts(2023, 12, 31, 23, 59, 59), size=5),
        ]

        lines = sorted_lines(hits)

        assert lines == sorted(line for line in lines)
        assert lines[0].startswith("2023-12-31 23:59:59 5 ")
        assert lines[1].startswith("2024-01-02 09:00:00 100 ")
        assert lines[2].startswith("2024-01-02 09:00:00 200 ")


def test_summary_line():
    assert summary_line(3, 14) == "found 3 versions of file in 14 snapshots."


def test_not_found_message():
    assert NOT_FOUND_MESSAGE == "file not found in any snapshots"
