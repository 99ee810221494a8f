from collections.abc import Iterable

from .models import DEFAULT_TIMESTAMP_FORMAT, SnapshotHit

NOT_FOUND_MESSAGE: str = "file not found in any snapshots"


def count_unique_versions(hits: Iterable[SnapshotHit]) -> int:
    """
    Count distinct versions among `hits`.

    Versions are told apart by the time of day of their modification time
    alone. Date, size and path do not take part, so copies written at the
    same clock time on different days are counted as one version.
    """
    return len({hit.version_key() for hit in hits})


def sorted_lines(hits: Iterable[SnapshotHit], timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> list[str]:
    return sorted(hit.render(timestamp_format) for hit in hits)


def summary_line(unique_versions: int, total_snapshots: int) -> str:
    return f"found {unique_versions} versions of file in {total_snapshots} snapshots."
