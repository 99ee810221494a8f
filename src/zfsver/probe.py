import logging
import os
from collections.abc import Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from .errors import SnapshotListingError
from .models import DatasetLocation, ProbeResult, SnapshotHit

logger: logging.Logger = logging.getLogger(__name__)


def list_snapshots(snapshot_dir: Path) -> list[str]:
    """
    Return the names of the immediate children of `snapshot_dir`.

    Every name is treated as an opaque snapshot identifier.
    """
    names: list[str] = []

    try:
        with os.scandir(snapshot_dir) as it:
            for entry in it:
                names.append(entry.name)
    except OSError as e:
        raise SnapshotListingError(
            "Cannot read snapshot directory.",
            details={"path": str(snapshot_dir), "reason": e.strerror or str(e)},
        ) from e

    return names


def stat_candidate(snapshot_dir: Path, snapshot: str, relative_path: Path) -> SnapshotHit | None:
    path: Path = snapshot_dir / snapshot / relative_path

    try:
        st: os.stat_result = path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        logger.debug("Skipping snapshot %s: %s", snapshot, e)
        return None

    return SnapshotHit(
        snapshot=snapshot,
        mtime=st.st_mtime_ns // 1_000_000_000,
        size=st.st_size,
        path=path,
    )


def _stat_parallel(
    snapshot_dir: Path, snapshots: Iterable[str], relative_path: Path, max_workers: int
) -> Iterator[SnapshotHit | None]:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: list[Future[SnapshotHit | None]] = [
            executor.submit(stat_candidate, snapshot_dir, snapshot, relative_path) for snapshot in snapshots
        ]
        for future in as_completed(futures):
            yield future.result()


def probe_snapshots(location: DatasetLocation, relative_path: Path, max_workers: int = 1) -> ProbeResult:
    """
    Look for `relative_path` inside every snapshot of the dataset.

    Only a failure to list the snapshot directory is fatal; a snapshot
    that does not hold the file, or cannot be read, is left out.
    """
    if max_workers <= 0:
        raise ValueError("max_workers must be > 0")

    snapshots: list[str] = list_snapshots(location.snapshot_dir)
    logger.debug("Probing %d snapshots for %s", len(snapshots), relative_path)

    if max_workers == 1 or len(snapshots) <= 1:
        results: Iterable[SnapshotHit | None] = (
            stat_candidate(location.snapshot_dir, snapshot, relative_path) for snapshot in snapshots
        )
    else:
        results = _stat_parallel(location.snapshot_dir, snapshots, relative_path, max_workers)

    hits: list[SnapshotHit] = [hit for hit in results if hit is not None]

    return ProbeResult(location=location, relative_path=relative_path, snapshots=snapshots, hits=hits)
