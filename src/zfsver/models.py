import time
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"
VERSION_KEY_FORMAT: str = "%H:%M:%S"


@dataclass(frozen=True, slots=True)
class DatasetLocation:
    root: Path
    snapshot_dir: Path


@dataclass(frozen=True, slots=True)
class SnapshotHit:
    snapshot: str
    mtime: int
    size: int
    path: Path

    def render(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        stamp: str = time.strftime(timestamp_format, time.localtime(self.mtime))
        return f"{stamp} {self.size} {self.path}"

    def version_key(self) -> str:
        # Clock time only: two copies with the same HH:MM:SS on different days count once.
        return time.strftime(VERSION_KEY_FORMAT, time.localtime(self.mtime))


@dataclass(frozen=True, slots=True)
class ProbeResult:
    location: DatasetLocation
    relative_path: Path
    snapshots: list[str] = field(default_factory=list)
    hits: list[SnapshotHit] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class VersionReport:
    probe: ProbeResult
    unique_versions: int

    @property
    def total_snapshots(self) -> int:
        return len(self.probe.snapshots)

    @property
    def hits(self) -> list[SnapshotHit]:
        return self.probe.hits
