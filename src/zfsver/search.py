import logging
import os
from pathlib import Path

from .config import AppConfig
from .models import DatasetLocation, ProbeResult, VersionReport
from .paths import locate_snapshot_root, normalize_path, relative_to_root
from .probe import probe_snapshots
from .versions import count_unique_versions

logger: logging.Logger = logging.getLogger(__name__)


def find_versions(raw_path: str | os.PathLike[str], cfg: AppConfig | None = None) -> VersionReport:
    """
    Run the whole lookup for one file and return what was found.

    Raises a `ZfsverError` subclass on the first failing stage.
    """
    if cfg is None:
        cfg = AppConfig()

    file_path: Path = normalize_path(raw_path)
    location: DatasetLocation = locate_snapshot_root(file_path.parent, cfg.snapshot_dir_name)
    relative_path: Path = relative_to_root(location.root, file_path)
    probe: ProbeResult = probe_snapshots(location, relative_path, max_workers=cfg.max_workers)
    logger.debug(
        "Found %d copies of %s in %d snapshots of %s",
        len(probe.hits),
        probe.relative_path,
        len(probe.snapshots),
        probe.location.root,
    )

    return VersionReport(probe=probe, unique_versions=count_unique_versions(probe.hits))
