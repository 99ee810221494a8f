import logging
import os
import stat
from pathlib import Path

from .errors import NoSnapshotRootError, NotFoundError, NotRegularFileError, PathResolutionError, RelativePathError
from .models import DatasetLocation

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_DIR_NAME: str = ".zfs"
SNAPSHOT_SUBDIR: str = "snapshot"


def normalize_path(raw_path: str | os.PathLike[str]) -> Path:
    """
    Turn a user supplied path into an absolute path to a regular file.

    Symlinks are resolved when possible. If resolution fails the absolute,
    unresolved path is used instead so a broken link somewhere in the
    chain is reported by the stat below rather than here.

    Raises
    ------
    PathResolutionError
        If the path cannot be made absolute.
    NotFoundError
        If nothing exists at the path.
    NotRegularFileError
        If the path exists but is not a regular file.
    """
    try:
        absolute: Path = Path(os.path.abspath(raw_path))
    except OSError as e:
        raise PathResolutionError("cannot resolve file path", details={"path": str(raw_path)}) from e

    try:
        canonical: Path = absolute.resolve(strict=True)
    except (OSError, RuntimeError):
        logger.debug("Could not resolve symlinks in %s, using it as is", absolute)
        canonical = absolute

    try:
        st: os.stat_result = canonical.stat()
    except FileNotFoundError as e:
        raise NotFoundError(f"Cannot find {canonical}") from e
    except OSError as e:
        raise NotFoundError(f"Cannot find {canonical}", details={"reason": e.strerror or str(e)}) from e

    if not stat.S_ISREG(st.st_mode):
        raise NotRegularFileError(f"{canonical} is not a regular file")

    return canonical


def locate_snapshot_root(start: Path, snapshot_dir_name: str = DEFAULT_SNAPSHOT_DIR_NAME) -> DatasetLocation:
    """
    Walk up from `start` to the nearest directory hosting `<name>/snapshot`.

    Presence of the hidden snapshot directory is the signal for the dataset
    root; the mount table is not consulted.
    """
    current: Path = start

    while True:
        candidate: Path = current / snapshot_dir_name / SNAPSHOT_SUBDIR
        try:
            _ = candidate.stat()
        except OSError:
            pass
        else:
            logger.debug("Found snapshot directory %s", candidate)
            return DatasetLocation(root=current, snapshot_dir=candidate)

        if current.parent == current:
            raise NoSnapshotRootError("File is not on a ZFS filesystem.", details={"path": str(start)})

        current = current.parent


def relative_to_root(root: Path, path: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError as e:
        raise RelativePathError(
            "Could not find relative path.", details={"root": str(root), "path": str(path)}
        ) from e
