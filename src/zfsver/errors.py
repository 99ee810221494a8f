from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    USAGE = 1
    PATH_RESOLUTION = 2
    BAD_FILE = 3
    CONFIG = 4
    SNAPSHOT_LISTING = 5
    NO_SNAPSHOT_ROOT = 7
    RELATIVE_PATH = 8


class ZfsverError(Exception):
    """Base class for every failure that ends a run."""

    exit_code: ExitCode = ExitCode.USAGE

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.details: dict[str, str] = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str: str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class PathResolutionError(ZfsverError):
    exit_code = ExitCode.PATH_RESOLUTION


class NotFoundError(ZfsverError):
    exit_code = ExitCode.BAD_FILE


class NotRegularFileError(ZfsverError):
    exit_code = ExitCode.BAD_FILE


class NoSnapshotRootError(ZfsverError):
    exit_code = ExitCode.NO_SNAPSHOT_ROOT


class RelativePathError(ZfsverError):
    exit_code = ExitCode.RELATIVE_PATH


class SnapshotListingError(ZfsverError):
    exit_code = ExitCode.SNAPSHOT_LISTING


class ConfigError(ZfsverError):
    exit_code = ExitCode.CONFIG
