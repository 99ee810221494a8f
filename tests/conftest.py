"""Shared fixtures: fake datasets with a `.zfs/snapshot` tree under tmp_path."""

import os
from datetime import datetime
from pathlib import Path

import pytest


def local_ts(*args: int) -> float:
    """Epoch seconds for a naive local datetime."""
    return datetime(*args).timestamp()


def write_file(path: Path, content: str, mtime: float | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


class FakeDataset:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.snapshot_dir = root / ".zfs" / "snapshot"
        self.snapshot_dir.mkdir(parents=True)

    def live(self, relative: str, content: str = "live", mtime: float | None = None) -> Path:
        return write_file(self.root / relative, content, mtime)

    def snapshot(self, name: str) -> Path:
        path = self.snapshot_dir / name
        path.mkdir(exist_ok=True)
        return path

    def copy(self, name: str, relative: str, content: str, mtime: float) -> Path:
        return write_file(self.snapshot(name) / relative, content, mtime)


@pytest.fixture(autouse=True)
def no_user_config(tmp_path_factory, monkeypatch):
    """Keep the user's real config file out of every test."""
    missing = tmp_path_factory.mktemp("home") / "config.yaml"
    monkeypatch.setattr("zfsver.config.CONFIG_FILENAME", missing)


@pytest.fixture
def dataset(tmp_path) -> FakeDataset:
    return FakeDataset(tmp_path / "tank" / "home")
