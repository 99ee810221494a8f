from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, cast

import yaml

from .errors import ConfigError
from .models import DEFAULT_TIMESTAMP_FORMAT
from .paths import DEFAULT_SNAPSHOT_DIR_NAME


CONFIG_FILENAME: Path = Path.home() / ".config" / "zfsver" / "config.yaml"


def type_error(key: str, value: object) -> NoReturn:
    raise ConfigError(f"Unexpected value of wrong type for {key}: {value!r}")


@dataclass(slots=True)
class AppConfig:
    snapshot_dir_name: str = DEFAULT_SNAPSHOT_DIR_NAME
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    max_workers: int = 1

    @staticmethod
    def load(path: Path | None = None) -> "AppConfig":
        """
        Load the configuration from a YAML file.

        Without an explicit `path` the default location is tried and a
        missing file there yields the built-in defaults. An explicit path
        that does not exist is an error.
        """
        if path is None:
            path = CONFIG_FILENAME
            if not path.exists():
                return AppConfig()
        elif not path.exists():
            raise ConfigError(f"Missing config file: {path}")

        try:
            with path.open("r", encoding="UTF-8") as f:
                raw_loaded_obj: object | None = cast(object, yaml.safe_load(f))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file: {path}", details={"reason": str(e)}) from e

        if not raw_loaded_obj:
            return AppConfig()

        if not isinstance(raw_loaded_obj, dict):
            type_error("config file", raw_loaded_obj)

        raw_dict: dict[str, object] = cast(dict[str, object], raw_loaded_obj)

        cfg_raw: object | None = raw_dict.get("config")
        if cfg_raw is None:
            return AppConfig()
        if not isinstance(cfg_raw, dict):
            type_error("config", cfg_raw)

        return AppConfig.from_raw(cast(dict[str, object], cfg_raw))

    @staticmethod
    def from_raw(cfg: dict[str, object]) -> "AppConfig":
        app_config: AppConfig = AppConfig()

        snapshot_dir_name: object = cfg.get("snapshot_dir_name", app_config.snapshot_dir_name)
        if not isinstance(snapshot_dir_name, str) or not snapshot_dir_name or "/" in snapshot_dir_name:
            type_error("snapshot_dir_name", snapshot_dir_name)
        app_config.snapshot_dir_name = snapshot_dir_name

        timestamp_format: object = cfg.get("timestamp_format", app_config.timestamp_format)
        if not isinstance(timestamp_format, str) or not timestamp_format:
            type_error("timestamp_format", timestamp_format)
        app_config.timestamp_format = timestamp_format

        max_workers: object = cfg.get("max_workers", app_config.max_workers)
        # bool is an int subclass
        if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers <= 0:
            type_error("max_workers", max_workers)
        app_config.max_workers = max_workers

        return app_config
