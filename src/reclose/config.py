"""Configuration loading from environment variables and reclose.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "reclose.toml"

DEFAULT_FILE_LIST_MAX = 10
DEFAULT_BUFFER_LIST_MAX = 10
DEFAULT_BUFFER_MAX_SIZE = 10000

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class HistoryConfig:
    """Caps for the closed-file and closed-buffer lists.

    Read at call time, so assigning to these fields on a live session takes
    effect on the next close event.
    """

    file_list_max_length: int = DEFAULT_FILE_LIST_MAX
    buffer_list_max_length: int = DEFAULT_BUFFER_LIST_MAX
    buffer_max_saved_size: int = DEFAULT_BUFFER_MAX_SIZE
    track_on_start: bool = False


@dataclass
class RecloseConfig:
    """Top-level configuration."""

    history: HistoryConfig = field(default_factory=HistoryConfig)
    log_level: str = "INFO"


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(config_path: Path | None = None) -> RecloseConfig:
    """Load configuration from environment variables and optional reclose.toml.

    Priority: environment variables > reclose.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.reclose/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".reclose" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    history_data = file_data.get("history", {})

    config = RecloseConfig(
        history=HistoryConfig(
            file_list_max_length=int(
                os.getenv(
                    "RECLOSE_FILE_LIST_MAX",
                    history_data.get("file_list_max_length", DEFAULT_FILE_LIST_MAX),
                )
            ),
            buffer_list_max_length=int(
                os.getenv(
                    "RECLOSE_BUFFER_LIST_MAX",
                    history_data.get("buffer_list_max_length", DEFAULT_BUFFER_LIST_MAX),
                )
            ),
            buffer_max_saved_size=int(
                os.getenv(
                    "RECLOSE_BUFFER_MAX_SIZE",
                    history_data.get("buffer_max_saved_size", DEFAULT_BUFFER_MAX_SIZE),
                )
            ),
            track_on_start=_as_bool(
                os.getenv("RECLOSE_TRACK_ON_START", history_data.get("track_on_start", False))
            ),
        ),
        log_level=os.getenv("RECLOSE_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    return config
