"""
Settings loaded from environment variables.

    TASKZ_DATA_DIR         where tasks.json and undo.json live
    TASKZ_MATCH_THRESHOLD  minimum similarity for done/edit to pick a task
    TASKZ_LOG_LEVEL        logging level name (default WARNING)
    TASKZ_INSTALL_PATH     where `taskz install` copies the launcher
"""

import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .matching import DEFAULT_THRESHOLD

ENV_PREFIX = "TASKZ"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not 0.0 <= value <= 1.0:
        return default
    return value


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    if sys.platform == "win32":
        base = Path(os.getenv("LOCALAPPDATA") or "C:\\temp")
    else:
        base = Path(os.getenv("HOME") or ".") / ".local" / "share"
    return base / "taskz"


class Settings(BaseModel):
    """Runtime settings for the CLI"""
    data_dir: Path
    match_threshold: float = Field(ge=0.0, le=1.0, default=DEFAULT_THRESHOLD)
    log_level: str = "WARNING"
    install_path: Optional[Path] = None  # None -> platform default


def get_settings() -> Settings:
    return Settings(
        data_dir=_env_path(_k("DATA_DIR"), default_data_dir()),
        match_threshold=_env_float(_k("MATCH_THRESHOLD"), DEFAULT_THRESHOLD),
        log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
        install_path=_env_path(_k("INSTALL_PATH"), None),
    )
