# src/taskrofi/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Invalid values fall back to defaults instead of crashing a popup launcher.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

ENV_PREFIX = "TASKROFI"

DEFAULT_WAIT_PRESETS = ["tomorrow", "1h", "2h", "4h", "monday"]


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_command(name: str, default: Optional[str]) -> Optional[str]:
    """A command line that shlex can split; anything else falls back to `default`."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        argv = shlex.split(raw)
    except ValueError:
        return default
    return raw.strip() if argv else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_enabled: bool
    data_dir: Path

    # ---- External programs ----
    task_bin: str
    menu_command: str
    open_command: Optional[str]

    # ---- Display ----
    label_width: int
    wait_presets: List[str]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskrofi").strip() or "taskrofi"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)
        data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".local" / "share" / "taskrofi")

        task_bin = _env(_k("TASK_BIN"), "task").strip() or "task"
        menu_command = _env_command(_k("MENU_COMMAND"), "rofi -dmenu -i") or "rofi -dmenu -i"
        open_command = _env_command(_k("OPEN_COMMAND"), None)

        label_width = _env_int(_k("LABEL_WIDTH"), 60)
        # Room for at least one character plus the "..." marker.
        if label_width < 4:
            label_width = 60
        wait_presets = _env_list(_k("WAIT_PRESETS"), DEFAULT_WAIT_PRESETS)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            data_dir=data_dir,
            task_bin=task_bin,
            menu_command=menu_command,
            open_command=open_command,
            label_width=label_width,
            wait_presets=wait_presets,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
