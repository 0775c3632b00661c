# src/tdo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; settings are built on first use.
- The CLI may override single fields (positional default file) via dataclasses.replace.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TDO"

LOCAL_TODO_FILE = ".todo.md"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load the nearest .env above the working directory; real env vars win."""
    load_dotenv(find_dotenv(usecwd=True), override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _color_from_env() -> bool:
    # NO_COLOR wins over everything (https://no-color.org).
    if os.getenv("NO_COLOR") is not None:
        return False
    for name in (_k("COLOR"), "FORCE_COLOR"):
        if _first_env(name) is not None:
            return _env_bool(name, default=False)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Todo file ----
    default_file: Optional[Path]

    # ---- External programs ----
    editor: str
    fzf_executable: str
    picker_height: str

    # ---- Rendering ----
    color: bool

    @staticmethod
    def from_env() -> "Settings":
        _load_dotenv()

        app_name = _env(_k("APP_NAME"), "tdo") or "tdo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), Path("~/.local/state/tdo").expanduser())

        default_file = _env_optional_path(_k("DEFAULT_FILE"))

        # EDITOR is the conventional name; TDO_EDITOR lets the tool differ from the shell default.
        editor = _first_env(_k("EDITOR"), "EDITOR", default="vi") or "vi"
        fzf_executable = _first_env(_k("FZF"), default="fzf") or "fzf"
        picker_height = _first_env(_k("PICKER_HEIGHT"), default="50%") or "50%"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            default_file=default_file,
            editor=editor,
            fzf_executable=fzf_executable,
            picker_height=picker_height,
            color=_color_from_env(),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
