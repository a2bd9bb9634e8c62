# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Uses XDG Base Directory spec
- Logs, session cache and settings live under XDG dirs
- The offline sqlite store lives in XDG_DATA_HOME unless overridden
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "quantumscribe"


def _xdg(var: str, fallback: Path) -> Path:
    return Path(os.environ.get(var, fallback)).expanduser()


def data_dir() -> Path:
    return _xdg("XDG_DATA_HOME", Path.home() / ".local" / "share") / APP_NAME


def state_dir() -> Path:
    return _xdg("XDG_STATE_HOME", Path.home() / ".local" / "state") / APP_NAME


def logs_dir() -> Path:
    return state_dir() / "logs"


def config_dir() -> Path:
    return _xdg("XDG_CONFIG_HOME", Path.home() / ".config") / APP_NAME


# Shipped with the package
MIGRATIONS_DIR = (Path(__file__).resolve().parents[1] / "migrations").resolve()


def default_db_path() -> Path:
    return data_dir() / "quantumscribe.db"


def session_file() -> Path:
    return state_dir() / "session.json"


def ensure_dirs() -> None:
    for p in (data_dir(), state_dir(), logs_dir(), config_dir()):
        p.mkdir(parents=True, exist_ok=True)
