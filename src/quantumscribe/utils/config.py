# Rev 0.1.0
# src/quantumscribe/utils/config.py
from __future__ import annotations
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .logging_setup import get_logger
from .paths import config_dir

log = get_logger("config")

SETTINGS_FILE_NAME = "settings.json"

BACKENDS = ("sqlite", "supabase")

_DEFAULTS: Dict[str, Any] = {
    "backend": "sqlite",
    "supabase": {
        "url": "",
        "anon_key": "",
    },
    "sqlite": {
        "path": None,   # None -> XDG data dir
    },
    "request_timeout": 10.0,
    "main_window": {
        "width": 1100,
        "height": 720,
    },
}

# env var -> (section, key); section None means top level
_ENV_OVERRIDES = {
    "QUANTUMSCRIBE_BACKEND": (None, "backend"),
    "QUANTUMSCRIBE_SUPABASE_URL": ("supabase", "url"),
    "QUANTUMSCRIBE_SUPABASE_KEY": ("supabase", "anon_key"),
    "QUANTUMSCRIBE_DB": ("sqlite", "path"),
}


def settings_file() -> Path:
    return config_dir() / SETTINGS_FILE_NAME


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    data = copy.deepcopy(_DEFAULTS)
    if path.exists():
        try:
            data = _merge(data, json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", path, exc)

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        if section is None:
            data[key] = value
        else:
            data.setdefault(section, {})[key] = value

    if data["backend"] not in BACKENDS:
        raise ValueError(f"Unknown backend {data['backend']!r}; expected one of {', '.join(BACKENDS)}")
    return data


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
