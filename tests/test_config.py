# tests/test_config.py
from __future__ import annotations

import json

import pytest

from quantumscribe.app_context import AppContext
from quantumscribe.repositories.rest_projects_table import RestProjectsTable
from quantumscribe.repositories.sqlite_projects_table import SQLiteProjectsTable
from quantumscribe.services.local_auth_session import LocalAuthSession
from quantumscribe.services.rest_auth_session import RestAuthSession
from quantumscribe.utils.config import load_settings, save_settings
from quantumscribe.utils.paths import ensure_dirs

ENV_VARS = ("QUANTUMSCRIBE_BACKEND", "QUANTUMSCRIBE_SUPABASE_URL", "QUANTUMSCRIBE_SUPABASE_KEY", "QUANTUMSCRIBE_DB")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


def test_defaults_when_file_missing(tmp_path):
    settings = load_settings(tmp_path / "missing.json")
    assert settings["backend"] == "sqlite"
    assert settings["main_window"]["width"] == 1100


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    save_settings({"backend": "supabase", "supabase": {"url": "https://x.supabase.co"}}, path)

    settings = load_settings(path)

    assert settings["backend"] == "supabase"
    assert settings["supabase"]["url"] == "https://x.supabase.co"
    assert settings["supabase"]["anon_key"] == ""      # nested default kept
    assert settings["request_timeout"] == 10.0


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{oops")
    assert load_settings(path)["backend"] == "sqlite"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"backend": "sqlite"}))
    monkeypatch.setenv("QUANTUMSCRIBE_BACKEND", "supabase")
    monkeypatch.setenv("QUANTUMSCRIBE_SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("QUANTUMSCRIBE_SUPABASE_KEY", "k")

    settings = load_settings(path)

    assert settings["backend"] == "supabase"
    assert settings["supabase"] == {"url": "https://env.supabase.co", "anon_key": "k"}


def test_unknown_backend_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("QUANTUMSCRIBE_BACKEND", "firebase")
    with pytest.raises(ValueError):
        load_settings(tmp_path / "missing.json")


def test_invalid_json_warning_uses_app_logger(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{oops")
    with caplog.at_level("WARNING", logger="quantumscribe"):
        load_settings(path)
    assert [r.name for r in caplog.records] == ["quantumscribe.config"]


def test_ensure_dirs_creates_xdg_tree(tmp_path):
    ensure_dirs()
    for sub in ("data", "state", "config"):
        assert (tmp_path / sub / "quantumscribe").is_dir()
    assert (tmp_path / "state" / "quantumscribe" / "logs").is_dir()


def test_default_settings_path_uses_xdg(tmp_path):
    save_settings({"backend": "supabase", "supabase": {"url": "u", "anon_key": "k"}})
    assert (tmp_path / "config" / "quantumscribe" / "settings.json").exists()
    assert load_settings()["supabase"]["anon_key"] == "k"


# --- wiring ------------------------------------------------------------------

def test_context_sqlite_backend(tmp_path, monkeypatch):
    monkeypatch.setenv("QUANTUMSCRIBE_DB", str(tmp_path / "app.db"))
    ctx = AppContext.create(load_settings(tmp_path / "missing.json"))
    try:
        assert isinstance(ctx.projects_table, SQLiteProjectsTable)
        assert isinstance(ctx.auth, LocalAuthSession)
        assert ctx.db.path == tmp_path / "app.db"
    finally:
        ctx.close()


def test_context_supabase_backend(tmp_path, monkeypatch):
    monkeypatch.setenv("QUANTUMSCRIBE_BACKEND", "supabase")
    monkeypatch.setenv("QUANTUMSCRIBE_SUPABASE_URL", "https://x.supabase.co")
    monkeypatch.setenv("QUANTUMSCRIBE_SUPABASE_KEY", "k")

    ctx = AppContext.create(load_settings(tmp_path / "missing.json"))

    assert isinstance(ctx.projects_table, RestProjectsTable)
    assert isinstance(ctx.auth, RestAuthSession)
    assert ctx.db is None


def test_context_supabase_without_credentials(tmp_path, monkeypatch):
    monkeypatch.setenv("QUANTUMSCRIBE_BACKEND", "supabase")
    with pytest.raises(ValueError):
        AppContext.create(load_settings(tmp_path / "missing.json"))
