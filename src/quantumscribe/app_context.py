# QuantumScribe application context
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .repositories.base import RemoteTable
from .repositories.db import Database
from .repositories.rest_projects_table import RestProjectsTable
from .repositories.sqlite_projects_table import SQLiteProjectsTable
from .services.auth_session import AuthSession
from .services.local_auth_session import LocalAuthSession
from .services.navigation import Navigator
from .services.rest_auth_session import RestAuthSession
from .utils.logging_setup import get_logger
from .utils.paths import session_file


@dataclass
class AppContext:
    """Central container for the collaborators every view shares."""
    settings: Dict[str, Any]
    auth: AuthSession
    projects_table: RemoteTable
    navigator: Navigator
    db: Optional[Database] = None

    @classmethod
    def create(cls, settings: Dict[str, Any]) -> "AppContext":
        """Wire the configured backend (offline sqlite or hosted supabase)."""
        log = get_logger("AppContext")
        navigator = Navigator()

        if settings["backend"] == "supabase":
            cfg = settings["supabase"]
            timeout = float(settings.get("request_timeout", 10.0))
            auth = RestAuthSession(cfg["url"], cfg["anon_key"], session_file=session_file(), timeout=timeout)
            table = RestProjectsTable(cfg["url"], cfg["anon_key"], token_provider=auth.access_token, timeout=timeout)
            log.info("AppContext initialized with supabase backend at %s", cfg["url"])
            return cls(settings=settings, auth=auth, projects_table=table, navigator=navigator)

        db_path = settings["sqlite"].get("path")
        db = Database(Path(db_path) if db_path else None)
        db.run_migrations()
        log.info("AppContext initialized with DB=%s", db.path)
        return cls(
            settings=settings,
            auth=LocalAuthSession(db),
            projects_table=SQLiteProjectsTable(db),
            navigator=navigator,
            db=db,
        )

    def close(self) -> None:
        if self.db is not None:
            self.db.close()
