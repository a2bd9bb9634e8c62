# Rev 0.1.0

"""SQLite connection & migration runner (Rev 0.1.0)
- WAL mode, foreign_keys=ON
- Applies SQL files in the package migrations dir in lexical order
- Tracks applied files in schema_migrations(filename TEXT PRIMARY KEY, applied_at UTC)
- One connection shared across worker threads; callers hold `lock` around use
"""
from __future__ import annotations
import sqlite3
import threading
from pathlib import Path
from datetime import datetime, timezone

from ..utils.paths import MIGRATIONS_DIR, default_db_path
from ..utils.logging_setup import get_logger

log = get_logger("Database")


class Database:
    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_db_path()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.lock = threading.RLock()
        self.conn = sqlite3.connect(self.path, isolation_level=None, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.execute("PRAGMA foreign_keys=ON;")
        self.conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_migrations (filename TEXT PRIMARY KEY, applied_at TEXT NOT NULL)"
        )

    def close(self) -> None:
        with self.lock:
            self.conn.close()

    def applied(self) -> set[str]:
        rows = self.conn.execute("SELECT filename FROM schema_migrations").fetchall()
        return {r[0] for r in rows}

    def run_migrations(self, migrations_dir: Path = MIGRATIONS_DIR) -> list[str]:
        with self.lock:
            applied = self.applied()
            to_apply = [p for p in sorted(migrations_dir.glob("*.sql")) if p.name not in applied]
            for p in to_apply:
                self.conn.executescript(p.read_text(encoding="utf-8"))
                self.conn.execute(
                    "INSERT INTO schema_migrations(filename, applied_at) VALUES(?, ?)",
                    (p.name, datetime.now(timezone.utc).isoformat()),
                )
                log.info("Applied migration %s to %s", p.name, self.path)
        return [p.name for p in to_apply]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")
