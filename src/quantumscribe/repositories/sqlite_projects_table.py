# Rev 0.1.0
# QuantumScribe – SQLiteProjectsTable: offline stand-in for the hosted projects table
from __future__ import annotations
import asyncio
import sqlite3
import uuid
from typing import Dict, List

from ..models.entities import Project
from ..models.errors import RemoteError
from ..utils.logging_setup import get_logger
from .db import Database, utc_now_iso

log = get_logger("SQLiteProjectsTable")

_ORDERABLE = {"created_at", "name", "id"}


class SQLiteProjectsTable:
    """
    Same contract as the hosted table: the store assigns id (uuid4) and created_at (UTC).
    Blocking sqlite work runs in a worker thread so the UI loop stays free.
    """

    def __init__(self, db: Database):
        self._db = db

    # ---------- public API ----------

    async def select_all(self, order_by: str = "created_at", descending: bool = True) -> List[Project]:
        if order_by not in _ORDERABLE:
            raise RemoteError(f"cannot order projects by {order_by!r}")
        return await asyncio.to_thread(self._select_all, order_by, descending)

    async def insert_one(self, fields: Dict[str, str]) -> Project:
        return await asyncio.to_thread(self._insert_one, dict(fields))

    # ---------- internals ----------

    def _select_all(self, order_by: str, descending: bool) -> List[Project]:
        direction = "DESC" if descending else "ASC"
        sql = f"""
            SELECT id, name, description, created_at
            FROM projects
            ORDER BY {order_by} {direction}, rowid {direction}
        """
        try:
            with self._db.lock:
                rows = self._db.conn.execute(sql).fetchall()
        except sqlite3.Error as exc:
            raise RemoteError(f"select projects failed: {exc}") from exc
        return [Project.from_row(dict(r)) for r in rows]

    def _insert_one(self, fields: Dict[str, str]) -> Project:
        row = {
            "id": str(uuid.uuid4()),
            "name": (fields.get("name") or "").strip(),
            "description": fields.get("description") or "",
            "created_at": utc_now_iso(),
        }
        try:
            with self._db.lock:
                self._db.conn.execute(
                    """
                    INSERT INTO projects (id, name, description, created_at)
                    VALUES (:id, :name, :description, :created_at)
                    """,
                    row,
                )
        except sqlite3.Error as exc:
            raise RemoteError(f"insert project failed: {exc}") from exc
        log.debug("Inserted project %s", row["id"])
        return Project.from_row(row)
