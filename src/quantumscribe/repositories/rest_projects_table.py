# Rev 0.1.0
# QuantumScribe – RestProjectsTable: hosted PostgREST (Supabase) projects table
from __future__ import annotations
import asyncio
from typing import Any, Callable, Dict, List, Optional

import requests

from ..models.entities import Project
from ..models.errors import RemoteError
from ..utils.logging_setup import get_logger

log = get_logger("RestProjectsTable")


class RestProjectsTable:
    """
    GET  {url}/rest/v1/{table}?select=*&order=<col>.<desc|asc>
    POST {url}/rest/v1/{table}   (Prefer: return=representation)

    token_provider returns the signed-in user's access token (or None, in which
    case the anon key is used as bearer).
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        *,
        table: str = "projects",
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        if not url or not anon_key:
            raise ValueError("supabase url and anon key are required")
        self._endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self._anon_key = anon_key
        self._token_provider = token_provider
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"apikey": anon_key, "Content-Type": "application/json"})

    # ---------- public API ----------

    async def select_all(self, order_by: str = "created_at", descending: bool = True) -> List[Project]:
        params = {"select": "*", "order": f"{order_by}.{'desc' if descending else 'asc'}"}
        rows = await asyncio.to_thread(self._request, "GET", params=params)
        if not isinstance(rows, list):
            raise RemoteError(f"unexpected select response: {rows!r}")
        return _to_projects(rows)

    async def insert_one(self, fields: Dict[str, str]) -> Project:
        rows = await asyncio.to_thread(
            self._request,
            "POST",
            json=[dict(fields)],
            headers={"Prefer": "return=representation"},
        )
        if not isinstance(rows, list) or not rows:
            raise RemoteError(f"insert returned no row: {rows!r}")
        return _to_projects(rows[:1])[0]

    # ---------- internals ----------

    def _auth_headers(self) -> Dict[str, str]:
        token = self._token_provider() if self._token_provider else None
        return {"Authorization": f"Bearer {token or self._anon_key}"}

    def _request(self, method: str, **kwargs) -> Any:
        headers = self._auth_headers()
        headers.update(kwargs.pop("headers", {}))
        try:
            response = self._session.request(
                method, self._endpoint, headers=headers, timeout=self._timeout, **kwargs
            )
        except requests.RequestException as exc:
            raise RemoteError(f"{method} {self._endpoint} failed: {exc}") from exc

        if response.status_code >= 400:
            raise RemoteError(error_message(response), status=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteError(f"invalid JSON from {self._endpoint}") from exc


def _to_projects(rows: List[Dict[str, Any]]) -> List[Project]:
    try:
        return [Project.from_row(r) for r in rows]
    except (AttributeError, ValueError) as exc:
        raise RemoteError(f"malformed project row: {exc}") from exc


def error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}: {response.text[:200]}"
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"
