# Rev 0.1.0
# QuantumScribe – RestAuthSession: hosted GoTrue (Supabase) password auth
from __future__ import annotations
import asyncio
import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from ..models.entities import Session
from ..models.errors import AuthFailure
from ..models.types import SIGNED_IN, SIGNED_OUT, TOKEN_REFRESHED
from ..repositories.rest_projects_table import error_message
from ..utils.logging_setup import get_logger
from .auth_session import AuthSession

log = get_logger("RestAuthSession")


class RestAuthSession(AuthSession):
    """
    POST {url}/auth/v1/token?grant_type=password       -> SIGNED_IN
    POST {url}/auth/v1/token?grant_type=refresh_token  -> TOKEN_REFRESHED
    POST {url}/auth/v1/logout                          -> SIGNED_OUT

    The session survives restarts in `session_file` (JSON) when one is given.
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        *,
        session_file: Optional[Path] = None,
        timeout: float = 10.0,
        http: Optional[requests.Session] = None,
    ):
        super().__init__()
        if not url or not anon_key:
            raise ValueError("supabase url and anon key are required")
        self._auth_url = f"{url.rstrip('/')}/auth/v1"
        self._session_file = session_file
        self._timeout = timeout
        self._http = http or requests.Session()
        self._http.headers.update({"apikey": anon_key, "Content-Type": "application/json"})
        self._session = self._load_persisted()

    # ---- queries
    async def get_current_session(self) -> Optional[Session]:
        current = self._session
        if current is not None and current.is_expired() and current.refresh_token:
            try:
                return await self.refresh()
            except AuthFailure as exc:
                log.warning("Could not refresh expired session: %s", exc.message)
                self._session = None
                self._persist(None)
                return None
        return await super().get_current_session()

    # ---- commands
    async def sign_in(self, email: str, password: str) -> Session:
        body = await asyncio.to_thread(
            self._post, "/token", params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        session = _session_from_body(body)
        self._persist(session)
        self._set_session(session, SIGNED_IN)
        return session

    async def refresh(self) -> Session:
        if self._session is None or not self._session.refresh_token:
            raise AuthFailure("No session to refresh")
        body = await asyncio.to_thread(
            self._post, "/token", params={"grant_type": "refresh_token"},
            json={"refresh_token": self._session.refresh_token},
        )
        session = _session_from_body(body)
        self._persist(session)
        self._set_session(session, TOKEN_REFRESHED)
        return session

    async def sign_out(self) -> None:
        token = self.access_token()
        if token:
            try:
                await asyncio.to_thread(
                    self._post, "/logout", headers={"Authorization": f"Bearer {token}"}
                )
            except AuthFailure as exc:
                # the local session is dropped either way
                log.warning("Remote logout failed: %s", exc.message)
        self._persist(None)
        self._set_session(None, SIGNED_OUT)

    # ---- internals
    def _post(self, path: str, **kwargs) -> Any:
        url = self._auth_url + path
        try:
            response = self._http.post(url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            raise AuthFailure(f"Could not reach the sign-in service: {exc}") from exc
        if response.status_code >= 400:
            raise AuthFailure(error_message(response), status=response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise AuthFailure("Invalid response from the sign-in service") from exc

    def _load_persisted(self) -> Optional[Session]:
        if self._session_file is None or not self._session_file.exists():
            return None
        try:
            return Session.from_dict(json.loads(self._session_file.read_text(encoding="utf-8")))
        except (OSError, ValueError, KeyError) as exc:
            log.warning("Discarding unreadable session file %s: %s", self._session_file, exc)
            return None

    def _persist(self, session: Optional[Session]) -> None:
        if self._session_file is None:
            return
        if session is None:
            self._session_file.unlink(missing_ok=True)
            return
        self._session_file.parent.mkdir(parents=True, exist_ok=True)
        self._session_file.write_text(json.dumps(session.to_dict()), encoding="utf-8")


def _session_from_body(body: Optional[Dict[str, Any]]) -> Session:
    if not body or not body.get("access_token"):
        raise AuthFailure("Sign-in response did not contain a session")
    user = body.get("user") or {}
    expires_at = body.get("expires_at")
    if expires_at is None and body.get("expires_in") is not None:
        expires_at = time.time() + float(body["expires_in"])
    return Session(
        access_token=body["access_token"],
        refresh_token=body.get("refresh_token"),
        user_id=str(user.get("id", "")),
        email=user.get("email"),
        expires_at=expires_at,
    )
