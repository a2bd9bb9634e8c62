# Rev 0.1.0
# QuantumScribe – LocalAuthSession: offline accounts kept in the sqlite store
from __future__ import annotations
import asyncio
import hashlib
import hmac
import secrets
import sqlite3
import uuid

from ..models.entities import Session
from ..models.errors import AuthFailure
from ..models.types import SIGNED_IN, SIGNED_OUT
from ..repositories.db import Database, utc_now_iso
from ..utils.logging_setup import get_logger
from .auth_session import AuthSession

log = get_logger("LocalAuthSession")

_PBKDF2_ROUNDS = 200_000

# same wording as the hosted provider
INVALID_CREDENTIALS = "Invalid login credentials"
ALREADY_REGISTERED = "User already registered"


def _hash_password(password: str, salt: bytes) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ROUNDS).hex()


class LocalAuthSession(AuthSession):
    """Sessions are in-memory only; signing in again after restart is expected."""

    def __init__(self, db: Database):
        super().__init__()
        self._db = db

    @property
    def supports_registration(self) -> bool:
        return True

    async def register(self, email: str, password: str) -> str:
        if not email or not password:
            raise AuthFailure("Email and password are required")
        return await asyncio.to_thread(self._register, email.strip(), password)

    async def sign_in(self, email: str, password: str) -> Session:
        user_id = await asyncio.to_thread(self._verify, (email or "").strip(), password or "")
        session = Session(access_token=secrets.token_urlsafe(32), user_id=user_id, email=email.strip())
        self._set_session(session, SIGNED_IN)
        return session

    async def sign_out(self) -> None:
        self._set_session(None, SIGNED_OUT)

    # ---- internals
    def _register(self, email: str, password: str) -> str:
        salt = secrets.token_bytes(16)
        user_id = str(uuid.uuid4())
        try:
            with self._db.lock:
                self._db.conn.execute(
                    """
                    INSERT INTO users (id, email, password_salt, password_hash, created_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (user_id, email, salt.hex(), _hash_password(password, salt), utc_now_iso()),
                )
        except sqlite3.IntegrityError as exc:
            raise AuthFailure(ALREADY_REGISTERED) from exc
        log.info("Registered local user %s", email)
        return user_id

    def _verify(self, email: str, password: str) -> str:
        with self._db.lock:
            row = self._db.conn.execute(
                "SELECT id, password_salt, password_hash FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        if row is None:
            raise AuthFailure(INVALID_CREDENTIALS, status=400)
        expected = row["password_hash"]
        actual = _hash_password(password, bytes.fromhex(row["password_salt"]))
        if not hmac.compare_digest(expected, actual):
            raise AuthFailure(INVALID_CREDENTIALS, status=400)
        return row["id"]
