# Rev 0.1.0

"""Pytest fixtures for QuantumScribe (Rev 0.1.0)"""
from __future__ import annotations
import asyncio
from pathlib import Path
from typing import Dict, List, Optional, Union

import pytest
from PySide6.QtCore import QCoreApplication

from quantumscribe.models.entities import Project, Session
from quantumscribe.models.errors import AuthFailure, RemoteError
from quantumscribe.repositories.db import Database
from quantumscribe.services.auth_session import AuthSession


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(path=tmp_path / "test.db")
    try:
        database.run_migrations()
        yield database
    finally:
        database.close()


def make_project(pid: str, name: str = "P", created_at: str = "2024-01-01T00:00:00+00:00", description: str = "") -> Project:
    return Project(id=pid, name=name, description=description, created_at=created_at)


# --- In-memory stubs ---------------------------------------------------------

class StubTable:
    """
    Scripted RemoteTable. Each queued result is a value or an exception to raise.
    A queued asyncio.Event makes the call wait until the test sets it.
    """

    def __init__(self):
        self.select_results: List[Union[List[Project], Exception]] = []
        self.insert_results: List[Union[Project, Exception]] = []
        self.select_gates: List[Optional[asyncio.Event]] = []
        self.select_calls: List[Dict] = []
        self.insert_calls: List[Dict] = []

    async def select_all(self, order_by: str = "created_at", descending: bool = True) -> List[Project]:
        self.select_calls.append({"order_by": order_by, "descending": descending})
        gate = self.select_gates.pop(0) if self.select_gates else None
        result = self.select_results.pop(0)
        if gate is not None:
            await gate.wait()
        if isinstance(result, Exception):
            raise result
        return list(result)

    async def insert_one(self, fields: Dict[str, str]) -> Project:
        self.insert_calls.append(dict(fields))
        result = self.insert_results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class StubAuth(AuthSession):
    def __init__(self, session: Optional[Session] = None, password: str = "secret"):
        super().__init__()
        self._session = session
        self._password = password
        self.sign_out_calls = 0

    async def sign_in(self, email: str, password: str) -> Session:
        if password != self._password:
            raise AuthFailure("Invalid login credentials", status=400)
        session = Session(access_token="tok", user_id="u1", email=email)
        self._set_session(session, "SIGNED_IN")
        return session

    async def sign_out(self) -> None:
        self.sign_out_calls += 1
        self._set_session(None, "SIGNED_OUT")

    def deliver(self, event: str, session: Optional[Session] = None) -> None:
        """Push an event straight onto the stream."""
        self.authStateChanged.emit(event, session)


class RecordingNavigator:
    def __init__(self):
        self.calls = []

    def go_to(self, route):
        self.calls.append(route)
        return True


@pytest.fixture()
def table() -> StubTable:
    return StubTable()


@pytest.fixture()
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture()
def session() -> Session:
    return Session(access_token="tok", user_id="u1", email="ada@example.com")


def remote_error(msg: str = "boom") -> RemoteError:
    return RemoteError(msg, status=500)
