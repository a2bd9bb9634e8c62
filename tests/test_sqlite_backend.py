# tests/test_sqlite_backend.py
from __future__ import annotations

import asyncio

import pytest

from quantumscribe.models.errors import AuthFailure, RemoteError
from quantumscribe.repositories.sqlite_projects_table import SQLiteProjectsTable
from quantumscribe.services.local_auth_session import LocalAuthSession
from quantumscribe.viewmodels.projects_viewmodel import ProjectsViewModel


# --- schema ------------------------------------------------------------------

def test_migrations_applied_once(db):
    assert "001_init.sql" in db.applied()
    assert db.run_migrations() == []
    tables = {r[0] for r in db.conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"projects", "users", "schema_migrations"} <= tables


# --- projects table ----------------------------------------------------------

def test_insert_assigns_id_and_timestamp(db):
    table = SQLiteProjectsTable(db)
    project = asyncio.run(table.insert_one({"name": "Alpha", "description": ""}))

    assert project.id
    assert project.created_at
    assert project.name == "Alpha"
    assert project.description == ""


def test_select_newest_first(db):
    table = SQLiteProjectsTable(db)

    async def go():
        for name in ("first", "second", "third"):
            await table.insert_one({"name": name, "description": name.upper()})
        return await table.select_all(order_by="created_at", descending=True)

    rows = asyncio.run(go())
    assert [r.name for r in rows] == ["third", "second", "first"]
    assert rows[0].description == "THIRD"


def test_select_ascending(db):
    table = SQLiteProjectsTable(db)

    async def go():
        await table.insert_one({"name": "a", "description": ""})
        await table.insert_one({"name": "b", "description": ""})
        return await table.select_all(order_by="created_at", descending=False)

    assert [r.name for r in asyncio.run(go())] == ["a", "b"]


def test_select_rejects_unknown_column(db):
    with pytest.raises(RemoteError):
        asyncio.run(SQLiteProjectsTable(db).select_all(order_by="name; DROP TABLE projects"))


def test_empty_name_is_a_remote_error(db):
    with pytest.raises(RemoteError):
        asyncio.run(SQLiteProjectsTable(db).insert_one({"name": "  ", "description": "x"}))


def test_closed_database_surfaces_as_fetch_failure(db):
    table = SQLiteProjectsTable(db)
    db.conn.close()
    vm = ProjectsViewModel(table)

    asyncio.run(vm.initialize())

    assert vm.last_error is not None
    assert vm.records == []


def test_viewmodel_end_to_end(db):
    table = SQLiteProjectsTable(db)
    vm = asyncio.run(ProjectsViewModel.create(table))
    vm.set_pending_name("Scribe")
    vm.set_pending_description("notes")

    asyncio.run(vm.create_one())
    fresh = asyncio.run(ProjectsViewModel.create(table))

    assert [p.name for p in vm.records] == ["Scribe"]
    assert fresh.records == vm.records


# --- local accounts ----------------------------------------------------------

def test_register_and_sign_in(db):
    auth = LocalAuthSession(db)
    events = []
    auth.subscribe(lambda e, s: events.append((e, s.email if s else None)))

    async def go():
        await auth.register("ada@example.com", "pw")
        session = await auth.sign_in("ada@example.com", "pw")
        current = await auth.get_current_session()
        return session, current

    session, current = asyncio.run(go())
    assert session == current
    assert session.access_token
    assert events == [("SIGNED_IN", "ada@example.com")]


def test_wrong_password(db):
    auth = LocalAuthSession(db)
    asyncio.run(auth.register("ada@example.com", "pw"))

    with pytest.raises(AuthFailure) as err:
        asyncio.run(auth.sign_in("ada@example.com", "nope"))
    assert err.value.message == "Invalid login credentials"
    assert asyncio.run(auth.get_current_session()) is None


def test_unknown_user(db):
    with pytest.raises(AuthFailure):
        asyncio.run(LocalAuthSession(db).sign_in("nobody@example.com", "pw"))


def test_duplicate_registration(db):
    auth = LocalAuthSession(db)
    asyncio.run(auth.register("ada@example.com", "pw"))
    with pytest.raises(AuthFailure) as err:
        asyncio.run(auth.register("ADA@example.com", "other"))
    assert err.value.message == "User already registered"


def test_sign_out_clears_session(db):
    auth = LocalAuthSession(db)
    events = []
    auth.subscribe(lambda e, s: events.append(e))

    async def go():
        await auth.register("ada@example.com", "pw")
        await auth.sign_in("ada@example.com", "pw")
        await auth.sign_out()
        return await auth.get_current_session()

    assert asyncio.run(go()) is None
    assert events == ["SIGNED_IN", "SIGNED_OUT"]


def test_cancelled_subscription_receives_nothing(db):
    auth = LocalAuthSession(db)
    events = []
    sub = auth.subscribe(lambda e, s: events.append(e))
    sub.cancel()
    sub.cancel()

    asyncio.run(auth.sign_out())

    assert events == []
    assert sub.active is False
