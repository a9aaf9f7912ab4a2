# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from tickoff.auth.sessions import SessionStore
from tickoff.core.ports import Caller
from tickoff.core.state import AppState
from tickoff.server.app import create_app
from tickoff.todos.todo_store import TodoStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the app factory.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="tickoff-test",
        data_dir=tmp_path,
        todos_db_path=tmp_path / "todos.sqlite3",
        sessions_db_path=tmp_path / "sessions.sqlite3",
        cors_origins=[],
        api_url="http://testserver",
        api_token=None,
        session_ttl_hours=1,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real SQLite stores: ownership scoping lives in
    the SQL, so that is what we want to exercise.
    """
    return AppState(
        settings=settings,
        todo_store=TodoStore(settings.todos_db_path),
        sessions=SessionStore(settings.sessions_db_path),
    )


@pytest.fixture()
def alice() -> Caller:
    return Caller(id="user-alice", email="alice@example.com", name="Alice")


@pytest.fixture()
def bob() -> Caller:
    return Caller(id="user-bob", email="bob@example.com", name="Bob")


@pytest.fixture()
def client(state: AppState) -> TestClient:
    return TestClient(create_app(state))


@pytest.fixture()
def alice_token(state: AppState, alice: Caller) -> str:
    return state.sessions.create_session(alice.id, email=alice.email, name=alice.name)


@pytest.fixture()
def bob_token(state: AppState, bob: Caller) -> str:
    return state.sessions.create_session(bob.id, email=bob.email, name=bob.name)
