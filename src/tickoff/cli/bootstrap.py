# src/tickoff/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (server side) or the
  view-model (console side).
"""

from __future__ import annotations

import logging

from ..auth.sessions import SessionStore
from ..client.api_client import TodoApiClient
from ..client.view_model import TodoViewModel
from ..config import get_settings
from ..core.state import AppState
from ..todos.todo_store import TodoStore
from .commands import ConsoleContext

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.todos_db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.sessions_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create the server AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        todo_store=TodoStore(settings.todos_db_path),
        sessions=SessionStore(settings.sessions_db_path),
    )
    logger.debug("AppState ready data_dir=%s", settings.data_dir)
    return state


def create_console_context(*, settings=None) -> ConsoleContext:
    if settings is None:
        settings = get_settings()

    api = TodoApiClient.from_settings(settings)
    return ConsoleContext(
        vm=TodoViewModel(api=api),
        app_name=settings.app_name,
        api_url=settings.api_url,
        signed_in=bool(settings.api_token),
    )
