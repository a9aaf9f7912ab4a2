# src/tickoff/todos/todo_api.py

"""
Todo operations used by the HTTP handlers.

Each operation takes the AppState and the resolved caller, checks the caller,
then performs exactly one owner-scoped store call.
"""

from __future__ import annotations

import logging

from ..core.errors import NotFound, Unauthenticated
from ..core.ports import Caller
from ..core.state import AppState
from .todo_models import Todo, TodoPatch, validate_title

logger = logging.getLogger(__name__)


def _require_caller(caller: Caller | None) -> str:
    if caller is None or not caller.id:
        raise Unauthenticated()
    return caller.id


def list_todos(state: AppState, caller: Caller | None) -> list[Todo]:
    owner_id = _require_caller(caller)
    return state.todo_store.list_todos(owner_id)


def create_todo(state: AppState, caller: Caller | None, title: object) -> Todo:
    owner_id = _require_caller(caller)
    clean = validate_title(title)
    todo = state.todo_store.add_todo(owner_id, clean)
    logger.info("Created todo id=%s user=%s", todo.id, owner_id)
    return todo


def update_todo(
    state: AppState, caller: Caller | None, todo_id: str, patch: TodoPatch
) -> Todo:
    """
    Partial update: fields absent from `patch` keep their stored values.

    An empty patch only refreshes updated_at.
    """
    owner_id = _require_caller(caller)
    title = validate_title(patch.title) if patch.title is not None else None

    todo = state.todo_store.update_todo(
        owner_id,
        todo_id,
        title=title,
        completed=patch.completed,
    )
    if todo is None:
        raise NotFound()
    return todo


def delete_todo(state: AppState, caller: Caller | None, todo_id: str) -> None:
    owner_id = _require_caller(caller)
    if not state.todo_store.delete_todo(owner_id, todo_id):
        raise NotFound()
    logger.info("Deleted todo id=%s user=%s", todo_id, owner_id)


def delete_completed(state: AppState, caller: Caller | None) -> int:
    """Zero matches is not an error."""
    owner_id = _require_caller(caller)
    removed = state.todo_store.delete_completed(owner_id)
    logger.info("Cleared %s completed todos user=%s", removed, owner_id)
    return removed
