# src/tickoff/client/view_model.py

"""
Client view-model.

The fetched list is the only state that matters: mutations never patch it
locally. Each mutation is a server round-trip followed by a full refetch; on
failure the list is left exactly as it was and the server's message is kept
in `error`.

Filtering and counting are pure functions of the list (and the filter).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from ..core.ports import TodoApi
from ..todos.todo_models import Todo, TodoFilter
from .api_client import TodoApiError

logger = logging.getLogger(__name__)


class Mutation(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    CLEAR_COMPLETED = "clear_completed"


@dataclass(slots=True, frozen=True)
class TodoCounts:
    active: int
    completed: int

    @property
    def total(self) -> int:
        return self.active + self.completed


def filtered_view(todos: Iterable[Todo], todo_filter: TodoFilter) -> list[Todo]:
    if todo_filter == TodoFilter.ACTIVE:
        return [t for t in todos if not t.completed]
    if todo_filter == TodoFilter.COMPLETED:
        return [t for t in todos if t.completed]
    return list(todos)


def counts(todos: Iterable[Todo]) -> TodoCounts:
    active = 0
    completed = 0
    for t in todos:
        if t.completed:
            completed += 1
        else:
            active += 1
    return TodoCounts(active=active, completed=completed)


@dataclass
class TodoViewModel:
    api: TodoApi
    todo_filter: TodoFilter = TodoFilter.ALL
    todos: list[Todo] = field(default_factory=list)
    loaded: bool = False
    error: str | None = None
    pending: set[Mutation] = field(default_factory=set)

    # ---- derived ----

    @property
    def visible(self) -> list[Todo]:
        return filtered_view(self.todos, self.todo_filter)

    @property
    def counts(self) -> TodoCounts:
        return counts(self.todos)

    def set_filter(self, todo_filter: TodoFilter | str) -> None:
        if not isinstance(todo_filter, TodoFilter):
            todo_filter = TodoFilter.parse(todo_filter)
        self.todo_filter = todo_filter

    def is_pending(self, kind: Mutation) -> bool:
        """Only observable by callers that run mutations concurrently with the UI."""
        return kind in self.pending

    # ---- server round-trips ----

    def refresh(self) -> bool:
        try:
            fetched = self.api.list_todos()
        except TodoApiError as e:
            self.error = e.message
            return False
        self.todos = list(fetched)
        self.loaded = True
        self.error = None
        return True

    def _mutate(self, kind: Mutation, call: Callable[[], Any]) -> bool:
        """
        Run one mutation then refetch. Refuses to start while the same kind is pending.
        """
        if kind in self.pending:
            logger.debug("Mutation %s already pending; ignored.", kind)
            return False

        self.pending.add(kind)
        try:
            call()
        except TodoApiError as e:
            self.error = e.message
            logger.info("Mutation %s failed: %s", kind, e.message)
            return False
        finally:
            self.pending.discard(kind)

        return self.refresh()

    def create(self, title: str) -> bool:
        """Blank input is ignored without a request."""
        title = (title or "").strip()
        if not title:
            return False
        return self._mutate(Mutation.CREATE, lambda: self.api.create_todo(title))

    def toggle(self, todo: Todo) -> bool:
        return self._mutate(
            Mutation.UPDATE,
            lambda: self.api.update_todo(todo.id, completed=not todo.completed),
        )

    def rename(self, todo: Todo, title: str) -> bool:
        return self._mutate(Mutation.UPDATE, lambda: self.api.update_todo(todo.id, title=title))

    def delete(self, todo: Todo) -> bool:
        return self._mutate(Mutation.DELETE, lambda: self.api.delete_todo(todo.id))

    def clear_completed(self) -> bool:
        return self._mutate(Mutation.CLEAR_COMPLETED, self.api.delete_completed)

    def pick(self, number: int, view: Sequence[Todo] | None = None) -> Todo | None:
        """1-based lookup into the visible list."""
        items = self.visible if view is None else view
        if 1 <= number <= len(items):
            return items[number - 1]
        return None
