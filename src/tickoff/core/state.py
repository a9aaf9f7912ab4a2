# src/tickoff/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import SessionResolver, TodoRepo


@dataclass
class AppState:
    """
    Explicit server context handed to every request handler.

    `settings` is typed loosely so tests can pass a SimpleNamespace.
    """

    settings: object
    todo_store: TodoRepo
    sessions: SessionResolver
