# src/tickoff/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The todo operations depend on Protocols instead of concrete implementations.
This keeps storage and session lookup swappable and makes testing easier.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True, frozen=True)
class Caller:
    """Resolved caller identity: opaque id plus display attributes."""

    id: str
    email: str | None = None
    name: str | None = None


class SessionResolver(Protocol):
    """
    Auth collaborator: bearer token -> caller identity.

    Unknown, blank or expired tokens resolve to None.
    """

    def resolve(self, token: str | None) -> Caller | None: ...


class TodoRepo(Protocol):
    def list_todos(self, owner_id: str) -> list[Any]: ...
    def get_todo(self, owner_id: str, todo_id: str) -> Any | None: ...
    def add_todo(self, owner_id: str, title: str) -> Any: ...
    def update_todo(
            self,
            owner_id: str,
            todo_id: str,
            *,
            title: str | None = None,
            completed: bool | None = None,
    ) -> Any | None: ...
    def delete_todo(self, owner_id: str, todo_id: str) -> bool: ...
    def delete_completed(self, owner_id: str) -> int: ...


class TodoApi(Protocol):
    """
    Client-side port: what the view-model needs from the HTTP API.

    Implementations raise TodoApiError carrying the server's message.
    """

    def list_todos(self) -> list[Any]: ...
    def create_todo(self, title: str) -> Any: ...
    def update_todo(
            self,
            todo_id: str,
            *,
            title: str | None = None,
            completed: bool | None = None,
    ) -> Any: ...
    def delete_todo(self, todo_id: str) -> None: ...
    def delete_completed(self) -> None: ...
