# src/tickoff/client/api_client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..todos.todo_models import Todo

logger = logging.getLogger(__name__)


class TodoApiError(RuntimeError):
    """
    A failed API call.

    `message` is the server's `error` text when the server sent one, so the UI
    can show it verbatim. `status_code` is 0 for transport failures.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def _error_message(resp: httpx.Response, fallback: str) -> str:
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        err = data.get("error") or data.get("detail")
        if isinstance(err, str) and err.strip():
            return err
    return fallback


class TodoApiClient:
    """
    Thin HTTP client for the todo API.

    The httpx client is injected so callers control base URL, timeouts and
    transport (tests pass a FastAPI TestClient, which is an httpx.Client).
    """

    def __init__(self, http: httpx.Client, token: str | None = None) -> None:
        self._http = http
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}

    @classmethod
    def from_settings(cls, settings: Any) -> TodoApiClient:
        http = httpx.Client(
            base_url=str(getattr(settings, "api_url", "http://127.0.0.1:8787")),
            timeout=httpx.Timeout(10.0, connect=5.0),
        )
        return cls(http, token=getattr(settings, "api_token", None))

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, *, json: Any = None, fallback: str) -> Any:
        try:
            resp = self._http.request(method, path, json=json, headers=self._headers)
        except httpx.HTTPError as e:
            logger.info("%s %s transport error: %s", method, path, e)
            raise TodoApiError(0, f"{fallback}: {e}") from e

        if resp.is_error:
            msg = _error_message(resp, fallback)
            logger.debug("%s %s -> %s %s", method, path, resp.status_code, msg)
            raise TodoApiError(resp.status_code, msg)
        return resp.json()

    def list_todos(self) -> list[Todo]:
        data = self._request("GET", "/todos", fallback="Failed to fetch todos")
        return [Todo.from_json(item) for item in data]

    def create_todo(self, title: str) -> Todo:
        data = self._request(
            "POST", "/todos", json={"title": title}, fallback="Failed to create todo"
        )
        return Todo.from_json(data)

    def update_todo(
        self,
        todo_id: str,
        *,
        title: str | None = None,
        completed: bool | None = None,
    ) -> Todo:
        body: dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if completed is not None:
            body["completed"] = completed
        data = self._request(
            "PATCH", f"/todos/{todo_id}", json=body, fallback="Failed to update todo"
        )
        return Todo.from_json(data)

    def delete_todo(self, todo_id: str) -> None:
        self._request("DELETE", f"/todos/{todo_id}", fallback="Failed to delete todo")

    def delete_completed(self) -> None:
        self._request(
            "DELETE", "/todos/completed", fallback="Failed to clear completed todos"
        )
