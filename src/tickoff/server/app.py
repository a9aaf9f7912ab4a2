# src/tickoff/server/app.py

"""
HTTP API.

Endpoints:
    GET    /health             -> liveness probe (no auth)
    GET    /todos              -> caller's todos, newest first
    POST   /todos              -> create {title}
    PATCH  /todos/{id}         -> partial update {title?, completed?}
    DELETE /todos/completed    -> remove caller's completed todos
    DELETE /todos/{id}         -> remove one todo

Every /todos route resolves the bearer token through the session resolver.
A request without a valid session gets 401, even when its body is malformed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, StrictBool

from ..core.errors import TodoError, Unauthenticated
from ..core.ports import Caller
from ..core.state import AppState
from ..todos import todo_api
from ..todos.todo_models import TodoPatch

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


class TodoCreateIn(BaseModel):
    title: Optional[str] = None


class TodoUpdateIn(BaseModel):
    title: Optional[str] = None
    completed: Optional[StrictBool] = None


def get_state(request: Request) -> AppState:
    return request.app.state.app_state


def require_caller(
    state: AppState = Depends(get_state),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Caller:
    token = credentials.credentials if credentials else None
    caller = state.sessions.resolve(token)
    if caller is None:
        raise Unauthenticated()
    return caller


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = str(first.get("msg", "Invalid request"))
    return f"{loc}: {msg}" if loc else msg


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI app around an explicit AppState."""
    app = FastAPI(title=str(getattr(state.settings, "app_name", "tickoff")), version="1.0.0")
    app.state.app_state = state

    origins = list(getattr(state.settings, "cors_origins", []) or [])
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(TodoError)
    async def _todo_error(request: Request, exc: TodoError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.debug(
                "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message
            )
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        # The body is decoded before dependencies run; the caller check still comes first.
        try:
            require_caller(get_state(request), await _bearer(request))
        except Unauthenticated as e:
            return JSONResponse({"error": e.message}, status_code=e.status_code)
        return JSONResponse({"error": _validation_message(exc)}, status_code=400)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/todos")
    def list_todos(
        caller: Caller = Depends(require_caller),
        st: AppState = Depends(get_state),
    ) -> list[dict[str, Any]]:
        return [t.to_json() for t in todo_api.list_todos(st, caller)]

    @app.post("/todos", status_code=201)
    def create_todo(
        body: TodoCreateIn,
        caller: Caller = Depends(require_caller),
        st: AppState = Depends(get_state),
    ) -> dict[str, Any]:
        return todo_api.create_todo(st, caller, body.title).to_json()

    @app.patch("/todos/{todo_id}")
    def update_todo(
        todo_id: str,
        body: TodoUpdateIn,
        caller: Caller = Depends(require_caller),
        st: AppState = Depends(get_state),
    ) -> dict[str, Any]:
        patch = TodoPatch(title=body.title, completed=body.completed)
        return todo_api.update_todo(st, caller, todo_id, patch).to_json()

    # Must be registered before /todos/{todo_id}.
    @app.delete("/todos/completed")
    def delete_completed(
        caller: Caller = Depends(require_caller),
        st: AppState = Depends(get_state),
    ) -> dict[str, bool]:
        todo_api.delete_completed(st, caller)
        return {"success": True}

    @app.delete("/todos/{todo_id}")
    def delete_todo(
        todo_id: str,
        caller: Caller = Depends(require_caller),
        st: AppState = Depends(get_state),
    ) -> dict[str, bool]:
        todo_api.delete_todo(st, caller, todo_id)
        return {"success": True}

    logger.debug("API app built (cors_origins=%s)", origins)
    return app
