# src/tickoff/todos/todo_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
import uuid
from pathlib import Path
from typing import Any

from .todo_models import Todo

logger = logging.getLogger(__name__)


class TodoStore:
    """
    SQLite todo store.

    Every read and write is scoped by owner: each statement carries
    `user_id = ?` next to its other predicates, so a todo owned by someone
    else behaves exactly like a missing one.

    Each public method runs a single statement (plus a read-back where a row is
    returned) on its own short-lived connection.
    """

    def __init__(self, db_path: str | Path = "todos.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_todos()
        except Exception:
            total = -1
        logger.info("TodoStore ready db=%s total=%s", self._db_path, total)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id TEXT PRIMARY KEY NOT NULL,
                    user_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            cur.execute(
                "CREATE INDEX IF NOT EXISTS idx_todos_user_created ON todos(user_id, created_at)"
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_todo(row: sqlite3.Row) -> Todo:
        return Todo(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            title=str(row["title"]),
            completed=bool(row["completed"]),
            created_at=float(row["created_at"]),
            updated_at=float(row["updated_at"]),
        )

    def _fetch_owned(self, conn: sqlite3.Connection, owner_id: str, todo_id: str) -> Todo | None:
        row = conn.execute(
            "SELECT * FROM todos WHERE id = ? AND user_id = ?",
            (todo_id, owner_id),
        ).fetchone()
        return self._row_to_todo(row) if row else None

    # ---- public API ----

    def count_todos(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
            return int(n)
        finally:
            conn.close()

    def list_todos(self, owner_id: str) -> list[Todo]:
        """All todos of `owner_id`, newest first."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT *
                FROM todos
                WHERE user_id = ?
                ORDER BY created_at DESC, rowid DESC
                """,
                (owner_id,),
            ).fetchall()
            return [self._row_to_todo(r) for r in rows]
        finally:
            conn.close()

    def get_todo(self, owner_id: str, todo_id: str) -> Todo | None:
        conn = self._get_conn()
        try:
            return self._fetch_owned(conn, owner_id, todo_id)
        finally:
            conn.close()

    def add_todo(self, owner_id: str, title: str) -> Todo:
        """Insert a new todo. The title must already be validated."""
        if not owner_id:
            raise ValueError("owner_id is required")
        if not title:
            raise ValueError("title is required")

        now = time.time()
        todo = Todo(
            id=str(uuid.uuid4()),
            user_id=owner_id,
            title=title,
            completed=False,
            created_at=now,
            updated_at=now,
        )

        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO todos(id, user_id, title, completed, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (todo.id, todo.user_id, todo.title, 0, todo.created_at, todo.updated_at),
            )
            conn.commit()
            logger.debug("Todo added id=%s user=%s", todo.id, owner_id)
            return todo
        finally:
            conn.close()

    def update_todo(
        self,
        owner_id: str,
        todo_id: str,
        *,
        title: str | None = None,
        completed: bool | None = None,
    ) -> Todo | None:
        """
        Apply a partial update to an owned todo.

        Only the given fields are written; updated_at is always refreshed and
        never drops below created_at. Returns the updated row, or None when no
        todo with this id belongs to `owner_id`.
        """
        fields: list[str] = []
        params: list[Any] = []

        if title is not None:
            fields.append("title = ?")
            params.append(title)

        if completed is not None:
            fields.append("completed = ?")
            params.append(1 if completed else 0)

        fields.append("updated_at = MAX(?, created_at)")
        params.append(time.time())
        params.extend([todo_id, owner_id])

        sql = f"UPDATE todos SET {', '.join(fields)} WHERE id = ? AND user_id = ?"

        conn = self._get_conn()
        try:
            cur = conn.execute(sql, params)
            conn.commit()
            if cur.rowcount != 1:
                return None
            logger.debug(
                "Todo updated id=%s user=%s title=%s completed=%s",
                todo_id,
                owner_id,
                title is not None,
                completed,
            )
            return self._fetch_owned(conn, owner_id, todo_id)
        finally:
            conn.close()

    def delete_todo(self, owner_id: str, todo_id: str) -> bool:
        conn = self._get_conn()
        try:
            cur = conn.execute(
                "DELETE FROM todos WHERE id = ? AND user_id = ?",
                (todo_id, owner_id),
            )
            conn.commit()
            deleted = cur.rowcount == 1
            logger.debug("Todo delete id=%s user=%s deleted=%s", todo_id, owner_id, deleted)
            return deleted
        finally:
            conn.close()

    def delete_completed(self, owner_id: str) -> int:
        """Remove every completed todo of `owner_id`. Returns the number removed."""
        conn = self._get_conn()
        try:
            cur = conn.execute(
                "DELETE FROM todos WHERE user_id = ? AND completed = 1",
                (owner_id,),
            )
            conn.commit()
            n = max(0, int(cur.rowcount))
            logger.debug("Cleared completed todos user=%s removed=%s", owner_id, n)
            return n
        finally:
            conn.close()
