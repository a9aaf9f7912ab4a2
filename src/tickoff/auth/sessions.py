# src/tickoff/auth/sessions.py

from __future__ import annotations

import logging
import secrets
import sqlite3
import time
from pathlib import Path

from ..core.ports import Caller

logger = logging.getLogger(__name__)


class SessionStore:
    """
    SQLite session lookup table (bearer token -> user).

    Sign-in/sign-up flows live outside this app; this store only answers
    "who is this token?". `create_session` exists for local development and
    tests (see `tickoff session`).
    """

    def __init__(self, db_path: str | Path = "sessions.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SessionStore ready db=%s", self._db_path)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS sessions (
                    token TEXT PRIMARY KEY NOT NULL,
                    user_id TEXT NOT NULL,
                    email TEXT,
                    name TEXT,
                    created_at REAL NOT NULL,
                    expires_at REAL NOT NULL
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_sessions_user ON sessions(user_id)")
            conn.commit()
        finally:
            conn.close()

    def resolve(self, token: str | None) -> Caller | None:
        token = (token or "").strip()
        if not token:
            return None

        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT user_id, email, name FROM sessions WHERE token = ? AND expires_at > ?",
                (token, time.time()),
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return None
        return Caller(id=str(row["user_id"]), email=row["email"], name=row["name"])

    def create_session(
        self,
        user_id: str,
        *,
        email: str | None = None,
        name: str | None = None,
        ttl_hours: int = 24 * 30,
    ) -> str:
        if not user_id or not user_id.strip():
            raise ValueError("user_id is required")

        token = secrets.token_urlsafe(32)
        now = time.time()
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO sessions(token, user_id, email, name, created_at, expires_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (token, user_id.strip(), email, name, now, now + max(1, int(ttl_hours)) * 3600),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Session issued user=%s ttl_hours=%s", user_id, ttl_hours)
        return token

    def revoke(self, token: str) -> bool:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM sessions WHERE token = ?", (token,))
            conn.commit()
            return cur.rowcount == 1
        finally:
            conn.close()
