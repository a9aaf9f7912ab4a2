# src/tickoff/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (server and console client).
- No secrets required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

ENV_PREFIX = "TICKOFF"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- HTTP API ----
    host: str
    port: int
    cors_origins: List[str]

    # ---- Console client ----
    api_url: str
    api_token: Optional[str]

    # ---- Sessions ----
    session_ttl_hours: int

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    todos_db_path: Path
    sessions_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tickoff").strip() or "tickoff"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        host = _env(_k("HOST"), "127.0.0.1").strip() or "127.0.0.1"
        port = _env_int(_k("PORT"), 8787)
        cors_origins = _env_list(_k("CORS_ORIGINS"), [])

        # Client defaults to the local server address.
        api_url = (_env(_k("API_URL"), f"http://{host}:{port}").strip()).rstrip("/")
        api_token = _first_env(_k("API_TOKEN"), default=None)

        session_ttl_hours = max(1, _env_int(_k("SESSION_TTL_HOURS"), 24 * 30))

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tickoff"))
        todos_db_path = _env_path(_k("TODOS_DB_PATH"), data_dir / "todos.sqlite3")
        sessions_db_path = _env_path(_k("SESSIONS_DB_PATH"), data_dir / "sessions.sqlite3")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            host=host,
            port=port,
            cors_origins=cors_origins,
            api_url=api_url,
            api_token=api_token.strip() if api_token else None,
            session_ttl_hours=session_ttl_hours,
            data_dir=data_dir,
            todos_db_path=todos_db_path,
            sessions_db_path=sessions_db_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
