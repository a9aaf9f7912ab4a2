# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tickoff.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in [
        "TICKOFF_DATA_DIR",
        "TICKOFF_TODOS_DB_PATH",
        "TICKOFF_SESSIONS_DB_PATH",
        "TICKOFF_HOST",
        "TICKOFF_PORT",
        "TICKOFF_API_URL",
        "TICKOFF_API_TOKEN",
    ]:
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.data_dir == Path(".local/tickoff")
    assert s.todos_db_path == Path(".local/tickoff") / "todos.sqlite3"
    assert s.port == 8787
    assert s.api_url == "http://127.0.0.1:8787"
    assert s.api_token is None


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TICKOFF_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TICKOFF_PORT", "not-a-number")
    monkeypatch.setenv("TICKOFF_API_URL", "http://todo.local:9000/")
    monkeypatch.setenv("TICKOFF_API_TOKEN", "  tok  ")
    monkeypatch.setenv("TICKOFF_CORS_ORIGINS", "http://a.test, http://b.test")

    s = Settings.from_env()
    assert s.sessions_db_path == tmp_path / "sessions.sqlite3"
    assert s.port == 8787
    assert s.api_url == "http://todo.local:9000"
    assert s.api_token == "tok"
    assert s.cors_origins == ["http://a.test", "http://b.test"]
