# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real session tokens. Use .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TICKOFF_APP_NAME": "App display name (default: tickoff).",
    "TICKOFF_LOG_LEVEL": "Logging level (default: INFO).",
    # HTTP API
    "TICKOFF_HOST": "Bind address for `tickoff serve` (default: 127.0.0.1).",
    "TICKOFF_PORT": "Port for `tickoff serve` (default: 8787).",
    "TICKOFF_CORS_ORIGINS": "Comma/space separated browser origins allowed to call the API.",
    # Console client
    "TICKOFF_API_URL": "API base URL used by `tickoff console` (default: http://<host>:<port>).",
    "TICKOFF_API_TOKEN": "Bearer session token used by `tickoff console`.",
    # Sessions
    "TICKOFF_SESSION_TTL_HOURS": "Lifetime of tokens issued by `tickoff session` (default: 720).",
    # Paths (gitignored)
    "TICKOFF_DATA_DIR": "Local data directory (default: .local/tickoff).",
    "TICKOFF_TODOS_DB_PATH": "TodoStore SQLite path (default: <data_dir>/todos.sqlite3).",
    "TICKOFF_SESSIONS_DB_PATH": "SessionStore SQLite path (default: <data_dir>/sessions.sqlite3).",
}
