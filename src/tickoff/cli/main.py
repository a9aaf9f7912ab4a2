# src/tickoff/cli/main.py

"""
CLI entrypoint.

Subcommands:
- serve:   run the HTTP API under uvicorn
- console: interactive todo client talking to the API
- session: issue a development session token for a user id
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ..auth.sessions import SessionStore
from ..cli.bootstrap import create_console_context, create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def cmd_serve(settings, ns: argparse.Namespace) -> int:
    import uvicorn

    from ..server.app import create_app

    state = create_initial_state(settings=settings)
    app = create_app(state)

    host = ns.host or settings.host
    port = int(ns.port or settings.port)
    logger.info("Serving %s on http://%s:%s", settings.app_name, host, port)
    # log_config=None keeps the handlers installed by setup_logging.
    uvicorn.run(app, host=host, port=port, log_config=None)
    logger.info("Bye.")
    return 0


def cmd_console(settings, ns: argparse.Namespace) -> int:
    ctx = create_console_context(settings=settings)
    try:
        run_console_loop(ctx)
    finally:
        close = getattr(ctx.vm.api, "close", None)
        if close is not None:
            close()
        logger.info("Bye.")
    return 0


def cmd_session(settings, ns: argparse.Namespace) -> int:
    sessions = SessionStore(settings.sessions_db_path)
    token = sessions.create_session(
        ns.user_id,
        email=ns.email,
        name=ns.name,
        ttl_hours=int(ns.ttl_hours or settings.session_ttl_hours),
    )
    print(token)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tickoff",
        description="tickoff: a per-user todo list (HTTP API + console client).",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("serve", help="Run the HTTP API.")
    s.add_argument("--host", help="Bind address (default: TICKOFF_HOST or 127.0.0.1).")
    s.add_argument("--port", type=int, help="Port (default: TICKOFF_PORT or 8787).")
    s.set_defaults(func=cmd_serve)

    s = sub.add_parser("console", help="Interactive todo client.")
    s.set_defaults(func=cmd_console)

    s = sub.add_parser("session", help="Issue a development session token.")
    s.add_argument("user_id", help="User id the token resolves to.")
    s.add_argument("--email", help="Display email.")
    s.add_argument("--name", help="Display name.")
    s.add_argument("--ttl-hours", type=int, help="Lifetime in hours (default: TICKOFF_SESSION_TTL_HOURS).")
    s.set_defaults(func=cmd_session)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    settings = get_settings()
    ns = build_parser().parse_args(argv)

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    # The console client prints its own output; keep its log lines to warnings.
    if ns.cmd == "console":
        console_level = max(console_level, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s %s...", settings.app_name, ns.cmd)
    return int(ns.func(settings, ns))


if __name__ == "__main__":
    raise SystemExit(main())
