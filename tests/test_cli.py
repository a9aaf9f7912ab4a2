# tests/test_cli.py

from __future__ import annotations

import pytest

from tickoff.auth.sessions import SessionStore
from tickoff.cli.main import build_parser, cmd_session


def test_parser_requires_subcommand() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])

    ns = build_parser().parse_args(["serve", "--port", "9000"])
    assert ns.cmd == "serve"
    assert ns.port == 9000
    assert ns.host is None


def test_session_command_prints_resolvable_token(settings, capsys) -> None:
    ns = build_parser().parse_args(["session", "user-42", "--email", "u42@example.com"])

    assert cmd_session(settings, ns) == 0

    token = capsys.readouterr().out.strip()
    caller = SessionStore(settings.sessions_db_path).resolve(token)
    assert caller is not None
    assert caller.id == "user-42"
    assert caller.email == "u42@example.com"
