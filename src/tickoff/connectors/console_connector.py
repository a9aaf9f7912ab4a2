# src/tickoff/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import ConsoleContext, cmd_add, render_todos
from ..cli.commands import registry as command_registry

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(ctx: ConsoleContext, line: str) -> str | None:
    """
    One REPL step: slash commands go to the registry, any other text becomes a new todo.
    Returns the text to show, or None for blank input.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(ctx, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply

    return cmd_add(ctx, [line])


def run_console_loop(ctx: ConsoleContext, read: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (api=%s).", ctx.api_url)
    _print_ts(f"[{ctx.app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    ctx.vm.refresh()
    if ctx.vm.error:
        _print_ts(f"Error: {ctx.vm.error}")
    else:
        print(render_todos(ctx.vm))

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(ctx, user_input)
        if reply is not None:
            _print_ts(reply)

    logger.info("Console connector finished.")
