# src/tickoff/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..client.view_model import TodoViewModel
from ..todos.todo_models import Todo, TodoFilter

logger = logging.getLogger(__name__)


@dataclass
class ConsoleContext:
    vm: TodoViewModel
    app_name: str = "tickoff"
    api_url: str = ""
    signed_in: bool = False


CommandHandler = Callable[[ConsoleContext, list[str]], str]


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, ctx: ConsoleContext, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(ctx, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other text adds it as a new todo.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----

_EMPTY_MESSAGES = {
    TodoFilter.ALL: "No todos yet. Add one above!",
    TodoFilter.ACTIVE: "No active todos",
    TodoFilter.COMPLETED: "No completed todos",
}


def _tab(label: str, n: int, selected: bool) -> str:
    text = f"{label} ({n})" if n > 0 else label
    return f"[{text}]" if selected else text


def render_todos(vm: TodoViewModel) -> str:
    if not vm.loaded:
        return "Loading todos..."

    c = vm.counts
    tabs = " | ".join(
        [
            _tab("All", c.total, vm.todo_filter == TodoFilter.ALL),
            _tab("Active", c.active, vm.todo_filter == TodoFilter.ACTIVE),
            _tab("Completed", c.completed, vm.todo_filter == TodoFilter.COMPLETED),
        ]
    )
    lines = [tabs]

    visible = vm.visible
    if not visible:
        lines.append(f"  {_EMPTY_MESSAGES[vm.todo_filter]}")
    else:
        for i, t in enumerate(visible, start=1):
            mark = "x" if t.completed else " "
            lines.append(f"  {i:>2}. [{mark}] {t.title}")

    if c.completed > 0:
        noun = "task" if c.active == 1 else "tasks"
        lines.append(f"{c.active} {noun} remaining. Use /clear to remove completed.")

    return "\n".join(lines)


def _with_result(ctx: ConsoleContext, ok: bool) -> str:
    if not ok and ctx.vm.error:
        return f"Error: {ctx.vm.error}"
    return render_todos(ctx.vm)


def _parse_number(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _pick(ctx: ConsoleContext, args: list[str], usage: str) -> tuple[Todo | None, str]:
    if not args:
        return None, usage
    number = _parse_number(args[0])
    if number is None:
        return None, usage
    todo = ctx.vm.pick(number)
    if todo is None:
        return None, f"No todo #{number} in the current view."
    return todo, ""


# ---- handlers ----


def cmd_help(ctx: ConsoleContext, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(ctx: ConsoleContext, args: list[str]) -> str:
    """
    /list             -> current filter
    /list active      -> switch filter, then show
    """
    if args:
        try:
            ctx.vm.set_filter(args[0])
        except ValueError as e:
            return str(e)
        logger.debug("Console filter -> %s", ctx.vm.todo_filter)
    if not ctx.vm.loaded:
        return _with_result(ctx, ctx.vm.refresh())
    return render_todos(ctx.vm)


def cmd_refresh(ctx: ConsoleContext, args: list[str]) -> str:
    return _with_result(ctx, ctx.vm.refresh())


def cmd_add(ctx: ConsoleContext, args: list[str]) -> str:
    title = " ".join(args).strip()
    if not title:
        return "Usage: /add <title>"
    return _with_result(ctx, ctx.vm.create(title))


def cmd_toggle(ctx: ConsoleContext, args: list[str]) -> str:
    todo, err = _pick(ctx, args, "Usage: /toggle <n>")
    if todo is None:
        return err
    return _with_result(ctx, ctx.vm.toggle(todo))


def cmd_rename(ctx: ConsoleContext, args: list[str]) -> str:
    usage = "Usage: /rename <n> <new title>"
    todo, err = _pick(ctx, args, usage)
    if todo is None:
        return err
    title = " ".join(args[1:]).strip()
    if not title:
        return usage
    return _with_result(ctx, ctx.vm.rename(todo, title))


def cmd_rm(ctx: ConsoleContext, args: list[str]) -> str:
    todo, err = _pick(ctx, args, "Usage: /rm <n>")
    if todo is None:
        return err
    return _with_result(ctx, ctx.vm.delete(todo))


def cmd_clear(ctx: ConsoleContext, args: list[str]) -> str:
    return _with_result(ctx, ctx.vm.clear_completed())


def cmd_whoami(ctx: ConsoleContext, args: list[str]) -> str:
    auth = "token configured" if ctx.signed_in else "no token (set TICKOFF_API_TOKEN)"
    return f"Server: {ctx.api_url or '(unknown)'}\nSession: {auth}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "list",
    cmd_list,
    help_text="Show todos; optional filter: /list all | active | completed.",
    aliases=["ls", "filter"],
)
registry.register("refresh", cmd_refresh, help_text="Refetch todos from the server.")
registry.register("add", cmd_add, help_text="Add a todo: /add <title>.")
registry.register(
    "toggle", cmd_toggle, help_text="Toggle completion: /toggle <n>.", aliases=["done", "t"]
)
registry.register("rename", cmd_rename, help_text="Rename: /rename <n> <new title>.")
registry.register("rm", cmd_rm, help_text="Delete a todo: /rm <n>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Remove all completed todos.")
registry.register("whoami", cmd_whoami, help_text="Show server and session info.")
