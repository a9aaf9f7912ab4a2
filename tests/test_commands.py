# tests/test_commands.py

from __future__ import annotations

from tickoff.cli.commands import CommandRegistry, ConsoleContext, render_todos
from tickoff.client.view_model import TodoViewModel
from tickoff.connectors.console_connector import handle_line, run_console_loop

from .fakes import FakeTodoApi, make_todo


def _ctx(todos=None) -> tuple[ConsoleContext, FakeTodoApi]:
    api = FakeTodoApi(todos)
    return ConsoleContext(vm=TodoViewModel(api=api), api_url="http://testserver"), api


def test_command_registry_routes_and_aliases() -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def h(ctx, args):
        seen.append(args)
        return "ok"

    reg.register("a", h, "a", aliases=["alpha"])
    ctx, _ = _ctx()

    assert reg.handle(ctx, "/a x y") == "ok"
    assert reg.handle(ctx, "/ALPHA") == "ok"
    assert seen == [["x", "y"], []]


def test_command_registry_unknown_and_non_command() -> None:
    reg = CommandRegistry()
    ctx, _ = _ctx()
    assert reg.handle(ctx, "hello") is None
    assert "Unknown command" in (reg.handle(ctx, "/nope") or "")
    assert "Empty command" in (reg.handle(ctx, "/") or "")


def test_render_empty_states() -> None:
    ctx, _ = _ctx()
    assert render_todos(ctx.vm) == "Loading todos..."

    ctx.vm.refresh()
    assert "No todos yet. Add one above!" in render_todos(ctx.vm)
    ctx.vm.set_filter("active")
    assert "No active todos" in render_todos(ctx.vm)
    ctx.vm.set_filter("completed")
    assert "No completed todos" in render_todos(ctx.vm)


def test_render_counts_and_footer() -> None:
    ctx, _ = _ctx(
        [
            make_todo("a", "walk dog", completed=False, created_at=2),
            make_todo("b", "buy milk", completed=True, created_at=1),
        ]
    )
    ctx.vm.refresh()
    out = render_todos(ctx.vm)

    assert out.splitlines()[0] == "[All (2)] | Active (1) | Completed (1)"
    assert "1. [ ] walk dog" in out
    assert "2. [x] buy milk" in out
    assert "1 task remaining" in out


def test_plain_text_adds_and_numbered_commands() -> None:
    ctx, api = _ctx()
    ctx.vm.refresh()

    out = handle_line(ctx, "buy  milk")
    assert "[ ] buy  milk" in (out or "")

    out = handle_line(ctx, "/toggle 1")
    assert "[x] buy  milk" in (out or "")

    assert handle_line(ctx, "/toggle 9") == "No todo #9 in the current view."
    assert handle_line(ctx, "/rm x") == "Usage: /rm <n>"

    out = handle_line(ctx, "/rename 1 buy bread")
    assert "[x] buy bread" in (out or "")

    out = handle_line(ctx, "/clear")
    assert "No todos yet" in (out or "")
    assert handle_line(ctx, "   ") is None


def test_errors_are_shown_verbatim() -> None:
    ctx, api = _ctx()
    ctx.vm.refresh()
    api.fail_next = "Title is required"
    assert handle_line(ctx, "/add something") == "Error: Title is required"


def test_list_with_unknown_filter() -> None:
    ctx, _ = _ctx()
    out = handle_line(ctx, "/list done") or ""
    assert "Unknown filter" in out


def test_console_loop_exits_on_command(capsys) -> None:
    ctx, api = _ctx()
    lines = iter(["first task", "/exit", "never reached"])

    run_console_loop(ctx, read=lambda _prompt: next(lines))

    printed = capsys.readouterr().out
    assert "first task" in printed
    assert [c for c in api.calls if c[0] == "create_todo"] == [("create_todo", ("first task",))]
