# tests/test_todo_store.py

from __future__ import annotations

from pathlib import Path

from tickoff.todos.todo_store import TodoStore


def test_add_list_newest_first(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")

    first = store.add_todo("u1", "first")
    second = store.add_todo("u1", "second")

    assert first.completed is False
    assert first.created_at == first.updated_at
    assert first.id != second.id

    items = store.list_todos("u1")
    assert [t.title for t in items] == ["second", "first"]
    assert store.list_todos("nobody") == []


def test_partial_update_keeps_other_fields(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")
    todo = store.add_todo("u1", "buy milk")

    done = store.update_todo("u1", todo.id, completed=True)
    assert done is not None
    assert done.title == "buy milk"
    assert done.completed is True
    assert done.updated_at >= done.created_at

    renamed = store.update_todo("u1", todo.id, title="buy oat milk")
    assert renamed is not None
    assert renamed.title == "buy oat milk"
    assert renamed.completed is True
    assert renamed.created_at == todo.created_at


def test_foreign_owner_is_invisible(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")
    todo = store.add_todo("alice", "secret")

    assert store.get_todo("bob", todo.id) is None
    assert store.update_todo("bob", todo.id, title="hijacked", completed=True) is None
    assert store.delete_todo("bob", todo.id) is False

    kept = store.get_todo("alice", todo.id)
    assert kept is not None
    assert kept.title == "secret"
    assert kept.completed is False


def test_delete_one_and_missing(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")
    a = store.add_todo("u1", "a")
    b = store.add_todo("u1", "b")

    assert store.delete_todo("u1", "does-not-exist") is False
    assert store.count_todos() == 2

    assert store.delete_todo("u1", a.id) is True
    assert [t.id for t in store.list_todos("u1")] == [b.id]


def test_delete_completed_is_scoped_and_idempotent(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")
    mine_done = store.add_todo("alice", "done")
    mine_open = store.add_todo("alice", "open")
    theirs_done = store.add_todo("bob", "bob done")
    store.update_todo("alice", mine_done.id, completed=True)
    store.update_todo("bob", theirs_done.id, completed=True)

    assert store.delete_completed("alice") == 1
    assert store.delete_completed("alice") == 0

    assert [t.id for t in store.list_todos("alice")] == [mine_open.id]
    assert [t.id for t in store.list_todos("bob")] == [theirs_done.id]


def test_store_reopens_existing_db(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "todos.sqlite3"
    TodoStore(db).add_todo("u1", "persisted")

    again = TodoStore(db)
    assert [t.title for t in again.list_todos("u1")] == ["persisted"]
