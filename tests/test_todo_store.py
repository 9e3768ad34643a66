from __future__ import annotations

import threading

import pytest

from app.services.todo_store import TodoStore


def test_unknown_user_lists_empty(store: TodoStore) -> None:
    assert store.list("nobody") == []
    # reading does not create an entry
    assert store.usernames() == []


def test_add_echoes_todo_verbatim(store: TodoStore) -> None:
    assert store.add("alice", "buy milk") == "buy milk"
    assert store.add("alice", "") == ""
    assert store.add("alice", "  padded  ") == "  padded  "
    assert store.list("alice") == ["buy milk", "", "  padded  "]


def test_list_preserves_add_order(store: TodoStore) -> None:
    todos = [f"todo {i}" for i in range(10)]
    for todo in todos:
        store.add("alice", todo)

    assert store.list("alice") == todos
    assert store.list("alice") == store.list("alice")


def test_list_returns_copy(store: TodoStore) -> None:
    store.add("alice", "buy milk")

    listed = store.list("alice")
    listed.append("injected")

    assert store.list("alice") == ["buy milk"]


def test_users_are_isolated_and_case_sensitive(store: TodoStore) -> None:
    store.add("alice", "x")

    assert store.list("bob") == []
    assert store.list("Alice") == []
    assert store.list("alice") == ["x"]


def test_delete_removes_and_shifts(store: TodoStore) -> None:
    for todo in ["a", "b", "c", "d"]:
        store.add("alice", todo)

    assert store.delete("alice", 1) is True
    assert store.list("alice") == ["a", "c", "d"]

    assert store.delete("alice", 2) is True
    assert store.list("alice") == ["a", "c"]
    assert store.count("alice") == 2


@pytest.mark.parametrize("index", [-1, -5, 2, 3, 100])
def test_delete_out_of_range_is_noop(store: TodoStore, index: int) -> None:
    store.add("alice", "a")
    store.add("alice", "b")

    assert store.delete("alice", index) is False
    assert store.list("alice") == ["a", "b"]


def test_delete_unknown_user_is_noop(store: TodoStore) -> None:
    assert store.delete("ghost", 0) is False
    assert store.list("ghost") == []
    assert store.usernames() == []


def test_deleting_last_todo_keeps_user_listable(store: TodoStore) -> None:
    store.add("alice", "only")

    assert store.delete("alice", 0) is True
    assert store.list("alice") == []
    assert store.delete("alice", 0) is False


def test_walkthrough(store: TodoStore) -> None:
    assert store.add("alice", "buy milk") == "buy milk"
    assert store.list("alice") == ["buy milk"]
    store.add("alice", "walk dog")
    assert store.list("alice") == ["buy milk", "walk dog"]
    store.delete("alice", 0)
    assert store.list("alice") == ["walk dog"]
    store.delete("alice", 5)
    assert store.list("alice") == ["walk dog"]


def test_concurrent_adds_are_not_lost(store: TodoStore) -> None:
    def worker(n: int) -> None:
        for i in range(200):
            store.add("shared", f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.count("shared") == 8 * 200


def test_append_returns_stored_index(store: TodoStore) -> None:
    assert store.append("alice", "a") == 0
    assert store.append("alice", "b") == 1
    assert store.append("bob", "c") == 0
    assert store.list("alice") == ["a", "b"]
