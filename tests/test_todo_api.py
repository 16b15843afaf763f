# tests/test_todo_api.py

from __future__ import annotations

import random

import pytest

from todo_cli.todos import todo_api
from todo_cli.todos.todo_api import (
    ID_ALPHABET,
    clear_todos,
    create_todo,
    delete_todo,
    generate_todo_id,
    list_todos,
    missing_priorities,
    sorted_todos,
)
from todo_cli.todos.todo_models import Todo


class ConstantRandom(random.Random):
    """RNG whose choice() always returns the first element."""

    def choice(self, seq):
        return seq[0]


@pytest.mark.parametrize(
    ("priorities", "expected"),
    [
        ([], []),
        ([0], []),
        ([1], []),
        ([1, 2], []),
        ([1, 3], [2]),
        ([9, 7, 12, 5, 16, 12], [1, 2, 3, 4, 6, 8, 10, 11, 13, 14, 15]),
        ([0, 4], [1, 2, 3]),
    ],
)
def test_missing_priorities(priorities, expected) -> None:
    assert missing_priorities(priorities) == expected


def test_sorted_todos_breaks_ties_by_id() -> None:
    todos = [
        Todo(id="b000", priority=2, text=""),
        Todo(id="c000", priority=1, text=""),
        Todo(id="a000", priority=2, text=""),
    ]
    assert [t.id for t in sorted_todos(todos)] == ["c000", "a000", "b000"]


def test_generate_todo_id_shape() -> None:
    todo_id = generate_todo_id(set(), rng=random.Random(7))
    assert len(todo_id) == 4
    assert all(ch in ID_ALPHABET for ch in todo_id)

    assert len(generate_todo_id(set())) == 4


def test_generate_todo_id_retries_on_collision() -> None:
    first = generate_todo_id(set(), rng=random.Random(42))
    second = generate_todo_id({first}, rng=random.Random(42))
    assert second != first
    assert len(second) == 4


def test_generate_todo_id_falls_back_to_longer_ids() -> None:
    short = ID_ALPHABET[0] * 4
    todo_id = generate_todo_id({short}, rng=ConstantRandom())
    assert todo_id == ID_ALPHABET[0] * 8


def test_generate_todo_id_gives_up_eventually() -> None:
    taken = {ID_ALPHABET[0] * 4, ID_ALPHABET[0] * 8}
    with pytest.raises(RuntimeError):
        generate_todo_id(taken, rng=ConstantRandom())


def test_create_list_delete_clear(store) -> None:
    a = create_todo(store, priority=2, text="second", rng=random.Random(1))
    b = create_todo(store, priority=1, text="first", rng=random.Random(2))

    assert a.id != b.id
    assert list_todos(store) == [b, a]

    assert delete_todo(store, "none") is None
    assert delete_todo(store, a.id) == a
    assert list_todos(store) == [b]

    clear_todos(store)
    assert list_todos(store) == []
    assert store.path.read_text("utf-8") == "{}"


def test_create_todo_rejects_negative_priority(store) -> None:
    with pytest.raises(ValueError):
        create_todo(store, priority=-1, text="nope")
    assert not store.exists()


def test_delete_missing_id_does_not_write(store, monkeypatch) -> None:
    def fail_save(todos):
        raise AssertionError("save must not be called")

    monkeypatch.setattr(store, "save", fail_save)
    assert todo_api.delete_todo(store, "abcd") is None
