# src/todo_cli/todos/todo_api.py

"""
Read-modify-write helpers over TodoStore.

Every helper loads the store fresh, applies one change and writes the whole
mapping back. Nothing here formats text for the terminal; see cli/commands.py.
"""

from __future__ import annotations

import logging
import random
import secrets
import string
from collections.abc import Collection, Iterable

from .todo_models import Todo
from .todo_store import TodoStore

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 4
FALLBACK_ID_LENGTH = 8
MAX_ID_ATTEMPTS = 64


def _draw_id(length: int, rng: random.Random | None) -> str:
    if rng is None:
        return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))
    return "".join(rng.choice(ID_ALPHABET) for _ in range(length))


def generate_todo_id(existing: Collection[str], *, rng: random.Random | None = None) -> str:
    """
    Return a random ID not present in `existing`.

    Short IDs are tried first. After MAX_ID_ATTEMPTS collisions the length
    grows to FALLBACK_ID_LENGTH, so the loop is always bounded.
    """
    for length in (ID_LENGTH, FALLBACK_ID_LENGTH):
        for _ in range(MAX_ID_ATTEMPTS):
            todo_id = _draw_id(length, rng)
            if todo_id not in existing:
                return todo_id
        logger.warning(
            "Gave up on %d-character todo ids after %d collisions.", length, MAX_ID_ATTEMPTS
        )
    raise RuntimeError("Could not generate a unique todo id")


def sorted_todos(todos: Iterable[Todo]) -> list[Todo]:
    """Ascending priority, ties broken by ascending id."""
    return sorted(todos, key=lambda t: (t.priority, t.id))


def missing_priorities(priorities: Iterable[int]) -> list[int]:
    """
    Priorities from 1 up to (but excluding) the highest one in use that no
    todo currently has.
    """
    present = set(priorities)
    if not present:
        return []
    return [p for p in range(1, max(present)) if p not in present]


def list_todos(store: TodoStore) -> list[Todo]:
    return sorted_todos(store.load().values())


def create_todo(
    store: TodoStore,
    *,
    priority: int,
    text: str,
    rng: random.Random | None = None,
) -> Todo:
    if priority < 0:
        raise ValueError("priority must be non-negative")

    todos = store.load()
    todo = Todo(id=generate_todo_id(todos.keys(), rng=rng), priority=priority, text=text)
    todos[todo.id] = todo
    store.save(todos)
    logger.info("Todo created id=%s priority=%s", todo.id, todo.priority)
    return todo


def delete_todo(store: TodoStore, todo_id: str) -> Todo | None:
    """Remove and return the todo with `todo_id`; None (and no write) if absent."""
    todos = store.load()
    todo = todos.pop(todo_id, None)
    if todo is None:
        logger.debug("No todo with id=%s; store left untouched.", todo_id)
        return None
    store.save(todos)
    logger.info("Todo deleted id=%s priority=%s", todo.id, todo.priority)
    return todo


def clear_todos(store: TodoStore) -> None:
    store.save({})
    logger.info("All todos cleared (%s).", store.path)
