# tests/conftest.py

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.todos.todo_store import TodoStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace rather than config.Settings keeps tests away from the
    real environment and the user's todo file.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        todo_data_path=tmp_path / "todos.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TodoStore:
    return TodoStore(settings.todo_data_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TodoStore) -> AppState:
    return AppState(settings=settings, todo_store=store)


@pytest.fixture()
def data_path(settings: SimpleNamespace) -> Path:
    return settings.todo_data_path


@pytest.fixture()
def write_data(data_path: Path):
    """Write raw todo data (dict -> JSON, str -> verbatim) to the store file."""

    def _write(data: dict | str) -> None:
        raw = data if isinstance(data, str) else json.dumps(data)
        data_path.write_text(raw, "utf-8")

    return _write


@pytest.fixture()
def read_data(data_path: Path):
    def _read() -> dict:
        return json.loads(data_path.read_text("utf-8"))

    return _read
