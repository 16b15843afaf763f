# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..todos.todo_store import TodoStore


@dataclass
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: Any
    todo_store: TodoStore
