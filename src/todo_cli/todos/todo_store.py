# src/todo_cli/todos/todo_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from .todo_models import Todo, TodoStoreError

logger = logging.getLogger(__name__)


class TodoStore:
    """
    JSON file todo store.

    The file is either absent, empty, or a single JSON object:
        {"<id>": {"priority": <int>, "text": "<str>"}, ...}

    Absent and empty files both read as "no todos". Nothing is cached between
    calls: every load() goes back to disk.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> dict[str, Todo]:
        if not self._path.exists():
            logger.debug("Todo file %s does not exist; nothing to load.", self._path)
            return {}

        raw = self._path.read_text("utf-8")
        if not raw.strip():
            return {}

        # Malformed JSON is not recovered from: JSONDecodeError propagates.
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise TodoStoreError(f"{self._path} does not hold a JSON object")

        todos = {str(key): Todo.from_record(str(key), value) for key, value in data.items()}
        logger.debug("Loaded %d todos from %s", len(todos), self._path)
        return todos

    def save(self, todos: Mapping[str, Todo]) -> None:
        """Replace the file contents with the full mapping."""
        payload = {todo_id: todo.to_record() for todo_id, todo in todos.items()}

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Saved %d todos to %s", len(payload), self._path)
