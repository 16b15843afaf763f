# src/todo_cli/todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class TodoStoreError(ValueError):
    """Raised when the todo file holds something other than a todo mapping."""


@dataclass(slots=True)
class Todo:
    id: str
    priority: int
    text: str

    @classmethod
    def from_record(cls, todo_id: str, record: Any) -> Todo:
        """
        Build a Todo from one value of the on-disk JSON object.

        Records must carry an integer "priority" and a string "text";
        anything else is rejected instead of being defaulted.
        """
        if not isinstance(record, dict):
            raise TodoStoreError(f"todo {todo_id!r} is not an object")

        priority = record.get("priority")
        # bool is an int subclass; true/false is not a priority.
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise TodoStoreError(f"todo {todo_id!r} has no integer priority")

        text = record.get("text")
        if not isinstance(text, str):
            raise TodoStoreError(f"todo {todo_id!r} has no text string")

        return cls(id=todo_id, priority=priority, text=text)

    def to_record(self) -> dict[str, Any]:
        return {"priority": self.priority, "text": self.text}
