# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from ..core.state import AppState
from ..todos.todo_api import (
    clear_todos,
    create_todo,
    delete_todo,
    list_todos,
    missing_priorities,
)
from ..todos.todo_models import Todo

logger = logging.getLogger(__name__)

NO_TODOS = "No todos!"
NEW_USAGE_ERROR = "Must pass an integer priority and text string."
DEL_USAGE_ERROR = "Must pass a valid todo id. See valid todo ids via the `list` subcommand."

_PRIORITY_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class CommandResult:
    """What a subcommand prints: normal output and error output."""

    stdout: str
    stderr: str = ""

    def __iter__(self) -> Iterator[str]:
        # Allows `stdout, stderr = handle(...)`.
        return iter((self.stdout, self.stderr))


CommandHandler = Callable[[AppState, list[str]], CommandResult]


class CommandRegistry:
    """Subcommand registry: the first CLI token picks the handler."""

    def __init__(self, program: str = "todo") -> None:
        self._program = program
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, str] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, usage: str, help_text: str) -> None:
        self._handlers[name] = handler
        self._usage[name] = usage
        self._help[name] = help_text

    def handle(self, state: AppState, args: Sequence[str]) -> CommandResult:
        """
        Dispatch on args[0]. No subcommand shows help; an unknown one shows
        help plus an error. Storage failures are not caught here.
        """
        if not args:
            return CommandResult(self.build_help())

        name, rest = args[0], list(args[1:])
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown subcommand %r", name)
            return CommandResult(self.build_help(), f"No valid subcommand `{name}`.")

        logger.debug("Running subcommand %s args=%s", name, rest)
        return handler(state, rest)

    def build_help(self) -> str:
        width = max((len(u) for u in self._usage.values()), default=0)
        lines = [f"Usage: {self._program} <subcommand> [arguments]", "", "Subcommands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {self._usage[name].ljust(width)}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _usage_error(message: str) -> CommandResult:
    return CommandResult(HELP_TEXT, message)


def format_todo_row(todo: Todo) -> str:
    return f"{todo.priority:>8}  {todo.id:<4}  {todo.text}"


def format_todo_table(todos: Sequence[Todo]) -> str:
    """
    Render todos (already sorted) as a fixed-width table, followed by the
    gaps in the priority sequence when there are any. Every line ends in \\n.
    """
    lines = [f"{'Priority':>8}  {'ID':<4}  Todo"]
    lines.extend(format_todo_row(todo) for todo in todos)
    out = "\n".join(lines) + "\n"

    missing = missing_priorities(t.priority for t in todos)
    if missing:
        out += "\nMissing priorities:\n"
        out += ", ".join(str(p) for p in missing) + "\n"
    return out


def cmd_help(state: AppState, args: list[str]) -> CommandResult:
    return CommandResult(HELP_TEXT)


def cmd_list(state: AppState, args: list[str]) -> CommandResult:
    todos = list_todos(state.todo_store)
    if not todos:
        return CommandResult(NO_TODOS)
    return CommandResult(format_todo_table(todos))


def cmd_new(state: AppState, args: list[str]) -> CommandResult:
    """
    new <priority> <text>

    Priority must be a plain non-negative base-10 integer.
    """
    if len(args) != 2 or not _PRIORITY_RE.fullmatch(args[0]):
        return _usage_error(NEW_USAGE_ERROR)

    priority, text = int(args[0]), args[1]
    todo = create_todo(state.todo_store, priority=priority, text=text)
    return CommandResult(f'Created todo with priority {todo.priority}: "{todo.text}".')


def cmd_del(state: AppState, args: list[str]) -> CommandResult:
    if len(args) != 1:
        return _usage_error(DEL_USAGE_ERROR)

    todo = delete_todo(state.todo_store, args[0])
    if todo is None:
        return _usage_error(DEL_USAGE_ERROR)
    return CommandResult(f'Deleted todo with priority {todo.priority}: "{todo.text}".')


def cmd_clear(state: AppState, args: list[str]) -> CommandResult:
    clear_todos(state.todo_store)
    return CommandResult("Cleared all todos.")


registry.register("list", cmd_list, "list", "List todos, highest priority (lowest number) first.")
registry.register("new", cmd_new, "new <priority> <text>", "Create a todo with an integer priority.")
registry.register("del", cmd_del, "del <id>", "Delete the todo with the given id.")
registry.register("clear", cmd_clear, "clear", "Delete all todos.")
registry.register("help", cmd_help, "help", "Show this help text.")

HELP_TEXT = registry.build_help()


def handle(state: AppState, args: Sequence[str]) -> CommandResult:
    return registry.handle(state, args)
