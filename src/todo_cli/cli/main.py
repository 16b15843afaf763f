# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs one subcommand and maps the result
to an exit code:
- 0: nothing on stderr
- 1: usage error (stderr set by the subcommand)
- 2: the todo file could not be read or written
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import handle
from ..config import get_settings
from ..logging_setup import setup_logging
from ..todos.todo_models import TodoStoreError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STORAGE = 2


def _write(stream, text: str) -> None:
    if not text:
        return
    stream.write(text if text.endswith("\n") else text + "\n")
    stream.flush()


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if getattr(settings, "log_to_file", False) else None
    setup_logging(log_dir=log_dir, console_level=console_level)
    logger.debug("Starting %s argv=%s", getattr(settings, "app_name", "todo"), list(argv))

    state = create_initial_state(settings=settings)

    try:
        result = handle(state, list(argv))
    except (json.JSONDecodeError, UnicodeDecodeError, TodoStoreError) as e:
        logger.exception("Todo file %s is unreadable.", state.todo_store.path)
        _write(sys.stderr, f"Cannot read todo file {state.todo_store.path}: {e}")
        return EXIT_STORAGE
    except OSError as e:
        logger.exception("I/O failure on todo file %s", state.todo_store.path)
        _write(sys.stderr, f"Cannot access todo file {state.todo_store.path}: {e}")
        return EXIT_STORAGE

    _write(sys.stdout, result.stdout)
    _write(sys.stderr, result.stderr)
    return EXIT_USAGE if result.stderr else EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
