# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings once and wires the
concrete TodoStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable lets tests point the store at any path.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TodoStore(settings.todo_data_path)
    logger.debug("TodoStore ready path=%s exists=%s", store.path, store.exists())
    return AppState(settings=settings, todo_store=store)
