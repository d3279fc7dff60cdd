# src/jotter/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the task list, JSON storage and console UI into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleUi
from ..core.ports import Ui
from ..core.state import AppState
from ..tasks.storage import JsonStorage

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, ui: Ui | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and ui injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = JsonStorage(settings.storage_path)
    tasks = storage.load()

    if ui is None:
        ui = ConsoleUi(timestamps=settings.timestamps)

    return AppState(
        settings=settings,
        tasks=tasks,
        storage=storage,
        ui=ui,
        autosave=settings.autosave,
    )


def save_state(state: AppState) -> bool:
    ok = state.storage.save(state.tasks)
    if ok:
        logger.info("Saved %d tasks.", len(state.tasks))
    return ok
