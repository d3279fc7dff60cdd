# src/jotter/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import Storage, TaskListPort, Ui


@dataclass
class AppState:
    # Settings object (Settings in production, SimpleNamespace in tests).
    settings: Any

    tasks: TaskListPort
    storage: Storage
    ui: Ui

    autosave: bool = True
