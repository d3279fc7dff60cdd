# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from jotter.core.state import AppState
from jotter.tasks.task_list import TaskList

from .fakes import FakeStorage, FakeUi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and .env files.
    """
    return SimpleNamespace(
        app_name="jotter",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "jotter.json",
        autosave=True,
        timestamps=False,
    )


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def state(settings: SimpleNamespace, tasks: TaskList, storage: FakeStorage) -> AppState:
    """AppState wired with an in-memory list, fake storage and a scripted UI."""
    return AppState(
        settings=settings,
        tasks=tasks,
        storage=storage,
        ui=FakeUi(),
        autosave=settings.autosave,
    )
