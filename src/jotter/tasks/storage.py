# src/jotter/tasks/storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any

from ..core.models import Deadline, Event, Note, Priority, Task, TaskType, Todo
from .task_list import NoteList, TaskList

logger = logging.getLogger(__name__)


def _task_to_dict(task: Task) -> dict[str, Any]:
    d: dict[str, Any] = {
        "type": str(task.task_type),
        "description": task.description,
        "done": task.done,
    }
    if isinstance(task, Deadline):
        d["by"] = task.by.isoformat()
    elif isinstance(task, Event):
        d["at"] = task.at
    return d


def _task_from_dict(d: dict[str, Any]) -> Task:
    kind = TaskType(str(d.get("type", "")))
    description = str(d.get("description", ""))
    done = d.get("done", False)
    if not isinstance(done, bool):
        raise TypeError(f"done must be a boolean, got {done!r}")
    if kind is TaskType.DEADLINE:
        return Deadline(description, done, by=date.fromisoformat(str(d["by"])))
    if kind is TaskType.EVENT:
        return Event(description, done, at=str(d["at"]))
    return Todo(description, done)


def _note_to_dict(note: Note) -> dict[str, Any]:
    return {
        "title": note.title,
        "description": note.description,
        "priority": str(note.priority),
    }


def _note_from_dict(d: dict[str, Any]) -> Note:
    return Note(
        title=str(d["title"]),
        description=str(d["description"]),
        priority=Priority(str(d["priority"])),
    )


class JsonStorage:
    """
    JSON snapshot of the task list and notes.

    Format:
        {"tasks": [{"type": "deadline", "description": ..., "done": ..., "by": "YYYY-MM-DD"}],
         "notes": [{"title": ..., "description": ..., "priority": "high"}]}

    Loading is best-effort: unreadable files and bad records are logged and skipped.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No saved data at %s, starting with an empty list.", self._path)
            return TaskList()

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read saved data from %s", self._path)
            return TaskList()

        if not isinstance(data, dict):
            logger.warning("Ignoring saved data in %s: not a JSON object.", self._path)
            return TaskList()

        tasks: list[Task] = []
        for raw in self._records(data, "tasks"):
            try:
                tasks.append(_task_from_dict(raw))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping bad task record: %r", raw)

        notes: list[Note] = []
        for raw in self._records(data, "notes"):
            try:
                notes.append(_note_from_dict(raw))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping bad note record: %r", raw)

        logger.info("Loaded %d tasks and %d notes from %s", len(tasks), len(notes), self._path)
        return TaskList(tasks, NoteList(notes))

    def _records(self, data: dict[str, Any], key: str) -> list[Any]:
        records = data.get(key)
        if records is None:
            return []
        if not isinstance(records, list):
            logger.warning(
                "Ignoring %r in %s: expected a list, got %s.", key, self._path, type(records).__name__
            )
            return []
        return records

    def save(self, tasks: TaskList) -> bool:
        payload = {
            "tasks": [_task_to_dict(t) for t in tasks],
            "notes": [_note_to_dict(n) for n in tasks.notes],
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
            with contextlib.suppress(OSError):
                # Notes can be personal; keep the file private on disk.
                os.chmod(self._path, 0o600)
        except OSError:
            logger.exception("Failed to save data to %s", self._path)
            return False
        logger.debug("Saved %d tasks and %d notes to %s", len(tasks), len(tasks.notes), self._path)
        return True
