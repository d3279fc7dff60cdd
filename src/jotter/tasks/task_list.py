# src/jotter/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import InvalidIndexError
from ..core.models import Note, Task

logger = logging.getLogger(__name__)


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


class NoteList:
    """In-memory ordered notes. Indices seen by users are 1-based."""

    def __init__(self, notes: Iterable[Note] = ()) -> None:
        self._notes: list[Note] = list(notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._notes):
            raise InvalidIndexError(str(index), "note", size=len(self._notes))
        return index - 1

    def get(self, index: int) -> Note:
        return self._notes[self._position(index)]

    def add_note(self, note: Note) -> str:
        self._notes.append(note)
        logger.debug("Note added title=%r total=%d", note.title, len(self._notes))
        return (
            "Got it. I've added this note:\n"
            f"  {note}\n"
            f"Now you have {_count(len(self._notes), 'note')}."
        )

    def delete_note(self, index: int) -> str:
        note = self._notes.pop(self._position(index))
        logger.debug("Note deleted index=%d total=%d", index, len(self._notes))
        return (
            "Noted. I've removed this note:\n"
            f"  {note}\n"
            f"Now you have {_count(len(self._notes), 'note')}."
        )

    def render(self) -> str:
        if not self._notes:
            return "You have no notes."
        lines = ["Here are your notes:"]
        for i, note in enumerate(self._notes, start=1):
            lines.append(f"{i}.{note}")
        return "\n".join(lines)


class TaskList:
    """
    In-memory ordered task list plus the user's notes.

    Every mutating/query method returns the confirmation text shown to the user.
    """

    def __init__(self, tasks: Iterable[Task] = (), notes: NoteList | None = None) -> None:
        self._tasks: list[Task] = list(tasks)
        self.notes = notes if notes is not None else NoteList()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise InvalidIndexError(str(index), "task", size=len(self._tasks))
        return index - 1

    def get(self, index: int) -> Task:
        return self._tasks[self._position(index)]

    def create_task(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added type=%s total=%d", task.task_type, len(self._tasks))
        return (
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(self._tasks), 'task')} in the list."
        )

    def delete_task(self, index: int) -> str:
        task = self._tasks.pop(self._position(index))
        logger.debug("Task deleted index=%d total=%d", index, len(self._tasks))
        return (
            "Noted. I've removed this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(self._tasks), 'task')} in the list."
        )

    def mark_done(self, index: int) -> str:
        task = self.get(index)
        task.mark_done()
        return f"Nice! I've marked this task as done:\n  {task}"

    def render(self) -> str:
        if not self._tasks:
            return "Your task list is empty."
        lines = ["Here are the tasks in your list:"]
        for i, task in enumerate(self._tasks, start=1):
            lines.append(f"{i}.{task}")
        return "\n".join(lines)

    def find(self, query: str) -> str:
        """Case-sensitive substring search; matches keep their list positions."""
        matches = [
            (i, task) for i, task in enumerate(self._tasks, start=1) if query in task.description
        ]
        if not matches:
            return "No matching tasks found."
        lines = ["Here are the matching tasks in your list:"]
        for i, task in matches:
            lines.append(f"{i}.{task}")
        return "\n".join(lines)
