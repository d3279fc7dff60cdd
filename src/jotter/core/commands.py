# src/jotter/core/commands.py

"""
Executable command values produced by the parser.

Each command is a frozen dataclass that applies itself to a task list and
returns the text to show. Commands are one-shot: build, execute once, drop.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import ClassVar

from .errors import EmptyBodyError, UnknownInputError
from .models import Deadline, Event, Note, Priority, Task, TaskType, Todo
from .ports import TaskListPort

logger = logging.getLogger(__name__)

DEADLINE_SEPARATOR = " /by "
EVENT_SEPARATOR = " /at "

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

FAREWELL = "Bye. Hope to see you again soon!"


class CommandTag(StrEnum):
    ADD = "add"
    DELETE = "delete"
    DONE = "done"
    LIST = "list"
    FIND = "find"
    EXIT = "exit"
    NOTES_ADD = "notes_add"
    NOTES_LIST = "notes_list"
    NOTES_DELETE = "notes_delete"


class Command(ABC):
    tag: ClassVar[CommandTag]
    # Mutating commands are persisted by the console loop after they run.
    mutates: ClassVar[bool] = False

    @abstractmethod
    def execute(self, tasks: TaskListPort) -> str: ...

    def is_exit(self) -> bool:
        return False


def _split_payload(raw: str, separator: str, field: str, context: str) -> tuple[str, str]:
    head, sep, tail = raw.partition(separator)
    if not sep or not tail.strip():
        raise EmptyBodyError(field, context)
    return head, tail


@dataclass(frozen=True, slots=True)
class AddCommand(Command):
    """
    Add a todo/deadline/event.

    `raw_description` is the unparsed text after the keyword; separators and
    dates are only checked here, when the command runs.
    """

    task_type: str
    raw_description: str

    tag: ClassVar[CommandTag] = CommandTag.ADD
    mutates: ClassVar[bool] = True

    def build_task(self) -> Task:
        raw = self.raw_description
        if self.task_type == TaskType.TODO:
            task: Task = Todo(raw)
        elif self.task_type == TaskType.DEADLINE:
            description, by_text = _split_payload(raw, DEADLINE_SEPARATOR, "deadline", "deadline")
            # Only YYYY-MM-DD; fromisoformat alone also takes week dates and 20240101.
            if not _DATE_RE.fullmatch(by_text):
                raise UnknownInputError(by_text)
            try:
                by = date.fromisoformat(by_text)
            except ValueError:
                raise UnknownInputError(by_text) from None
            task = Deadline(description, by=by)
        elif self.task_type == TaskType.EVENT:
            description, at = _split_payload(raw, EVENT_SEPARATOR, "date and time", "event")
            task = Event(description, at=at)
        else:
            raise UnknownInputError(self.task_type)

        if not task.description.strip():
            raise EmptyBodyError("description", str(self.task_type))
        return task

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.create_task(self.build_task())


@dataclass(frozen=True, slots=True)
class DeleteCommand(Command):
    index: int

    tag: ClassVar[CommandTag] = CommandTag.DELETE
    mutates: ClassVar[bool] = True

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.delete_task(self.index)


@dataclass(frozen=True, slots=True)
class DoneCommand(Command):
    index: int

    tag: ClassVar[CommandTag] = CommandTag.DONE
    mutates: ClassVar[bool] = True

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.mark_done(self.index)


@dataclass(frozen=True, slots=True)
class ListCommand(Command):
    tag: ClassVar[CommandTag] = CommandTag.LIST

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.render()


@dataclass(frozen=True, slots=True)
class FindCommand(Command):
    query: str

    tag: ClassVar[CommandTag] = CommandTag.FIND

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.find(self.query)


@dataclass(frozen=True, slots=True)
class ExitCommand(Command):
    tag: ClassVar[CommandTag] = CommandTag.EXIT

    def execute(self, tasks: TaskListPort) -> str:
        logger.debug("Exit requested (tasks=%d)", len(tasks))
        return FAREWELL

    def is_exit(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotesAddCommand(Command):
    title: str
    description: str
    priority: Priority

    tag: ClassVar[CommandTag] = CommandTag.NOTES_ADD
    mutates: ClassVar[bool] = True

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.notes.add_note(Note(self.title, self.description, self.priority))


@dataclass(frozen=True, slots=True)
class NotesListCommand(Command):
    tag: ClassVar[CommandTag] = CommandTag.NOTES_LIST

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.notes.render()


@dataclass(frozen=True, slots=True)
class NotesDeleteCommand(Command):
    index: int

    tag: ClassVar[CommandTag] = CommandTag.NOTES_DELETE
    mutates: ClassVar[bool] = True

    def execute(self, tasks: TaskListPort) -> str:
        return tasks.notes.delete_note(self.index)
