# src/jotter/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import ClassVar

# Fixed English abbreviations; strftime("%b") follows the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TaskType(StrEnum):
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(slots=True)
class Task:
    description: str
    done: bool = False

    task_type: ClassVar[TaskType]
    icon: ClassVar[str]

    def mark_done(self) -> None:
        self.done = True

    def details(self) -> str:
        return ""

    def __str__(self) -> str:
        mark = "X" if self.done else " "
        return f"[{self.icon}][{mark}] {self.description}{self.details()}"


@dataclass(slots=True)
class Todo(Task):
    task_type: ClassVar[TaskType] = TaskType.TODO
    icon: ClassVar[str] = "T"


@dataclass(slots=True, kw_only=True)
class Deadline(Task):
    """Task due on a calendar date (parsed, unlike Event.at)."""

    by: date

    task_type: ClassVar[TaskType] = TaskType.DEADLINE
    icon: ClassVar[str] = "D"

    def details(self) -> str:
        return f" (by: {_MONTHS[self.by.month - 1]} {self.by.day} {self.by.year})"


@dataclass(slots=True, kw_only=True)
class Event(Task):
    """Task happening at a free-form time; `at` is kept verbatim."""

    at: str

    task_type: ClassVar[TaskType] = TaskType.EVENT
    icon: ClassVar[str] = "E"

    def details(self) -> str:
        return f" (at: {self.at})"


@dataclass(slots=True, frozen=True)
class Note:
    title: str
    description: str
    priority: Priority

    def __str__(self) -> str:
        return f"[{self.priority.name}] {self.title}: {self.description}"
