# src/jotter/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands execute against these Protocols instead of concrete classes,
so the list, the console and the storage stay swappable in tests.
"""

from typing import Any, Protocol


class NoteListPort(Protocol):
    def add_note(self, note: Any) -> str: ...
    def delete_note(self, index: int) -> str: ...
    def render(self) -> str: ...
    def __len__(self) -> int: ...


class TaskListPort(Protocol):
    notes: NoteListPort

    def create_task(self, task: Any) -> str: ...
    def get(self, index: int) -> Any: ...
    def delete_task(self, index: int) -> str: ...
    def mark_done(self, index: int) -> str: ...
    def render(self) -> str: ...
    def find(self, query: str) -> str: ...
    def __len__(self) -> int: ...


class Ui(Protocol):
    """Console-side port: how the loop talks to the user."""

    def read_line(self) -> str: ...
    def show(self, text: str) -> None: ...
    def show_error(self, text: str) -> None: ...


class Storage(Protocol):
    def load(self) -> Any: ...  # TaskList (kept as Any to avoid import coupling)
    def save(self, tasks: Any) -> bool: ...
