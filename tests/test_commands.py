# tests/test_commands.py

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from jotter.core.commands import (
    FAREWELL,
    AddCommand,
    CommandTag,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    NotesAddCommand,
    NotesDeleteCommand,
    NotesListCommand,
)
from jotter.core.errors import EmptyBodyError, InvalidIndexError, UnknownInputError
from jotter.core.models import Deadline, Event, Note, Priority, TaskType, Todo
from jotter.core.parser import parse
from jotter.tasks.task_list import TaskList


def run(tasks: TaskList, line: str) -> str:
    return parse(line).execute(tasks)


def test_todo_is_added_verbatim(tasks: TaskList) -> None:
    reply = run(tasks, "todo read book")
    assert tasks.get(1) == Todo("read book")
    assert "[T][ ] read book" in reply
    assert reply.endswith("Now you have 1 task in the list.")


def test_deadline_parses_iso_date(tasks: TaskList) -> None:
    run(tasks, "deadline submit /by 2024-01-01")
    task = tasks.get(1)
    assert isinstance(task, Deadline)
    assert task.description == "submit"
    assert task.by == date(2024, 1, 1)
    assert str(task) == "[D][ ] submit (by: Jan 1 2024)"


def test_deadline_without_separator(tasks: TaskList) -> None:
    with pytest.raises(EmptyBodyError) as ei:
        run(tasks, "deadline submit")
    assert (ei.value.field, ei.value.context) == ("deadline", "deadline")
    assert len(tasks) == 0


def test_deadline_with_empty_date(tasks: TaskList) -> None:
    with pytest.raises(EmptyBodyError):
        AddCommand(TaskType.DEADLINE, "submit /by ").execute(tasks)


def test_deadline_with_bad_date(tasks: TaskList) -> None:
    with pytest.raises(UnknownInputError) as ei:
        run(tasks, "deadline submit /by notadate")
    assert ei.value.token == "notadate"
    assert len(tasks) == 0


@pytest.mark.parametrize("by_text", ["2024-W01-1", "20240101", "2024-13-01", "2024-1-1"])
def test_deadline_date_must_be_year_month_day(tasks: TaskList, by_text: str) -> None:
    with pytest.raises(UnknownInputError) as ei:
        run(tasks, f"deadline submit /by {by_text}")
    assert ei.value.token == by_text
    assert len(tasks) == 0


def test_event_keeps_time_text_unparsed(tasks: TaskList) -> None:
    run(tasks, "event party /at next Friday-ish /at 7pm")
    task = tasks.get(1)
    assert isinstance(task, Event)
    assert task.description == "party"
    assert task.at == "next Friday-ish /at 7pm"


def test_event_without_separator(tasks: TaskList) -> None:
    with pytest.raises(EmptyBodyError) as ei:
        run(tasks, "event party")
    assert (ei.value.field, ei.value.context) == ("date and time", "event")


def test_empty_description_is_rejected_at_execute_time(tasks: TaskList) -> None:
    cmd = parse("todo")
    with pytest.raises(EmptyBodyError) as ei:
        cmd.execute(tasks)
    assert (ei.value.field, ei.value.context) == ("description", "todo")

    with pytest.raises(EmptyBodyError):
        AddCommand(TaskType.EVENT, " /at noon").execute(tasks)
    assert len(tasks) == 0


def test_unknown_task_type(tasks: TaskList) -> None:
    with pytest.raises(UnknownInputError) as ei:
        AddCommand("chore", "wash car").execute(tasks)
    assert ei.value.token == "chore"


@pytest.mark.parametrize(
    "line,expected",
    [
        ("todo buy milk / eggs", "buy milk / eggs"),
        ("deadline file taxes /by 2025-04-15", "file taxes"),
        ("event meet Bob /at cafe", "meet Bob"),
    ],
)
def test_description_is_text_before_separator(tasks: TaskList, line: str, expected: str) -> None:
    run(tasks, line)
    assert tasks.get(len(tasks)).description == expected


def test_done_and_delete(tasks: TaskList) -> None:
    run(tasks, "todo a")
    run(tasks, "todo b")

    reply = run(tasks, "done 2")
    assert reply == "Nice! I've marked this task as done:\n  [T][X] b"
    assert tasks.get(2).done is True

    reply = run(tasks, "delete 1")
    assert "[T][ ] a" in reply
    assert reply.endswith("Now you have 1 task in the list.")
    assert tasks.get(1).description == "b"


@pytest.mark.parametrize("line", ["delete 0", "done 3", "delete -1"])
def test_index_out_of_range(tasks: TaskList, line: str) -> None:
    run(tasks, "todo a")
    with pytest.raises(InvalidIndexError) as ei:
        run(tasks, line)
    assert ei.value.size == 1
    assert len(tasks) == 1


def test_list_and_find(tasks: TaskList) -> None:
    assert run(tasks, "list") == "Your task list is empty."

    run(tasks, "todo read book")
    run(tasks, "todo water plants")
    run(tasks, "todo return book")

    assert run(tasks, "list") == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] read book\n"
        "2.[T][ ] water plants\n"
        "3.[T][ ] return book"
    )
    assert run(tasks, "find book") == (
        "Here are the matching tasks in your list:\n"
        "1.[T][ ] read book\n"
        "3.[T][ ] return book"
    )
    assert run(tasks, "find Book") == "No matching tasks found."


def test_notes_commands(tasks: TaskList) -> None:
    reply = run(tasks, "notes add t/Groceries d/milk p/m")
    assert "[MEDIUM] Groceries: milk" in reply
    assert list(tasks.notes) == [Note("Groceries", "milk", Priority.MEDIUM)]

    assert run(tasks, "notes list") == "Here are your notes:\n1.[MEDIUM] Groceries: milk"

    reply = run(tasks, "notes delete 1")
    assert reply.endswith("Now you have 0 notes.")
    assert run(tasks, "notes list") == "You have no notes."

    with pytest.raises(InvalidIndexError):
        run(tasks, "notes delete 1")


def test_exit_command(tasks: TaskList) -> None:
    assert ExitCommand().execute(tasks) == FAREWELL


def test_mutating_flags_and_tags() -> None:
    mutating = [
        AddCommand(TaskType.TODO, "x"),
        DeleteCommand(1),
        DoneCommand(1),
        NotesAddCommand("t", "d", Priority.LOW),
        NotesDeleteCommand(1),
    ]
    readonly = [ListCommand(), FindCommand("x"), ExitCommand(), NotesListCommand()]
    assert all(c.mutates for c in mutating)
    assert not any(c.mutates for c in readonly)

    tags = {type(c).tag for c in mutating + readonly}
    assert tags == set(CommandTag)


def test_commands_are_immutable() -> None:
    cmd = DeleteCommand(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cmd.index = 2  # type: ignore[misc]
