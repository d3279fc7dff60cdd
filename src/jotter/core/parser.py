# src/jotter/core/parser.py

from __future__ import annotations

import logging
from enum import StrEnum
from typing import assert_never

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
)
from .errors import EmptyBodyError, UnknownInputError
from .models import TaskType
from .notes_parser import parse_notes, split_first_word
from .validation import parse_index

logger = logging.getLogger(__name__)


class Keyword(StrEnum):
    BYE = "bye"
    LIST = "list"
    DELETE = "delete"
    DONE = "done"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"
    NOTES = "notes"


def _require_task_number(remainder: str) -> int:
    if not remainder:
        raise EmptyBodyError("task number", "task")
    return parse_index(remainder, "task")


def parse(line: str) -> Command:
    """
    Turn one line of user input into a Command.

    Only the shape of the line is checked here. For todo/deadline/event the
    description is passed through untouched; separators and dates are
    validated when the command executes.

    Raises EmptyBodyError, UnknownInputError or InvalidIndexError.
    """
    word, remainder = split_first_word(line)

    try:
        keyword = Keyword(word)
    except ValueError:
        raise UnknownInputError(word) from None

    logger.debug("Parsing keyword=%s remainder=%r", keyword, remainder)

    if keyword is Keyword.BYE:
        return ExitCommand()
    if keyword is Keyword.LIST:
        return ListCommand()
    if keyword is Keyword.DELETE:
        return DeleteCommand(_require_task_number(remainder))
    if keyword is Keyword.DONE:
        return DoneCommand(_require_task_number(remainder))
    if keyword is Keyword.TODO:
        return AddCommand(TaskType.TODO, remainder)
    if keyword is Keyword.DEADLINE:
        return AddCommand(TaskType.DEADLINE, remainder)
    if keyword is Keyword.EVENT:
        return AddCommand(TaskType.EVENT, remainder)
    if keyword is Keyword.FIND:
        return FindCommand(remainder)
    if keyword is Keyword.NOTES:
        return parse_notes(remainder)
    assert_never(keyword)
