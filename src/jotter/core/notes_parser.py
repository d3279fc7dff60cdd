# src/jotter/core/notes_parser.py

"""
Parser for the `notes ...` sub-language.

    notes add t/<title> d/<description> p/<high|medium|low>
    notes list
    notes delete <index>

Parameters are `key/value` fragments. A value runs until the next key token,
so it may contain spaces and slashes:

    t/Trip d/pack bags by 10/11 p/h
    -> title="Trip", description="pack bags by 10/11", priority=HIGH

A space followed by a lowercase word and "/" always starts a new key, so
"d/this and/that" is read as an unknown `and` parameter.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import StrEnum
from typing import assert_never, cast

from .commands import Command, NotesAddCommand, NotesDeleteCommand, NotesListCommand
from .errors import EmptyBodyError, UnknownInputError
from .models import Priority
from .validation import parse_index, parse_priority, require_present

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_KEY_END_CHARS = frozenset(string.ascii_lowercase)


class NotesKeyword(StrEnum):
    ADD = "add"
    LIST = "list"
    DELETE = "delete"


_PARAM_ALIASES: dict[str, str] = {
    "title": "title",
    "t": "title",
    "description": "description",
    "d": "description",
    "priority": "priority",
    "p": "priority",
}


@dataclass(slots=True)
class NoteParams:
    title: str | None = None
    description: str | None = None
    priority: Priority | None = None


def split_first_word(text: str) -> tuple[str, str]:
    """Split on the first whitespace run; the rest is "" when there is none."""
    parts = text.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def _key_token_at(text: str, start: int) -> bool:
    """
    True if a key token starts at `start`: word characters ending in a
    lowercase ASCII letter, immediately followed by "/".
    """
    end = start
    while end < len(text) and text[end] in _WORD_CHARS:
        end += 1
    return (
        end > start
        and end < len(text)
        and text[end] == "/"
        and text[end - 1] in _KEY_END_CHARS
    )


def split_parameters(text: str) -> list[str]:
    """
    Cut `text` at every single space that is followed by a key token.

    The space itself is dropped; everything else (including extra spaces and
    slashes inside values) stays in the fragments.
    """
    fragments: list[str] = []
    begin = 0
    for pos, ch in enumerate(text):
        if ch == " " and _key_token_at(text, pos + 1):
            fragments.append(text[begin:pos])
            begin = pos + 1
    fragments.append(text[begin:])
    return fragments


def parse_parameters(text: str) -> NoteParams:
    params = NoteParams()
    for fragment in split_parameters(text):
        key, sep, value = fragment.partition("/")
        if not sep:
            continue

        name = _PARAM_ALIASES.get(key)
        if name is None:
            raise UnknownInputError(f"Unknown parameter name {key}")

        if name == "title":
            params.title = value
        elif name == "description":
            params.description = value
        else:
            params.priority = parse_priority(value)
    return params


def parse_notes(remainder: str) -> Command:
    word, rest = split_first_word(remainder)

    params = parse_parameters(rest) if rest else NoteParams()

    try:
        keyword = NotesKeyword(word)
    except ValueError:
        raise UnknownInputError(f"Unknown notes command: {word}") from None

    if keyword is NotesKeyword.ADD:
        require_present(
            "note",
            title=params.title,
            description=params.description,
            priority=params.priority,
        )
        return NotesAddCommand(
            cast(str, params.title),
            cast(str, params.description),
            cast(Priority, params.priority),
        )
    if keyword is NotesKeyword.LIST:
        return NotesListCommand()
    if keyword is NotesKeyword.DELETE:
        if not rest:
            raise EmptyBodyError("note number", "note")
        return NotesDeleteCommand(parse_index(rest, "note"))
    assert_never(keyword)
