# src/jotter/core/validation.py

"""Small pure helpers shared by the parsers: presence checks, priority and index tokens."""

from __future__ import annotations

import re
from typing import Any

from .errors import EmptyBodyError, InvalidIndexError, UnknownInputError
from .models import Priority

_INDEX_RE = re.compile(r"[+-]?[0-9]+")

_PRIORITY_WORDS: dict[str, Priority] = {
    "high": Priority.HIGH,
    "h": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "m": Priority.MEDIUM,
    "low": Priority.LOW,
    "l": Priority.LOW,
}


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_present(context: str, **fields: Any) -> None:
    """
    Raise EmptyBodyError naming every absent field (None or blank string).

    Field names are reported in the order they were passed.
    """
    missing = [name for name, value in fields.items() if _is_absent(value)]
    if missing:
        raise EmptyBodyError(" and ".join(missing), context)


def parse_priority(text: str) -> Priority:
    priority = _PRIORITY_WORDS.get(text.strip().lower())
    if priority is None:
        raise UnknownInputError(f"Unknown priority: {text}")
    return priority


def parse_index(token: str, context: str) -> int:
    """Convert a 1-based index token to int. Bounds are checked by the list."""
    text = token.strip()
    if not _INDEX_RE.fullmatch(text):
        raise InvalidIndexError(text, context)
    return int(text)
