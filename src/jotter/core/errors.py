# src/jotter/core/errors.py

"""
User-facing error taxonomy.

Parsing and execution raise these; the console loop catches JotterError,
shows the message and keeps reading input.
"""

from __future__ import annotations


class JotterError(Exception):
    """Base class for errors caused by user input."""


class EmptyBodyError(JotterError):
    """A required field or separator is missing."""

    def __init__(self, field: str, context: str) -> None:
        self.field = field
        self.context = context
        super().__init__(f"The {field} of a {context} cannot be empty.")


class UnknownInputError(JotterError):
    """A keyword, parameter name or value is not recognised."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unrecognised input: {token}")


class InvalidIndexError(JotterError):
    """An index is not an integer, or points outside the list."""

    def __init__(self, token: str, context: str, *, size: int | None = None) -> None:
        self.token = token
        self.context = context
        self.size = size
        msg = f"'{token}' is not a valid {context} number."
        if size is not None:
            msg += f" You have {size} {context}(s) in the list."
        super().__init__(msg)
