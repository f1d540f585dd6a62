from __future__ import annotations

from typing import Optional


class CustomBaseException(Exception):
    """
    Base exception class.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RainbowJsonError(CustomBaseException):
    """Base class for every error raised while parsing a window of JSON text."""

    pass


class PositionedError(RainbowJsonError):
    """
    An error anchored at a (line, column) position of the source document.

    The line is the caller supplied document line number, so errors raised
    inside a window point back at the full document.
    """

    def __init__(self, message: str, line: Optional[int], column: int):
        self.line = line
        self.column = column
        super().__init__(f'{message} at line {line}, column {column}')
        self.reason = message


class JsonTokenizerError(PositionedError):
    """Raised when no token pattern matches at the current column of a line."""

    pass


class JsonSyntaxError(PositionedError):
    """Raised when a token appears where the JSON grammar forbids it."""

    pass


class JsonIncompleteError(RainbowJsonError):
    """Raised when the token stream ends before a record's brackets balance."""

    pass


class ParserInvariantError(RainbowJsonError):
    """
    Raised when the grouping pass and the structural parser disagree about
    the extent of a record. This signals a defect, not a malformed document.
    """

    pass


class ConfigurationError(Exception):
    """Raised when there's an error in the configuration file."""

    pass
