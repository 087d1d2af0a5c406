"""Errors raised while building boards."""

from typing import Optional


class LifeError(ValueError):
    """Base class for board construction failures."""


class ConstructionError(LifeError):
    """Raised when a board is created with invalid dimensions."""


class ParseError(LifeError):
    """Raised when seed text cannot be turned into a board.

    Attributes:
        line: 1-based line number of the offending character, if known
        column: 1-based column of the offending character, if known
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        if line is not None:
            location = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({location})"
        super().__init__(message)
        self.line = line
        self.column = column
