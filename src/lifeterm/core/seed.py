"""Seed text parsing.

A seed is plain text with one board row per line. The alive glyph (``*`` by
default) marks a living cell, every other character is a dead cell. Rows may
have different lengths and are right-padded with dead cells; empty lines at
the end of the text are ignored.
"""

from pathlib import Path
from typing import List, Union

from .errors import ParseError

ALIVE_GLYPH = "*"
DEAD_GLYPHS = " ."


def split_rows(text: str) -> List[str]:
    """Split seed text into rows, dropping trailing empty lines.

    Args:
        text: Seed text

    Returns:
        List of row strings (may be empty)
    """
    rows = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    while rows and rows[-1] == "":
        rows.pop()
    return rows


def parse_seed(text: Union[str, bytes], alive: str = ALIVE_GLYPH, strict: bool = False) -> List[List[bool]]:
    """Parse seed text into rectangular rows of cell states.

    Args:
        text: Seed text (bytes are decoded as UTF-8)
        alive: Character that marks a living cell
        strict: Reject characters other than the alive glyph, space and '.'

    Returns:
        List of ``height`` rows, each a list of ``width`` booleans

    Raises:
        ParseError: If the text is not decodable, has no rows or no columns,
            or (in strict mode) contains an unknown character
    """
    if len(alive) != 1:
        raise ValueError(f"Alive glyph must be a single character, got {alive!r}")

    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Seed is not valid UTF-8 text: {e.reason}") from e
    elif not isinstance(text, str):
        raise ParseError(f"Seed must be text, got {type(text).__name__}")

    rows = split_rows(text)
    if not rows:
        raise ParseError("Seed is empty")

    width = max(len(row) for row in rows)
    if width == 0:
        raise ParseError("Seed has no columns")

    if strict:
        allowed = set(DEAD_GLYPHS) | {alive}
        for line_number, row in enumerate(rows, start=1):
            for column, char in enumerate(row, start=1):
                if char not in allowed:
                    raise ParseError(f"Invalid seed character {char!r}", line_number, column)

    return [[char == alive for char in row] + [False] * (width - len(row)) for row in rows]


def read_seed_file(path: Union[str, Path]) -> str:
    """Read a seed file.

    Args:
        path: Path to the seed file

    Returns:
        File contents

    Raises:
        OSError: If the file cannot be read
        ParseError: If the file is not UTF-8 text
    """
    data = Path(path).read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Seed file {path} is not valid UTF-8 text: {e.reason}") from e
