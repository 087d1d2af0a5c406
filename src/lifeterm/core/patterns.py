"""Common Conway's Game of Life patterns as seed text."""

from typing import Dict, List

from .board import Board

# name -> (seed text, description)
BUILTIN_PATTERNS: Dict[str, tuple] = {
    # Still life patterns
    "Block": ("**\n**", "2x2 still life block"),
    "Beehive": (" ** \n*  *\n ** ", "Beehive still life"),
    "Loaf": (" ** \n*  *\n * *\n  * ", "Loaf still life"),
    "Boat": ("** \n* *\n * ", "Boat still life"),
    "Tub": (" * \n* *\n * ", "Tub still life"),
    # Oscillators
    "Blinker": ("***", "Period-2 oscillator"),
    "Toad": (" ***\n*** ", "Period-2 oscillator"),
    "Beacon": ("**  \n*   \n   *\n  **", "Period-2 oscillator"),
    "Pentadecathlon": ("  *    *  \n** **** **\n  *    *  ", "Period-15 oscillator"),
    # Spaceships
    "Glider": (" * \n  *\n***", "Smallest spaceship, period-4"),
}

CATEGORIES: Dict[str, List[str]] = {
    "Still Life": ["Block", "Beehive", "Loaf", "Boat", "Tub"],
    "Oscillators": ["Blinker", "Toad", "Beacon", "Pentadecathlon"],
    "Spaceships": ["Glider"],
}


def list_patterns() -> List[str]:
    """Get the names of all built-in patterns."""
    return list(BUILTIN_PATTERNS.keys())


def _lookup(name: str) -> tuple:
    # Case-insensitive so "glider" and "Glider" both work from the command line
    for pattern_name, entry in BUILTIN_PATTERNS.items():
        if pattern_name.lower() == name.lower():
            return entry
    raise KeyError(f"Pattern '{name}' not found. Available patterns: {', '.join(list_patterns())}")


def get_seed(name: str) -> str:
    """Get the seed text of a built-in pattern.

    Raises:
        KeyError: If no pattern has that name
    """
    return _lookup(name)[0]


def get_description(name: str) -> str:
    return _lookup(name)[1]


def load_pattern(name: str, margin: int = 0) -> Board:
    """Build a board holding a built-in pattern.

    Args:
        name: Pattern name (case-insensitive)
        margin: Number of dead rows/columns to add on every side

    Returns:
        New Board

    Raises:
        KeyError: If no pattern has that name
    """
    seed = Board.from_seed(get_seed(name))
    if margin <= 0:
        return seed

    board = Board(seed.width + 2 * margin, seed.height + 2 * margin)
    board.paste(seed, margin, margin)
    return board
