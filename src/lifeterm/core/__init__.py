"""Core board engine."""

from .board import Board, BoardView
from .simulation import Simulation
from .errors import LifeError, ConstructionError, ParseError
from .seed import parse_seed, read_seed_file

__all__ = [
    "Board",
    "BoardView",
    "Simulation",
    "LifeError",
    "ConstructionError",
    "ParseError",
    "parse_seed",
    "read_seed_file",
]
