"""Terminal Conway's Game of Life on a bounded board."""

__version__ = "0.1.0"

from .core.board import Board, BoardView
from .core.simulation import Simulation
from .core.errors import LifeError, ConstructionError, ParseError

__all__ = ["Board", "BoardView", "Simulation", "LifeError", "ConstructionError", "ParseError"]
