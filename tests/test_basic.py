"""Basic tests for the lifeterm package."""

import pytest

import lifeterm
from lifeterm import Board, ConstructionError, ParseError, Simulation


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = Board(10, 10)
    assert board.width == 10
    assert board.height == 10
    assert board.get(0, 0) is False

    board.set(5, 5, True)
    assert board.get(5, 5) is True


def test_simulation_creation():
    """Test basic simulation creation."""
    board = Board(5, 5)
    simulation = Simulation(board)
    assert simulation.population == 0

    board.set(2, 2, True)
    assert simulation.population == 1


def test_errors_exported():
    """Test the public error types."""
    with pytest.raises(ConstructionError):
        Board(0, 5)
    with pytest.raises(ParseError):
        Board.from_seed("")


def test_version():
    """Test the package version."""
    assert lifeterm.__version__ == "0.1.0"


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    board = Board(5, 5)
    simulation = Simulation(board)

    board.set(2, 1, True)
    board.set(2, 2, True)
    board.set(2, 3, True)

    simulation.advance()
    view = simulation.current_generation()
    assert view.population == 3
    assert view.get(1, 2) is True
    assert view.get(2, 2) is True
    assert view.get(3, 2) is True

    simulation.advance()
    assert view.population == 3
    assert view.get(2, 1) is True
    assert view.get(2, 2) is True
    assert view.get(2, 3) is True
