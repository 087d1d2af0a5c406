"""Tests for the Simulation driver."""

from lifeterm.core.board import Board, BoardView
from lifeterm.core.simulation import Simulation

BLOCK = """\
....
.**.
.**.
....
"""

BLINKER = """\
.....
..*..
..*..
..*..
.....
"""

PENTADECATHLON = """\
......................
......................
......................
......................
......................
......................
........*....*........
......**.****.**......
........*....*........
......................
......................
......................
......................
......................
......................
"""


class TestSimulation:
    """Test cases for the Simulation class."""

    def test_initialization(self):
        """Test driver initialization."""
        board = Board.from_seed(BLOCK)
        simulation = Simulation(board)

        assert simulation.generation == 0
        assert simulation.population == 4
        assert simulation.population_history == [4]
        assert not simulation.cycle_detected
        assert simulation.cycle_length == 0

    def test_advance(self):
        """Test that advance steps the board and counts generations."""
        simulation = Simulation(Board.from_seed(BLINKER))

        simulation.advance()
        assert simulation.generation == 1
        view = simulation.current_generation()
        assert view.get(1, 2)
        assert view.get(2, 2)
        assert view.get(3, 2)
        assert not view.get(2, 1)

    def test_current_generation_is_read_only_view(self):
        """Test the view handed to display code."""
        simulation = Simulation(Board(4, 4))
        view = simulation.current_generation()

        assert isinstance(view, BoardView)
        assert view.shape == (4, 4)
        assert not hasattr(view, "set")

    def test_view_follows_advances(self):
        """Test that a view taken earlier shows later generations."""
        simulation = Simulation(Board.from_seed(BLINKER))
        view = simulation.current_generation()

        simulation.advance()
        assert view.get(1, 2)

    def test_changed_cells(self):
        """Test reporting cells changed in the last advance."""
        simulation = Simulation(Board.from_seed(BLINKER))
        simulation.advance()
        assert sorted(simulation.changed_cells()) == [(1, 2), (2, 1), (2, 3), (3, 2)]

    def test_run(self):
        """Test running a fixed number of generations."""
        simulation = Simulation(Board.from_seed(BLINKER))
        simulation.run(4)
        assert simulation.generation == 4
        assert simulation.current_generation() == Board.from_seed(BLINKER)

    def test_population_history(self):
        """Test population tracking."""
        board = Board(5, 5)
        board.set(2, 2, True)
        simulation = Simulation(board)

        simulation.advance()
        assert simulation.population_history == [1, 0]

    def test_population_history_is_bounded(self):
        """Test that old population samples are discarded."""
        simulation = Simulation(Board.from_seed(BLINKER), history_size=3)
        simulation.run(10)
        assert len(simulation.population_history) == 3

    def test_still_life_cycle(self):
        """Test that a block is detected as a cycle of length 1."""
        simulation = Simulation(Board.from_seed(BLOCK))

        final_generation, reason = simulation.run_until_stable(100)

        assert reason == "cycle"
        assert final_generation == 1
        assert simulation.cycle_length == 1
        assert simulation.cycle_start_generation == 0

    def test_blinker_cycle(self):
        """Test blinker cycle detection."""
        simulation = Simulation(Board.from_seed(BLINKER))

        final_generation, reason = simulation.run_until_stable(100)

        assert reason == "cycle"
        assert final_generation == 2
        assert simulation.cycle_length == 2

    def test_pentadecathlon_cycle(self):
        """Test that the pentadecathlon cycles with period 15."""
        simulation = Simulation(Board.from_seed(PENTADECATHLON))

        final_generation, reason = simulation.run_until_stable(100)

        assert reason == "cycle"
        assert final_generation == 15
        assert simulation.cycle_length == 15
        assert simulation.current_generation() == Board.from_seed(PENTADECATHLON)

    def test_extinction(self):
        """Test that a dying board stops with extinction."""
        board = Board(5, 5)
        board.set(0, 0, True)
        board.set(4, 4, True)
        simulation = Simulation(board)

        final_generation, reason = simulation.run_until_stable(100)

        assert reason == "extinction"
        assert final_generation == 1
        assert simulation.population == 0

    def test_max_generations(self):
        """Test hitting the generation limit."""
        simulation = Simulation(Board.from_seed(PENTADECATHLON))

        final_generation, reason = simulation.run_until_stable(10)

        assert reason == "max_generations"
        assert final_generation == 10
        assert not simulation.cycle_detected

    def test_cycle_detected_by_advance(self):
        """Test that plain advances also detect cycles."""
        simulation = Simulation(Board.from_seed(BLINKER))
        simulation.advance()
        assert not simulation.cycle_detected
        simulation.advance()
        assert simulation.cycle_detected
        assert simulation.cycle_length == 2

    def test_reset(self):
        """Test resetting the simulation."""
        simulation = Simulation(Board.from_seed(BLINKER))
        simulation.run(3)

        simulation.reset()

        assert simulation.generation == 0
        assert simulation.population == 0
        assert simulation.population_history == [0]
        assert not simulation.cycle_detected

    def test_reset_keep_board(self):
        """Test resetting counters without clearing the board."""
        simulation = Simulation(Board.from_seed(BLINKER))
        simulation.run(2)

        simulation.reset(clear_board=False)

        assert simulation.generation == 0
        assert simulation.population == 3

    def test_get_statistics(self):
        """Test the statistics summary."""
        simulation = Simulation(Board.from_seed(BLOCK))
        simulation.advance()

        stats = simulation.get_statistics()

        assert stats["generation"] == 1
        assert stats["population"] == 4
        assert stats["board_size"] == (4, 4)
        assert stats["population_density"] == 0.25
        assert stats["cycle_detected"] is True
