"""Simulation driver that advances a board one generation at a time."""

from typing import Deque, Dict, Iterator, List, Tuple
from collections import deque

from .board import Board, BoardView


class Simulation:
    """Owns a Board and counts the generations it has been advanced.

    This is the seam between the board engine and display code: it never
    renders or does I/O. Besides the tick counter it tracks population
    history and detects when the board revisits an earlier state.
    """

    def __init__(self, board: Board, history_size: int = 100) -> None:
        """Initialize the driver.

        Args:
            board: The board to simulate; the simulation takes ownership of it
            history_size: Number of population samples to keep
        """
        self._board = board
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=history_size)
        self._state_history: Deque[bytes] = deque(maxlen=1000)
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._population_history.append(board.population)

    @property
    def generation(self) -> int:
        """Number of times the board has been advanced."""
        return self._generation

    @property
    def population(self) -> int:
        return self._board.population

    @property
    def population_history(self) -> List[int]:
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Period of the detected cycle (0 if none; 1 for a still life)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        return self._cycle_start_generation

    def current_generation(self) -> BoardView:
        """Return a read-only view of the current board."""
        return BoardView(self._board)

    def advance(self) -> None:
        """Step the board once and increment the generation counter."""
        self._record_state()
        self._board.step()
        self._generation += 1
        self._population_history.append(self._board.population)
        self._check_for_cycle()

    def changed_cells(self) -> Iterator[Tuple[int, int]]:
        """Coordinates that changed in the last advance (all living cells before the first)."""
        return self._board.changed_cells()

    def run(self, generations: int) -> None:
        """Advance the board a fixed number of generations."""
        for _ in range(generations):
            self.advance()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Advance until the board cycles, dies out or the limit is reached.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.advance()

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def reset(self, clear_board: bool = True) -> None:
        """Reset the generation counter and tracking state.

        Args:
            clear_board: Whether to kill every cell as well
        """
        if clear_board:
            self._board.clear()

        self._generation = 0
        self._population_history.clear()
        self._population_history.append(self._board.population)
        self.clear_cycle_detection()

    def clear_cycle_detection(self) -> None:
        """Forget seen states; call after editing the board by hand."""
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0
        self._seen_states.clear()
        self._state_history.clear()

    def _record_state(self) -> None:
        """Remember the current state before it is replaced."""
        if self._cycle_detected:
            return

        state = self._board.cells.tobytes()
        if state not in self._seen_states:
            # Each remembered state appears once in the history, evict its index entry with it
            if len(self._state_history) == self._state_history.maxlen:
                del self._seen_states[self._state_history[0]]
            self._seen_states[state] = self._generation
            self._state_history.append(state)

    def _check_for_cycle(self) -> None:
        """Check whether the current state was seen in an earlier generation."""
        if self._cycle_detected:
            return

        first_occurrence = self._seen_states.get(self._board.cells.tobytes())
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence

    def get_statistics(self) -> Dict:
        """Summarize the simulation for reporting."""
        return {
            "generation": self._generation,
            "population": self.population,
            "population_history": self.population_history,
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "board_size": self._board.shape,
            "population_density": self.population / (self._board.width * self._board.height),
        }
