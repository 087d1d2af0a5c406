"""Curses frontend that draws a simulation in the terminal."""

import curses
import time
from typing import Callable, Iterable, Optional, Tuple

from ..core.board import Board, BoardView
from ..core.simulation import Simulation

ESCAPE = 27
QUIT_KEYS = {ord("q"), ord("Q"), ESCAPE}
PAUSE_KEYS = {ord(" "), ord("p"), ord("P")}

TOP_LEFT_CORNER = "┌"
TOP_RIGHT_CORNER = "┐"
BOTTOM_LEFT_CORNER = "└"
BOTTOM_RIGHT_CORNER = "┘"
HORIZONTAL_LINE = "─"
VERTICAL_LINE = "│"

# Rows used by the top border, bottom border and status line
CHROME_ROWS = 3
CHROME_COLUMNS = 2


class TerminalRenderer:
    """Draws a board inside a border with a status line underneath.

    Cell (x, y) is drawn at window row ``y + 1`` and column ``x + 1``. Anything
    that does not fit in the window is clipped.
    """

    def __init__(self, window, alive_char: str = "*", dead_char: str = " ") -> None:
        """Initialize the renderer.

        Args:
            window: Curses window to draw on (usually the standard screen)
            alive_char: Character drawn for living cells
            dead_char: Character drawn for dead cells
        """
        self.window = window
        self.alive_char = alive_char
        self.dead_char = dead_char
        self._board_size: Tuple[int, int] = (0, 0)

    def initialize(self) -> None:
        """Prepare the terminal: hide the cursor and make getch non-blocking."""
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # Terminal cannot hide the cursor
        self.window.nodelay(True)
        self.window.clear()

    def grid_size(self) -> Tuple[int, int]:
        """Largest board (width, height) that fits in the window."""
        rows, columns = self.window.getmaxyx()
        return (max(columns - CHROME_COLUMNS, 1), max(rows - CHROME_ROWS, 1))

    def _put(self, y: int, x: int, text: str) -> None:
        try:
            self.window.addstr(y, x, text)
        except curses.error:
            # Writes past the window edge (or into the last cell) are clipped
            pass

    def draw_border(self, width: int, height: int) -> None:
        """Draw a box around a board of the given size."""
        self._put(0, 0, TOP_LEFT_CORNER + HORIZONTAL_LINE * width + TOP_RIGHT_CORNER)
        for row in range(1, height + 1):
            self._put(row, 0, VERTICAL_LINE)
            self._put(row, width + 1, VERTICAL_LINE)
        self._put(height + 1, 0, BOTTOM_LEFT_CORNER + HORIZONTAL_LINE * width + BOTTOM_RIGHT_CORNER)

    def draw_board(self, view: BoardView) -> None:
        """Redraw the border and every cell."""
        self.window.erase()
        self._board_size = view.shape
        self.draw_border(view.width, view.height)
        for y, row in enumerate(view.rows()):
            line = "".join(self.alive_char if alive else self.dead_char for alive in row)
            self._put(y + 1, 1, line)

    def apply_changes(self, view: BoardView, changes: Iterable[Tuple[int, int]]) -> int:
        """Redraw only the given cells.

        Args:
            view: Board to read cell states from
            changes: Coordinates to redraw

        Returns:
            Number of cells redrawn
        """
        count = 0
        for x, y in changes:
            self._put(y + 1, x + 1, self.alive_char if view.get(x, y) else self.dead_char)
            count += 1
        return count

    def draw_status(self, generation: int, population: int, paused: bool = False) -> None:
        """Draw the generation counter and population under the board."""
        _, height = self._board_size
        status = f"Generation: {generation}  Population: {population}"
        if paused:
            status += "  [paused]"
        status += "  (space: pause, q: quit)"
        row = height + 2
        rows, _ = self.window.getmaxyx()
        if row >= rows:
            return  # Board taller than the window, no room for the status line
        self._put(row, 0, status)
        self.window.clrtoeol()

    def refresh(self) -> None:
        self.window.refresh()


def run_loop(
    window,
    simulation: Simulation,
    renderer: TerminalRenderer,
    frequency: float,
    max_generations: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Advance and draw the simulation until the user quits.

    Args:
        window: Curses window polled for key presses
        simulation: Simulation to drive
        renderer: Renderer to draw with
        frequency: Generations per second
        max_generations: Stop after this many generations (None runs forever)
        sleep: Function used to wait between frames

    Returns:
        Generation reached when the loop stopped
    """
    delay = 1.0 / frequency
    paused = False
    view = simulation.current_generation()

    renderer.draw_board(view)
    renderer.draw_status(simulation.generation, simulation.population, paused)
    renderer.refresh()

    try:
        while max_generations is None or simulation.generation < max_generations:
            key = window.getch()
            if key in QUIT_KEYS:
                break
            if key in PAUSE_KEYS:
                paused = not paused
            elif key == curses.KEY_RESIZE:
                window.clear()
                renderer.draw_board(view)

            if not paused:
                simulation.advance()
                renderer.apply_changes(view, simulation.changed_cells())

            renderer.draw_status(simulation.generation, simulation.population, paused)
            renderer.refresh()
            sleep(delay)
    except KeyboardInterrupt:
        pass  # Ctrl+C is the normal way out

    return simulation.generation


def play(
    window,
    board_factory: Callable[[Tuple[int, int]], Board],
    frequency: float,
    max_generations: Optional[int] = None,
) -> int:
    """Curses entry point: build the board for this terminal and run it.

    Meant to be called through ``curses.wrapper``.

    Args:
        window: Standard screen supplied by curses
        board_factory: Builds the board given the terminal's (width, height)
        frequency: Generations per second
        max_generations: Optional generation limit

    Returns:
        Generation reached when the loop stopped
    """
    renderer = TerminalRenderer(window)
    renderer.initialize()
    simulation = Simulation(board_factory(renderer.grid_size()))
    return run_loop(window, simulation, renderer, frequency, max_generations)
