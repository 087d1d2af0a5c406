"""Board data structure and the Game of Life step."""

from typing import Iterator, List, Optional, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .errors import ConstructionError
from .seed import ALIVE_GLYPH, parse_seed


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConstructionError(f"Board {name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConstructionError(f"Board {name} must be positive, got {value}")
    return int(value)


class Board:
    """A bounded 2D grid of cells for Conway's Game of Life.

    Cells are stored in a flat row-major numpy buffer: cell ``(x, y)`` lives at
    index ``y * width + x``. Coordinates outside the grid are permanently dead,
    so reads there return False and writes are ignored. The grid does not wrap.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-dead board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ConstructionError: If either dimension is not a positive integer
        """
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._cells = np.zeros(self._width * self._height, dtype=bool)
        self._previous_cells = np.zeros(self._width * self._height, dtype=bool)

        # Single-threaded CPU convolution; the kernel is reused on every step
        torch.set_num_threads(1)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def from_seed(cls, text: Union[str, bytes], alive: str = ALIVE_GLYPH, strict: bool = False) -> "Board":
        """Create a board from seed text.

        The board is exactly as large as the seed: one row per line and as
        many columns as the longest line.

        Args:
            text: Seed text
            alive: Character that marks a living cell
            strict: Reject characters other than the alive glyph, space and '.'

        Returns:
            New Board

        Raises:
            ParseError: If the seed is empty or malformed
        """
        rows = parse_seed(text, alive=alive, strict=strict)
        board = cls(len(rows[0]), len(rows))
        board._cells[:] = np.array(rows, dtype=bool).reshape(-1)
        return board

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat row-major view of the current cells."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if the cell is alive; False if it is dead or out of bounds
        """
        if not self.in_bounds(x, y):
            return False
        return bool(self._cells[y * self._width + x])

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell. Out-of-bounds coordinates are ignored.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive
        """
        if self.in_bounds(x, y):
            self._cells[y * self._width + x] = bool(alive)

    def toggle(self, x: int, y: int) -> bool:
        """Toggle a cell and return its new state (always False out of bounds)."""
        self.set(x, y, not self.get(x, y))
        return self.get(x, y)

    def clear(self) -> None:
        """Kill every cell."""
        self._cells.fill(False)

    def randomize(self, probability: float = 0.5, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly populate the board.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Optional numpy random generator for reproducible fills

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")
        rng = rng if rng is not None else np.random.default_rng()
        self._cells[:] = rng.random(self._cells.size) < probability

    def paste(self, other: "Board", offset_x: int = 0, offset_y: int = 0) -> None:
        """Copy the living cells of another board onto this one.

        Cells that land outside this board are dropped.

        Args:
            other: Source board
            offset_x: Column where the source's left edge is placed
            offset_y: Row where the source's top edge is placed
        """
        for x, y in other.alive_cells():
            self.set(x + offset_x, y + offset_y, True)

    def copy(self) -> "Board":
        """Return an independent board with the same cells."""
        board = Board(self._width, self._height)
        board._cells[:] = self._cells
        board._previous_cells[:] = self._previous_cells
        return board

    def count_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                if self.get(x + dx, y + dy):
                    count += 1
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors of every cell.

        Returns:
            Array of shape (height, width) with neighbor counts
        """
        return self._neighbor_counts(self._cells)

    def _neighbor_counts(self, cells: np.ndarray) -> np.ndarray:
        grid = torch.from_numpy(cells.reshape(self._height, self._width).astype(np.float32))
        # Zero padding: everything beyond the edge is dead
        neighbors = F.conv2d(grid.unsqueeze(0).unsqueeze(0), self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().round().astype(np.int8)

    def step(self) -> None:
        """Advance the board by one generation.

        Neighbor counts come from a snapshot of the whole previous generation,
        so no cell sees a neighbor that was already updated in this step.
        """
        self._previous_cells[:] = self._cells
        neighbors = self._neighbor_counts(self._previous_cells).reshape(-1)

        # Birth on exactly 3, survival on 2 or 3
        self._cells[:] = (neighbors == 3) | (self._previous_cells & (neighbors == 2))

    def changed_cells(self) -> Iterator[Tuple[int, int]]:
        """Get coordinates of cells that differ from the previous generation.

        Before the first step the previous generation is all dead, so this
        yields every living cell.

        Yields:
            Tuples of (x, y) coordinates
        """
        for index in np.flatnonzero(self._cells != self._previous_cells):
            yield (int(index) % self._width, int(index) // self._width)

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells in row-major order."""
        for index in np.flatnonzero(self._cells):
            yield (int(index) % self._width, int(index) // self._width)

    def rows(self) -> List[List[bool]]:
        """Return the cells as a list of rows."""
        return self._cells.reshape(self._height, self._width).tolist()

    def to_seed(self, alive: str = ALIVE_GLYPH, dead: str = " ") -> str:
        """Serialize the board as seed text (no trailing newline)."""
        return "\n".join("".join(alive if cell else dead for cell in row) for row in self.rows())

    def __eq__(self, other: object) -> bool:
        """Boards are equal when their dimensions and cells match."""
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return self.to_seed(alive="*", dead=".")


class BoardView:
    """Read-only view of a board for display code."""

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._board.shape

    @property
    def population(self) -> int:
        return self._board.population

    @property
    def cells(self) -> np.ndarray:
        return self._board.cells

    def get(self, x: int, y: int) -> bool:
        return self._board.get(x, y)

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        return self._board.alive_cells()

    def rows(self) -> List[List[bool]]:
        return self._board.rows()

    def to_seed(self, alive: str = ALIVE_GLYPH, dead: str = " ") -> str:
        return self._board.to_seed(alive, dead)

    def copy(self) -> Board:
        """Return a detached, mutable copy of the viewed board."""
        return self._board.copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoardView):
            return self._board == other._board
        if isinstance(other, Board):
            return self._board == other
        return NotImplemented

    def __str__(self) -> str:
        return str(self._board)
