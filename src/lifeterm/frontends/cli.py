"""Command-line launcher for the terminal Game of Life."""

import argparse
import curses
import sys
from typing import Optional, Tuple

import numpy as np

from ..core.board import Board
from ..core.errors import LifeError
from ..core.patterns import CATEGORIES, get_description, get_seed, list_patterns
from ..core.seed import read_seed_file
from ..core.simulation import Simulation
from .terminal import play

MAX_UPDATE_FREQUENCY = 40
HEADLESS_GRID_SIZE = (40, 20)


def parse_grid_size(value: str) -> Tuple[int, int]:
    """Parse a ``WxH`` board size.

    Args:
        value: Size string such as ``80x24``

    Returns:
        Tuple of (width, height)

    Raises:
        argparse.ArgumentTypeError: If the string is not two positive integers
    """
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Grid size must look like WIDTHxHEIGHT, got '{value}'")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Grid size must look like WIDTHxHEIGHT, got '{value}'")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Grid size must be positive, got '{value}'")
    return width, height


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifeterm",
        description="Run Conway's Game of Life on a bounded board in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Seed files hold one row per line; '*' is a living cell, anything else is dead.

Examples:
  # Play a seed file at 10 generations per second
  lifeterm -f glider.txt -u 10

  # Place a built-in pattern on an 80x24 board
  lifeterm --pattern Pentadecathlon -s 80x24

  # Random board filling the terminal
  lifeterm --population 0.3

  # Run 15 generations without the terminal UI and print the result
  lifeterm --pattern Pentadecathlon -g 15
        """,
    )

    # Board configuration
    parser.add_argument("-f", "--file", type=str, help="Seed file to load")

    parser.add_argument(
        "-s",
        "--grid-size",
        type=parse_grid_size,
        metavar="WxH",
        help="Board size (default: terminal size, or 40x20 with -g; grown to fit the seed)",
    )

    parser.add_argument("--pattern", type=str, help="Load a built-in pattern instead of a seed file")

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all built-in patterns and exit",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject seed characters other than '*', ' ' and '.'",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.0,
        help="Random population rate 0.0-1.0 for a board without a seed (default: 0.0)",
    )

    parser.add_argument("--rng-seed", type=int, help="Random seed for reproducible boards")

    # Simulation configuration
    parser.add_argument(
        "-u",
        "--update-frequency",
        type=float,
        default=4,
        metavar="HZ",
        help=f"Generations per second, at most {MAX_UPDATE_FREQUENCY} (default: 4)",
    )

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        help="Run this many generations without the terminal UI and print the final board",
    )

    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="In headless mode, also print the initial board",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.file and args.pattern:
        errors.append("Use either --file or --pattern, not both")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if not 0 < args.update_frequency <= MAX_UPDATE_FREQUENCY:
        errors.append(f"Update frequency must be greater than 0 and at most {MAX_UPDATE_FREQUENCY}")

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if errors:
        print("Error: Invalid arguments:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return False

    return True


def load_seed_board(args: argparse.Namespace) -> Optional[Board]:
    """Build the seed board named on the command line, if any.

    Raises:
        OSError: If the seed file cannot be read
        KeyError: If the pattern name is unknown
        LifeError: If the seed cannot be parsed
    """
    if args.file:
        return Board.from_seed(read_seed_file(args.file), strict=args.strict)
    if args.pattern:
        return Board.from_seed(get_seed(args.pattern))
    return None


def build_board(
    seed: Optional[Board],
    grid_size: Optional[Tuple[int, int]],
    fallback_size: Tuple[int, int],
    population: float = 0.0,
    rng_seed: Optional[int] = None,
) -> Board:
    """Create the starting board.

    With an explicit size the seed is placed at the top-left corner and cells
    that do not fit are dropped. Without one the board takes the fallback
    size, grown to fit the seed if needed, and the seed is centered on it.
    Without a seed the board is empty, or randomly filled when a population
    rate is given.

    Args:
        seed: Parsed seed board, or None
        grid_size: Explicit (width, height), or None
        fallback_size: Size used when no size is given (terminal or headless default)
        population: Random fill probability for boards without a seed
        rng_seed: Seed for the random generator

    Returns:
        New Board
    """
    if grid_size is not None:
        board = Board(*grid_size)
        if seed is not None:
            board.paste(seed)
            return board
    elif seed is not None:
        width = max(fallback_size[0], seed.width)
        height = max(fallback_size[1], seed.height)
        board = Board(width, height)
        # Auto-center the seed
        board.paste(seed, (width - seed.width) // 2, (height - seed.height) // 2)
        return board
    else:
        board = Board(*fallback_size)

    if population > 0:
        board.randomize(population, np.random.default_rng(rng_seed))
    return board


def list_builtin_patterns() -> None:
    """Print the built-in patterns grouped by category."""
    print("Available patterns:")
    for category, names in CATEGORIES.items():
        print(f"\n{category}:")
        for name in names:
            print(f"  {name:<16} {get_description(name)}")


def run_headless(board: Board, generations: int, show_grid: bool = False) -> Simulation:
    """Run a fixed number of generations and print the final board."""
    simulation = Simulation(board)
    if show_grid:
        print("Initial board:")
        print(simulation.current_generation())
        print()

    simulation.run(generations)

    print(f"Generation {simulation.generation} (population {simulation.population}):")
    print(simulation.current_generation())
    if simulation.cycle_detected:
        print(f"Cycle detected: length {simulation.cycle_length} from generation {simulation.cycle_start_generation}")
    return simulation


def main() -> int:
    """Main entry point for the launcher.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.list_patterns:
        list_builtin_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        seed = load_seed_board(args)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        print("Use --list-patterns to see available patterns", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read seed file {args.file}: {e.strerror or e}", file=sys.stderr)
        return 1
    except LifeError as e:
        print(f"Error: Invalid seed: {e}", file=sys.stderr)
        return 1

    if args.generations is not None:
        board = build_board(seed, args.grid_size, HEADLESS_GRID_SIZE, args.population, args.rng_seed)
        run_headless(board, args.generations, args.show_grid)
        return 0

    def board_factory(terminal_size: Tuple[int, int]) -> Board:
        return build_board(seed, args.grid_size, terminal_size, args.population, args.rng_seed)

    try:
        curses.wrapper(play, board_factory, args.update_frequency)
    except KeyboardInterrupt:
        pass  # Ctrl+C before the loop started
    except curses.error as e:
        print(f"Error: Terminal UI failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
