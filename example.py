#!/usr/bin/env python3
"""
Example usage of the lifeterm package.
"""

from lifeterm import Board, Simulation
from lifeterm.core.patterns import get_seed


def main():
    """Demonstrate programmatic usage of the lifeterm package."""
    # Place a glider near the top-left corner of a 12x12 board
    board = Board(12, 12)
    board.paste(Board.from_seed(get_seed("Glider")), 1, 1)
    simulation = Simulation(board)

    print("Initial state:")
    print(simulation.current_generation())
    print(f"Population: {simulation.population}")
    print()

    # The board does not wrap, so the glider is cut off when it reaches the edge
    final_generation, reason = simulation.run_until_stable(200)

    print(f"Stopped at generation {final_generation} ({reason}):")
    print(simulation.current_generation())

    stats = simulation.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        if key != "population_history":
            print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
