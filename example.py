#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import GameOfLife, PatternLibrary, new_board


def main():
    """Demonstrate programmatic usage of the lifeboard package."""
    empty = new_board({"height": 20, "width": 20})

    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    board = glider.to_board(8, 8, height=empty.height, width=empty.width)
    game = GameOfLife(board)

    print("Initial state:")
    print(game.board)
    print(f"Population: {game.population}")
    print()

    for _ in range(10):
        game.step()
        print(f"Generation {game.generation}:")
        print(game.board)
        print(f"Population: {game.population}")

        if game.cycle_detected:
            print(f"Cycle detected! Length: {game.cycle_length}")
            break

        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
