"""Conway's Game of Life evolution rules on sparse boards.

Implements the classic rules:
- Live cell with 2-3 neighbors survives
- Dead cell with exactly 3 neighbors becomes alive
- All other cells die or stay dead
"""

import logging
from typing import Iterator, Optional, Set

from .board import Board, CellLike, as_cell
from .cell import Cell

log = logging.getLogger(__name__)

# Moore neighborhood offsets, radius 1
NEIGHBOR_OFFSETS = tuple(
    (drow, dcol) for drow in (-1, 0, 1) for dcol in (-1, 0, 1) if (drow, dcol) != (0, 0)
)


def neighbors(cell: CellLike) -> Iterator[Cell]:
    """Enumerate the 8 neighbors of a cell.

    Coordinates are neither wrapped nor clamped, so neighbors of a cell on
    row or column 0 include negative coordinates.

    Args:
        cell: Cell or (row, col) tuple

    Yields:
        Each neighboring Cell
    """
    cell = as_cell(cell)
    for drow, dcol in NEIGHBOR_OFFSETS:
        yield cell.translate(drow, dcol)


def living_neighbors(board: Board, cell: CellLike) -> Iterator[Cell]:
    """Enumerate the neighbors of a cell that are alive on a board."""
    return (n for n in neighbors(cell) if n in board.cells)


def count_neighbors(board: Board, cell: CellLike) -> int:
    """Count living neighbors of a cell.

    Args:
        board: Board to count on
        cell: Cell or (row, col) tuple

    Returns:
        Number of living neighbors (0-8)
    """
    return sum(1 for _ in living_neighbors(board, cell))


def evaluate_cell(alive: bool, neighbor_count: int) -> bool:
    """Decide whether a cell is alive in the next generation.

    Args:
        alive: Whether the cell is alive now
        neighbor_count: Number of living neighbors

    Returns:
        True if the cell survives or is born
    """
    if alive:
        return neighbor_count == 2 or neighbor_count == 3
    return neighbor_count == 3


def candidates(board: Board) -> Set[Cell]:
    """Collect every cell whose state can be alive next generation.

    A dead cell with no living neighbors stays dead, so only live cells and
    their neighbors need evaluating. On a bounded board, cells outside the
    bounds are dropped.
    """
    result: Set[Cell] = set(board.cells)
    for cell in board.cells:
        result.update(neighbors(cell))

    if board.bounded:
        result = {cell for cell in result if board.in_bounds(cell)}
    return result


def evolve(board: Board) -> Board:
    """Compute the next generation of a board.

    The input board is left untouched. Neighbors are counted against the
    full input board, and the output keeps the input's dimensions.

    Args:
        board: Current generation

    Returns:
        New board holding the next generation
    """
    cells = {
        cell
        for cell in candidates(board)
        if evaluate_cell(cell in board.cells, count_neighbors(board, cell))
    }
    log.debug("Evolved board: %d -> %d live cells", board.population, len(cells))
    return Board(cells, height=board.height, width=board.width)


def generations(board: Board, count: Optional[int] = None) -> Iterator[Board]:
    """Yield successive generations after ``board``.

    Args:
        board: Starting generation (not yielded)
        count: Number of generations to yield, or None to continue forever

    Yields:
        Each evolved board in turn
    """
    produced = 0
    while count is None or produced < count:
        board = evolve(board)
        produced += 1
        yield board
