"""Sparse board data structure for the Game of Life."""

from typing import FrozenSet, Iterable, Iterator, Optional, Tuple, Union
import numpy as np

from .cell import Cell
from .errors import InvalidInput


CellLike = Union[Cell, Tuple[int, int]]


def as_cell(value: CellLike) -> Cell:
    """Coerce a ``(row, col)`` pair to a Cell."""
    if isinstance(value, Cell):
        return value
    row, col = value
    return Cell(int(row), int(col))


class Board:
    """An immutable set of live cells, optionally bounded.

    Only live cells are stored; any cell not in the set is dead. A board
    with both ``height`` and ``width`` set is bounded and may only hold
    cells inside ``[0, height) x [0, width)``. A board without dimensions is
    unbounded and may hold cells at any coordinate, including negative ones.
    """

    __slots__ = ("_cells", "_height", "_width")

    def __init__(
        self,
        cells: Iterable[CellLike] = (),
        height: Optional[int] = None,
        width: Optional[int] = None,
    ) -> None:
        """Initialize a board.

        Args:
            cells: Live cells as Cell instances or (row, col) tuples
            height: Number of rows for a bounded board
            width: Number of columns for a bounded board

        Raises:
            InvalidInput: If only one dimension is given, a dimension is
                negative, or a cell lies outside the bounds
        """
        if (height is None) != (width is None):
            raise InvalidInput(
                f"Board needs both height and width or neither, got {height}x{width}"
            )
        if height is not None and (height < 0 or width < 0):
            raise InvalidInput(f"Board dimensions must be non-negative, got {height}x{width}")

        self._cells: FrozenSet[Cell] = frozenset(as_cell(c) for c in cells)
        self._height = height
        self._width = width

        if self.bounded:
            outside = [c for c in self._cells if not self.in_bounds(c)]
            if outside:
                raise InvalidInput(
                    f"Cell {min(outside)} lies outside a {height}x{width} board"
                )

    @classmethod
    def from_grid(cls, text: str, alive: str = "*") -> "Board":
        """Parse a textual grid into a bounded board.

        The text is trimmed, split into lines and each line is trimmed and
        split on single spaces. Tokens equal to ``alive`` are live cells;
        every other token is dead.

        Args:
            text: Grid text such as ``". * .\\n. . ."``
            alive: Token marking a live cell

        Returns:
            Board sized to the grid

        Raises:
            InvalidInput: If the text is empty after trimming
        """
        text = text.strip()
        if not text:
            raise InvalidInput("Grid cannot be empty")

        lines = text.split("\n")
        cells = set()
        width = 0
        for row, line in enumerate(lines):
            tokens = line.strip().split(" ")
            width = max(width, len(tokens))
            for col, token in enumerate(tokens):
                if token == alive:
                    cells.add(Cell(row, col))

        return cls(cells, height=len(lines), width=width)

    @classmethod
    def from_size(cls, height: int, width: int) -> "Board":
        """Create an empty bounded board.

        Args:
            height: Number of rows
            width: Number of columns

        Returns:
            Board with no live cells
        """
        return cls((), height=height, width=width)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Board":
        """Create a bounded board from a 2D array indexed by (row, col).

        Args:
            array: Array whose non-zero entries are live cells

        Returns:
            Board sized to the array

        Raises:
            InvalidInput: If the array is not two-dimensional
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise InvalidInput(f"Expected a 2D array, got shape {arr.shape}")

        rows, cols = np.nonzero(arr)
        cells = [Cell(int(r), int(c)) for r, c in zip(rows, cols)]
        height, width = arr.shape
        return cls(cells, height=int(height), width=int(width))

    @property
    def cells(self) -> FrozenSet[Cell]:
        """Live cells of this board."""
        return self._cells

    @property
    def height(self) -> Optional[int]:
        """Number of rows, or None for an unbounded board."""
        return self._height

    @property
    def width(self) -> Optional[int]:
        """Number of columns, or None for an unbounded board."""
        return self._width

    @property
    def bounded(self) -> bool:
        """Whether births and survivals are restricted to the board's bounds."""
        return self._height is not None

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return len(self._cells)

    def contains(self, cell: CellLike) -> bool:
        """Check whether a cell is alive.

        Args:
            cell: Cell or (row, col) tuple

        Returns:
            True if the cell is alive on this board
        """
        return as_cell(cell) in self._cells

    def is_empty(self) -> bool:
        """Check whether the board has no living cells."""
        return not self._cells

    def in_bounds(self, cell: CellLike) -> bool:
        """Check whether a cell may be alive on this board.

        Every cell is in bounds on an unbounded board.
        """
        if not self.bounded:
            return True
        cell = as_cell(cell)
        return 0 <= cell.row < self._height and 0 <= cell.col < self._width

    def unbounded(self) -> "Board":
        """Return a board with the same cells and no dimensions."""
        return Board(self._cells)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        if not self._cells:
            return None

        rows = [c.row for c in self._cells]
        cols = [c.col for c in self._cells]
        return (min(rows), min(cols), max(rows), max(cols))

    def to_array(self) -> np.ndarray:
        """Convert a bounded board to a dense (height, width) int8 array.

        Raises:
            InvalidInput: If the board is unbounded
        """
        if not self.bounded:
            raise InvalidInput("Only bounded boards can be converted to an array")

        arr = np.zeros((self._height, self._width), dtype=np.int8)
        for cell in self._cells:
            arr[cell.row, cell.col] = 1
        return arr

    def to_grid(self, alive: str = "*", dead: str = ".") -> str:
        """Render the board in the text grid format read by from_grid.

        Bounded boards render their full rectangle. Unbounded boards render
        the bounding box of their live cells, so the origin is not kept.
        A bounded board with zero rows or columns renders as an empty
        string, which from_grid rejects.
        """
        if self.bounded:
            min_row, min_col, max_row, max_col = 0, 0, self._height - 1, self._width - 1
        else:
            bbox = self.get_bounding_box()
            if bbox is None:
                return ""
            min_row, min_col, max_row, max_col = bbox

        lines = []
        for row in range(min_row, max_row + 1):
            tokens = [
                alive if Cell(row, col) in self._cells else dead
                for col in range(min_col, max_col + 1)
            ]
            lines.append(" ".join(tokens))
        return "\n".join(lines)

    def __contains__(self, cell: object) -> bool:
        if isinstance(cell, tuple) and len(cell) == 2:
            cell = as_cell(cell)
        return cell in self._cells

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over live cells in row-major order."""
        return iter(sorted(self._cells))

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        """Check if two boards hold the same cells and dimensions."""
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._height == other._height
            and self._width == other._width
        )

    def __hash__(self) -> int:
        return hash((self._cells, self._height, self._width))

    def __repr__(self) -> str:
        cells = ", ".join(f"({c.row}, {c.col})" for c in sorted(self._cells))
        if self.bounded:
            return f"Board([{cells}], height={self._height}, width={self._width})"
        return f"Board([{cells}])"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return self.to_grid()

