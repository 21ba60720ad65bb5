"""Cell coordinates for the Game of Life grid."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cell:
    """A single grid position.

    Coordinates are signed so that neighbors of cells on row or column 0
    can be represented without clamping or wrapping.
    """

    row: int
    col: int

    def translate(self, drow: int, dcol: int) -> "Cell":
        """Return a new cell offset by the given deltas.

        Args:
            drow: Row offset
            dcol: Column offset

        Returns:
            Cell at (row + drow, col + dcol)
        """
        return Cell(self.row + drow, self.col + dcol)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
