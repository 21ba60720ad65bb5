"""Tests for the Board class."""

import numpy as np
import pytest
from lifeboard.core.board import Board
from lifeboard.core.cell import Cell
from lifeboard.core.errors import InvalidInput


class TestBoardFromGrid:
    """Test cases for parsing text grids."""

    def test_empty_grid_is_rejected(self):
        """Test that an empty grid cannot be parsed."""
        with pytest.raises(InvalidInput):
            Board.from_grid("")

    def test_whitespace_only_grid_is_rejected(self):
        """Test that a grid that trims to nothing cannot be parsed."""
        with pytest.raises(InvalidInput):
            Board.from_grid("  \n\t \n ")

    def test_invalid_input_is_a_value_error(self):
        """Test InvalidInput can be caught as ValueError."""
        with pytest.raises(ValueError):
            Board.from_grid("")

    def test_all_dead_grid_is_empty(self):
        """Test a grid with only dead cells gives an empty board."""
        board = Board.from_grid(". . .\n. . .")
        assert board.is_empty()

    def test_dimensions_are_derived_from_grid(self):
        """Test height and width come from the parsed text."""
        board = Board.from_grid(". . .\n. . .")
        assert board.height == 2
        assert board.width == 3
        assert board.bounded

    def test_single_live_cell(self):
        """Test a single marker yields a single cell at (line, token)."""
        board = Board.from_grid(". * .\n. . .")
        assert board.cells == frozenset({Cell(0, 1)})

    def test_leading_and_trailing_spaces_are_ignored(self):
        """Test surrounding spaces on each line are trimmed."""
        board = Board.from_grid("      . .    \n     . *     \n     . .   ")
        assert board.cells == frozenset({Cell(1, 1)})
        assert board.width == 2
        assert board.height == 3

    def test_leading_and_trailing_empty_lines_are_ignored(self):
        """Test blank lines around the grid are trimmed."""
        board = Board.from_grid(
            """
            . . . .
            """
        )
        assert board.width == 4
        assert board.height == 1

    def test_all_live_cells(self):
        """Test a grid full of markers."""
        board = Board.from_grid(
            """
            * * *
            * * *
            """
        )
        assert board.width == 3
        assert board.height == 2
        assert board.population == 6
        assert board.cells == frozenset(Cell(r, c) for r in range(2) for c in range(3))

    def test_unknown_tokens_are_dead(self):
        """Test tokens other than the alive marker are dead."""
        board = Board.from_grid("x * o\n# . *")
        assert board.cells == frozenset({Cell(0, 1), Cell(1, 2)})

    def test_custom_alive_marker(self):
        """Test parsing with a different alive marker."""
        board = Board.from_grid("O . O", alive="O")
        assert board.cells == frozenset({Cell(0, 0), Cell(0, 2)})

    def test_ragged_rows_use_widest_line(self):
        """Test width is the largest token count among rows."""
        board = Board.from_grid(". .\n. . . *\n.")
        assert board.height == 3
        assert board.width == 4
        assert board.contains(Cell(1, 3))

    def test_windows_line_endings(self):
        """Test carriage returns are trimmed with the line."""
        board = Board.from_grid(". *\r\n* .")
        assert board.cells == frozenset({Cell(0, 1), Cell(1, 0)})
        assert board.width == 2


class TestBoard:
    """Test cases for Board construction and queries."""

    def test_from_size(self):
        """Test provisioning an empty bounded board."""
        board = Board.from_size(5, 4)
        assert board.height == 5
        assert board.width == 4
        assert board.is_empty()
        assert board.bounded

    def test_from_size_rejects_negative_dimensions(self):
        """Test negative sizes are rejected."""
        with pytest.raises(InvalidInput):
            Board.from_size(-1, 3)

    def test_half_bounded_is_rejected(self):
        """Test a board needs both dimensions or neither."""
        with pytest.raises(InvalidInput):
            Board([], height=3)

    def test_cells_outside_bounds_are_rejected(self):
        """Test bounded boards refuse out-of-bounds cells."""
        with pytest.raises(InvalidInput):
            Board([(0, 0), (3, 0)], height=3, width=3)
        with pytest.raises(InvalidInput):
            Board([(-1, 0)], height=3, width=3)

    def test_unbounded_accepts_negative_coordinates(self):
        """Test unbounded boards hold cells at any coordinate."""
        board = Board([(-5, -7), (100, 3)])
        assert not board.bounded
        assert board.height is None
        assert board.width is None
        assert board.contains(Cell(-5, -7))

    def test_contains_accepts_tuples(self):
        """Test membership with Cell instances and tuples."""
        board = Board([Cell(1, 2)])
        assert board.contains(Cell(1, 2))
        assert board.contains((1, 2))
        assert (1, 2) in board
        assert Cell(2, 1) not in board
        assert "not a cell" not in board

    def test_membership_with_malformed_pair_raises(self):
        """Test a pair of non-integers is reported rather than treated as dead."""
        board = Board([(0, 0)])
        with pytest.raises(ValueError):
            ("a", "b") in board
        assert (0, 0, 0) not in board

    def test_duplicates_are_collapsed(self):
        """Test duplicate cells count once."""
        board = Board([(0, 0), (0, 0), Cell(0, 0)])
        assert len(board) == 1
        assert board.population == 1

    def test_cells_view_is_read_only(self):
        """Test the exposed cell set cannot be mutated."""
        board = Board([(0, 0)])
        assert isinstance(board.cells, frozenset)
        with pytest.raises(AttributeError):
            board.cells.add(Cell(1, 1))

    def test_iteration_is_row_major(self):
        """Test iterating yields cells in sorted order."""
        board = Board([(2, 0), (0, 3), (0, 1)])
        assert list(board) == [Cell(0, 1), Cell(0, 3), Cell(2, 0)]

    def test_in_bounds(self):
        """Test bounds checks for bounded and unbounded boards."""
        bounded = Board.from_size(2, 3)
        assert bounded.in_bounds(Cell(1, 2))
        assert not bounded.in_bounds(Cell(2, 0))
        assert not bounded.in_bounds(Cell(0, -1))
        assert Board().in_bounds(Cell(-10, 10))

    def test_unbounded_copy(self):
        """Test dropping the dimensions keeps the cells."""
        board = Board.from_grid(". *\n* .")
        free = board.unbounded()
        assert not free.bounded
        assert free.cells == board.cells

    def test_bounding_box(self):
        """Test bounding box calculation."""
        assert Board().get_bounding_box() is None
        board = Board([(1, 5), (-2, 3), (4, 0)])
        assert board.get_bounding_box() == (-2, 0, 4, 5)


class TestBoardEquality:
    """Test cases for Board equality and hashing."""

    def test_equal_cells_and_dimensions(self):
        """Test boards with the same cells and size are equal."""
        a = Board.from_grid(". * .\n. . .")
        b = Board([(0, 1)], height=2, width=3)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_cells(self):
        """Test boards with different cells are not equal."""
        assert Board.from_grid(". * .") != Board.from_grid("* . .")

    def test_unbounded_compares_cells_only(self):
        """Test unbounded boards compare by cell set."""
        assert Board([(0, 0), (1, 1)]) == Board([(1, 1), (0, 0)])

    def test_dimensions_participate(self):
        """Test bounded and unbounded boards with the same cells differ."""
        bounded = Board([(0, 0)], height=2, width=2)
        assert bounded != bounded.unbounded()
        assert bounded != Board([(0, 0)], height=3, width=3)

    def test_not_equal_to_other_types(self):
        """Test comparison with non-boards."""
        assert Board() != frozenset()
        assert Board() != "board"


class TestBoardConversions:
    """Test cases for text and array conversions."""

    def test_to_grid_bounded(self):
        """Test rendering the full rectangle of a bounded board."""
        board = Board.from_grid(". * .\n. . *")
        assert board.to_grid() == ". * .\n. . *"
        assert str(board) == ". * .\n. . *"

    def test_to_grid_unbounded_uses_bounding_box(self):
        """Test unbounded boards render their live extent."""
        board = Board([(-1, -1), (0, 1)])
        assert board.to_grid() == "* . .\n. . *"
        assert Board().to_grid() == ""

    def test_to_grid_zero_sized_board(self):
        """Test a board with no rows or columns renders as text from_grid rejects."""
        board = Board.from_size(0, 3)
        assert board.to_grid() == ""
        with pytest.raises(InvalidInput):
            Board.from_grid(board.to_grid())

    def test_to_grid_round_trip(self):
        """Test rendered text parses back to an equal board."""
        board = Board.from_grid("* . . *\n. * * .\n. . . .")
        assert Board.from_grid(board.to_grid()) == board

    def test_to_array(self):
        """Test dense array conversion indexed by (row, col)."""
        board = Board.from_grid(". * .\n. . .")
        arr = board.to_array()
        assert arr.shape == (2, 3)
        assert arr.dtype == np.int8
        assert arr[0, 1] == 1
        assert int(arr.sum()) == 1

    def test_to_array_requires_bounds(self):
        """Test unbounded boards cannot be made dense."""
        with pytest.raises(InvalidInput):
            Board([(0, 0)]).to_array()

    def test_from_array(self):
        """Test building a board from a dense array."""
        arr = np.array([[0, 1, 0], [1, 0, 0]])
        board = Board.from_array(arr)
        assert board.height == 2
        assert board.width == 3
        assert board.cells == frozenset({Cell(0, 1), Cell(1, 0)})

    def test_from_array_rejects_non_2d(self):
        """Test arrays of the wrong rank are rejected."""
        with pytest.raises(InvalidInput):
            Board.from_array(np.zeros(4))
