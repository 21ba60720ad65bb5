"""Common Conway's Game of Life patterns and pattern management."""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .board import Board


def _pulsar_cells() -> List[Tuple[int, int]]:
    arms = (0, 5, 7, 12)
    spans = (2, 3, 4, 8, 9, 10)
    horizontal = [(row, col) for row in arms for col in spans]
    vertical = [(row, col) for row in spans for col in arms]
    return sorted(horizontal + vertical)


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: Iterable[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: (row, col) coordinates of living cells
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = [tuple(cell) for cell in cells]
        self.description = description
        self.metadata = metadata or {}

    def to_board(
        self,
        offset_row: int = 0,
        offset_col: int = 0,
        height: Optional[int] = None,
        width: Optional[int] = None,
    ) -> Board:
        """Place this pattern on a new board.

        Args:
            offset_row: Vertical offset
            offset_col: Horizontal offset
            height: Rows of a bounded board, or None for unbounded
            width: Columns of a bounded board, or None for unbounded

        Returns:
            Board holding the shifted pattern. Cells that fall outside a
            bounded board are skipped.
        """
        shifted = [(row + offset_row, col + offset_col) for row, col in self.cells]
        if height is not None and width is not None:
            shifted = [(r, c) for r, c in shifted if 0 <= r < height and 0 <= c < width]
        return Board(shifted, height=height, width=width)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (height, width)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_row, min_col, _, _ = self.get_bounding_box()
        normalized_cells = [(r - min_row, c - min_col) for r, c in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "name": self.name,
            "cells": [list(cell) for cell in self.cells],
            "description": self.description,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary.

        Args:
            data: Dictionary with pattern data

        Returns:
            New Pattern instance
        """
        return cls(
            name=data["name"],
            cells=[tuple(cell) for cell in data["cells"]],
            description=data.get("description", ""),
            metadata=data.get("metadata", {}),
        )

    @classmethod
    def from_board(cls, board: Board, name: str, description: str = "") -> "Pattern":
        """Create pattern from a board's live cells.

        Args:
            board: Source board
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = [(cell.row, cell.col) for cell in board]
        metadata = {
            "source_board_size": (board.height, board.width),
            "population": len(cells),
        }
        return cls(name, cells, description, metadata)


class PatternLibrary:
    """Manages a collection of patterns."""

    CATEGORIES = ("Still Life", "Oscillators", "Spaceships", "Methuselahs")

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        still = {"category": "Still Life", "period": 1}
        self.add_pattern(
            Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block", dict(still))
        )
        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
                dict(still),
            )
        )
        self.add_pattern(
            Pattern(
                "Loaf",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
                "Loaf still life",
                dict(still),
            )
        )

        self.add_pattern(
            Pattern(
                "Blinker",
                [(1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
                {"category": "Oscillators", "period": 2},
            )
        )
        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
                {"category": "Oscillators", "period": 2},
            )
        )
        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
                {"category": "Oscillators", "period": 2},
            )
        )
        self.add_pattern(
            Pattern(
                "Pulsar",
                _pulsar_cells(),
                "Period-3 oscillator",
                {"category": "Oscillators", "period": 3},
            )
        )

        # Spaceships move (1, 1) and (0, 2) per period respectively
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4",
                {"category": "Spaceships", "period": 4, "displacement": (1, 1)},
            )
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
                {"category": "Spaceships", "period": 4, "displacement": (0, 2)},
            )
        )

        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
                {"category": "Methuselahs"},
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
                {"category": "Methuselahs"},
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                [(0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)],
                "Takes 5206 generations to stabilize",
                {"category": "Methuselahs"},
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Patterns without a known ``category`` in their metadata are listed
        under "Custom". Empty categories are left out.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {name: [] for name in self.CATEGORIES}
        categories["Custom"] = []

        for name, pattern in self._patterns.items():
            category = pattern.metadata.get("category")
            if category not in categories:
                category = "Custom"
            categories[category].append(name)

        return {cat: names for cat, names in categories.items() if names}
