"""Generation tracking around the Game of Life evolution rules."""

import logging
from typing import Any, Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .board import Board
from .life import evolve

log = logging.getLogger(__name__)

# Older boards are forgotten, so longer cycles go undetected
MAX_TRACKED_BOARDS = 1000


class GameOfLife:
    """Runs successive generations of a board.

    Each step replaces the current board with a freshly evolved one and
    records population history. Boards are hashable, so a repeated board
    is detected as a cycle.
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a starting board.

        Args:
            board: Generation zero
        """
        self._board = board
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._seen_boards: Dict[Board, int] = {}
        self._board_history: Deque[Board] = deque(maxlen=MAX_TRACKED_BOARDS)
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()

    @property
    def board(self) -> Board:
        """Current generation's board."""
        return self._board

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The new current board
        """
        self._record_board()

        self._board = evolve(self._board)
        self._generation += 1
        self._update_population_history()

        self._check_for_cycle()
        log.debug("Generation %d: population %d", self._generation, self.population)
        return self._board

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _record_board(self) -> None:
        """Remember the current board, evicting the oldest once the history is full."""
        if self._cycle_detected or self._board in self._seen_boards:
            return

        if len(self._board_history) == self._board_history.maxlen:
            oldest = self._board_history.popleft()
            del self._seen_boards[oldest]

        self._seen_boards[self._board] = self._generation
        self._board_history.append(self._board)

    def _check_for_cycle(self) -> None:
        """Check if the current board has been seen before."""
        if self._cycle_detected:
            return

        first_occurrence = self._seen_boards.get(self._board)
        if first_occurrence is None:
            return

        self._cycle_detected = True
        self._cycle_length = self._generation - first_occurrence
        self._cycle_start_generation = first_occurrence
        # Nothing else is looked up once a cycle is known
        self._seen_boards.clear()
        self._board_history.clear()
        log.info(
            "Cycle of length %d detected at generation %d (started at %d)",
            self._cycle_length,
            self._generation,
            self._cycle_start_generation,
        )

    def reset(self, board: Optional[Board] = None) -> None:
        """Reset the simulation.

        Args:
            board: New starting board; keeps the current board if omitted
        """
        if board is not None:
            self._board = board

        self._generation = 0
        self._population_history.clear()
        self._seen_boards.clear()
        self._board_history.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self._board.is_empty():
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict[str, Any]:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population, cycle and extent figures
        """
        board = self._board
        bbox = board.get_bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "bounded": board.bounded,
            "board_size": (board.height, board.width),
        }

        if board.bounded and board.height * board.width > 0:
            stats["population_density"] = self.population / (board.height * board.width)
        else:
            stats["population_density"] = None

        if bbox:
            stats["bounding_box"] = bbox
            box_height = bbox[2] - bbox[0] + 1
            box_width = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_height, box_width)
            stats["bounding_box_area"] = box_height * box_width
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)
            stats["bounding_box_area"] = 0

        return stats
