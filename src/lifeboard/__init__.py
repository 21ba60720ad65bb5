"""Sparse Conway's Game of Life engine."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.board import Board
from .core.errors import InvalidInput, ConfigError
from .core.life import evolve, evaluate_cell
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary
from .core.config import BoardConfig, load_config, new_board

__all__ = [
    "Cell",
    "Board",
    "InvalidInput",
    "ConfigError",
    "evolve",
    "evaluate_cell",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
    "BoardConfig",
    "load_config",
    "new_board",
]
