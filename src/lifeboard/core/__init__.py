"""Core Game of Life logic."""

from .cell import Cell
from .board import Board
from .errors import InvalidInput, ConfigError
from .life import evolve, evaluate_cell, neighbors, living_neighbors, count_neighbors, generations
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary
from .config import BoardConfig, load_config, new_board

__all__ = [
    "Cell",
    "Board",
    "InvalidInput",
    "ConfigError",
    "evolve",
    "evaluate_cell",
    "neighbors",
    "living_neighbors",
    "count_neighbors",
    "generations",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
    "BoardConfig",
    "load_config",
    "new_board",
]
