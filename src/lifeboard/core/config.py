"""Board configuration loading."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union

from .board import Board
from .errors import ConfigError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardConfig:
    """Dimensions used to provision a fresh bounded board."""

    height: int
    width: int


def _get_int(mapping: Mapping[str, Any], key: str) -> int:
    try:
        value = mapping[key]
    except KeyError:
        raise ConfigError(f"Missing required configuration key {key!r}") from None
    # bool is an int subclass but never a sensible dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Configuration key {key!r} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"Configuration key {key!r} must be non-negative, got {value}")
    return value


def config_from_mapping(mapping: Mapping[str, Any]) -> BoardConfig:
    """Build a BoardConfig from a mapping with ``height`` and ``width`` keys.

    Raises:
        ConfigError: If a key is missing or is not a non-negative integer
    """
    if not isinstance(mapping, Mapping):
        raise ConfigError(f"Configuration must be a mapping, got {type(mapping).__name__}")
    return BoardConfig(height=_get_int(mapping, "height"), width=_get_int(mapping, "width"))


def load_config(path: Union[str, Path]) -> BoardConfig:
    """Load board configuration from a JSON file.

    Args:
        path: Path to a JSON object with ``height`` and ``width``

    Returns:
        Parsed BoardConfig

    Raises:
        ConfigError: If the file cannot be read or holds invalid configuration
    """
    filepath = Path(path)
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {filepath}: {e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid JSON in configuration file {filepath}: {e}") from e

    config = config_from_mapping(data)
    log.info("Loaded board configuration %dx%d from %s", config.height, config.width, filepath)
    return config


def new_board(config: Union[BoardConfig, Mapping[str, Any]]) -> Board:
    """Provision an empty bounded board from configuration.

    Args:
        config: BoardConfig or a mapping with ``height`` and ``width``

    Returns:
        Empty board with the configured dimensions
    """
    if not isinstance(config, BoardConfig):
        config = config_from_mapping(config)
    return Board.from_size(config.height, config.width)
