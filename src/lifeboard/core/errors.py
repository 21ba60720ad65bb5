"""Exceptions raised by the Game of Life core."""


class InvalidInput(ValueError):
    """Raised when a board cannot be built from the given input."""


class ConfigError(ValueError):
    """Raised when board configuration is missing or malformed."""
