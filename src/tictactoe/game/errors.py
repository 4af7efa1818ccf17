"""Exceptions raised by the board, the search engine and the configuration."""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for every error raised by this package."""


class InvalidMove(TicTacToeError, ValueError):
    """A cell could not be marked (occupied, out of range, or no marker)."""


class PreconditionViolation(TicTacToeError, RuntimeError):
    """An operation was called on a board it is not defined for."""


class ConfigError(TicTacToeError, ValueError):
    """A configuration value is out of range or malformed."""
