"""Game module - Tic-Tac-Toe board and errors."""

from .board import (
    BOARD_SIZE,
    NUM_CELLS,
    POSITIONS,
    WINNING_LINES,
    Marker,
    Board,
)

from .errors import (
    TicTacToeError,
    InvalidMove,
    PreconditionViolation,
    ConfigError,
)

__all__ = [
    "BOARD_SIZE",
    "NUM_CELLS",
    "POSITIONS",
    "WINNING_LINES",
    "Marker",
    "Board",
    "TicTacToeError",
    "InvalidMove",
    "PreconditionViolation",
    "ConfigError",
]
