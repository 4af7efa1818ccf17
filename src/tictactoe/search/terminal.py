"""
Terminal-state classification and scoring.

A board is terminal when a line is complete or no cell is left. Scores are
from a fixed perspective: +1 win, -1 loss, 0 draw.
"""

from __future__ import annotations

from ..game import Board, Marker, PreconditionViolation

WIN = 1
DRAW = 0
LOSS = -1


def is_terminal(board: Board) -> bool:
    """True if the game on `board` is over."""
    return board.is_full() or board.winner() is not None


def score(board: Board, perspective: Marker, opponent: Marker) -> int:
    """
    Score a finished board.

    Args:
        board: Terminal board
        perspective: Marker the score is computed for
        opponent: The other marker

    Returns:
        +1 if `perspective` won, -1 if `opponent` won, 0 for a draw

    Raises:
        PreconditionViolation: if the board is not terminal
    """
    winner = board.winner()
    if winner is None and not board.is_full():
        raise PreconditionViolation(f"Cannot score non-terminal board {board}")

    if winner == perspective:
        return WIN
    if winner == opponent:
        return LOSS
    return DRAW
