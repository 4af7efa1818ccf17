"""Search module - terminal scoring and alpha-beta minimax."""

from .terminal import WIN, DRAW, LOSS, is_terminal, score
from .minimax import (
    ALPHA_INIT,
    BETA_INIT,
    SearchStats,
    MoveScore,
    minimax,
    score_moves,
    select_best,
    best_move,
    MinimaxPlayer,
)

__all__ = [
    "WIN",
    "DRAW",
    "LOSS",
    "is_terminal",
    "score",
    "ALPHA_INIT",
    "BETA_INIT",
    "SearchStats",
    "MoveScore",
    "minimax",
    "score_moves",
    "select_best",
    "best_move",
    "MinimaxPlayer",
]
