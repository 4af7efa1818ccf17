"""
Tic-Tac-Toe - an unbeatable computer player.

The computer searches the whole game tree with minimax and alpha-beta
pruning, so it never loses: against perfect play every game is a draw.

Usage:
    from tictactoe.game import Board, Marker
    from tictactoe.search import best_move, score_moves

    board = Board.from_string("XX.OO....")
    best_move(board, Marker.X)        # 3
    score_moves(board, Marker.O)      # [MoveScore(position=3, value=...), ...]

    # Console match
    $ ttt play
"""

__version__ = "0.1.0"

from . import game
from . import search
from . import play
from . import utils

__all__ = [
    "game",
    "search",
    "play",
    "utils",
    "__version__",
]
