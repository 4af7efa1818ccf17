"""
Match participants.

Every participant exposes `name`, `marker` and `choose_move(board) -> int`.
Humans get their moves from an injected callable, so the match itself
never touches the console.
"""

from __future__ import annotations

import random
from typing import Callable, Optional, Sequence

import numpy as np

from ..game import Board, Marker
from ..search import MinimaxPlayer


class HumanPlayer:
    """
    Player whose moves come from outside (a prompt, a test script...).

    Args:
        name: Display name
        marker: X or O
        ask_move: Callable returning the position to mark on a board
    """

    def __init__(self, name: str, marker: Marker, ask_move: Callable[[Board], int]):
        self.name = name
        self.marker = marker
        self.ask_move = ask_move

    def choose_move(self, board: Board) -> int:
        return self.ask_move(board)


class ComputerPlayer:
    """Unbeatable player backed by the alpha-beta search."""

    def __init__(self, name: str, marker: Marker):
        self.name = name
        self.marker = marker
        self.engine = MinimaxPlayer(marker)

    def choose_move(self, board: Board) -> int:
        return self.engine.choose_move(board)


class RandomPlayer:
    """Uniformly random legal moves."""

    def __init__(self, name: str, marker: Marker, rng: Optional[np.random.Generator] = None):
        self.name = name
        self.marker = marker
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose_move(self, board: Board) -> int:
        return int(self.rng.choice(board.unmarked_positions()))


def pick_computer_name(
    names: Sequence[str],
    rng: Optional[random.Random] = None,
    exclude: Sequence[str] = (),
) -> str:
    """Pick a computer name, avoiding names already taken."""
    candidates = [n for n in names if n not in exclude]
    if not candidates:
        raise ValueError("No computer name available")
    return (rng or random).choice(candidates)
