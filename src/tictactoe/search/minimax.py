"""
Minimax search with alpha-beta pruning.

The search is exhaustive: Tic-Tac-Toe has at most 9 plies, so every line of
play is followed to a terminal board (minus the branches alpha-beta proves
irrelevant). Values are from `self_marker`'s perspective:
+1 forced win, 0 forced draw, -1 forced loss.

Driver:
1. Enumerate the acting player's moves on the real board (ascending)
2. Score each resulting board with minimax, opponent to move
3. Pick the highest value; ties go to the lowest position
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..game import Board, Marker, PreconditionViolation
from .terminal import is_terminal, score

# Sentinels strictly outside the score range [-1, 1]
ALPHA_INIT = -1000
BETA_INIT = 1000


@dataclass
class SearchStats:
    """Counters filled in by a search. Never read by the search itself."""

    nodes: int = 0
    cutoffs: int = 0


@dataclass(frozen=True)
class MoveScore:
    """A candidate move and its game value."""

    position: int
    value: int


def minimax(
    board: Board,
    maximizing_turn: bool,
    alpha: int,
    beta: int,
    self_marker: Marker,
    opponent_marker: Marker,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Game value of `board` from `self_marker`'s perspective.

    Args:
        board: Position to evaluate (never modified)
        maximizing_turn: True if `self_marker` moves next
        alpha: Lower bound of the value the maximizer is assured of
        beta: Upper bound of the value the minimizer is assured of
        self_marker: Marker the value is computed for
        opponent_marker: The other marker
        prune: If False, search every child with the sentinel bounds and
            never stop early (plain minimax)
        stats: Optional counters for visited nodes and cutoffs

    Returns:
        Value in {-1, 0, 1}
    """
    if stats is not None:
        stats.nodes += 1

    if is_terminal(board):
        return score(board, self_marker, opponent_marker)

    if not prune:
        alpha, beta = ALPHA_INIT, BETA_INIT

    moves = board.unmarked_positions()

    if maximizing_turn:
        value = ALPHA_INIT
        for i, move in enumerate(moves):
            child = board.copy_with(move, self_marker)
            child_value = minimax(
                child, False, alpha, beta, self_marker, opponent_marker,
                prune=prune, stats=stats,
            )
            if not prune:
                value = max(value, child_value)
                continue
            alpha = max(alpha, child_value)
            if alpha >= beta:
                if stats is not None and i < len(moves) - 1:
                    stats.cutoffs += 1
                break
        return alpha if prune else value

    value = BETA_INIT
    for i, move in enumerate(moves):
        child = board.copy_with(move, opponent_marker)
        child_value = minimax(
            child, True, alpha, beta, self_marker, opponent_marker,
            prune=prune, stats=stats,
        )
        if not prune:
            value = min(value, child_value)
            continue
        beta = min(beta, child_value)
        if alpha >= beta:
            if stats is not None and i < len(moves) - 1:
                stats.cutoffs += 1
            break
    return beta if prune else value


def score_moves(
    board: Board,
    marker: Marker,
    opponent: Optional[Marker] = None,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> list[MoveScore]:
    """
    Value of every legal move for `marker`, in ascending position order.

    Each candidate is searched from scratch with fresh bounds, so every
    returned value is exact.
    """
    if opponent is None:
        opponent = marker.opponent()

    scores = []
    for move in board.unmarked_positions():
        child = board.copy_with(move, marker)
        value = minimax(
            child, False, ALPHA_INIT, BETA_INIT, marker, opponent,
            prune=prune, stats=stats,
        )
        scores.append(MoveScore(position=move, value=value))
    return scores


def select_best(scores: list[MoveScore]) -> MoveScore:
    """Highest value; the first one enumerated wins ties."""
    best = scores[0]
    for candidate in scores[1:]:
        if candidate.value > best.value:
            best = candidate
    return best


def best_move(
    board: Board,
    marker: Marker,
    opponent: Optional[Marker] = None,
) -> int:
    """
    Optimal position for `marker` to mark on `board`.

    Raises:
        PreconditionViolation: if the game on `board` is already over
    """
    if is_terminal(board):
        raise PreconditionViolation(f"No move to make on finished board {board}")
    return select_best(score_moves(board, marker, opponent)).position


class MinimaxPlayer:
    """
    Perfect player for one marker.

    Holds no search state between calls; `last_scores` and `last_stats`
    describe the most recent decision and are kept only for display.

    Args:
        marker: Marker this player places
    """

    def __init__(self, marker: Marker):
        if marker == Marker.EMPTY:
            raise ValueError("A player needs X or O")
        self.marker = marker
        self.opponent = marker.opponent()
        self.last_scores: list[MoveScore] = []
        self.last_stats = SearchStats()

    def choose_move(self, board: Board) -> int:
        if is_terminal(board):
            raise PreconditionViolation(f"No move to make on finished board {board}")

        stats = SearchStats()
        scores = score_moves(board, self.marker, self.opponent, stats=stats)
        self.last_scores = scores
        self.last_stats = stats
        return select_best(scores).position
