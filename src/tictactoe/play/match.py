"""
Match between two participants.

A match is a series of rounds. X opens every round, the round winner scores
a point, draws score nothing, and the first participant to reach
`rounds_to_win` points takes the match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Any

from ..game import Board, Marker
from ..search import is_terminal


@dataclass
class RoundResult:
    """Record of a finished round."""

    winner: Optional[Marker]  # None for a draw
    board: Board
    moves: list[int]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


@dataclass
class MatchResult:
    """Final scores and every round played."""

    scores: dict[str, int]
    rounds: list[RoundResult] = field(default_factory=list)

    @property
    def champion(self) -> Optional[str]:
        """Name with the most points, None if tied."""
        if not self.scores:
            return None
        top = max(self.scores.values())
        leaders = [name for name, points in self.scores.items() if points == top]
        return leaders[0] if len(leaders) == 1 else None


class Match:
    """
    Turn coordination and score bookkeeping.

    Args:
        first: One participant
        second: The other participant (must use the other marker)
        rounds_to_win: Points needed to win the match
        first_marker: Marker that opens every round
        on_move: Optional callback(player, position, board) after each move
        on_round_end: Optional callback(result) after each round
    """

    def __init__(
        self,
        first: Any,
        second: Any,
        rounds_to_win: int = 5,
        first_marker: Marker = Marker.X,
        on_move: Optional[Callable[[Any, int, Board], None]] = None,
        on_round_end: Optional[Callable[[RoundResult], None]] = None,
    ):
        if {first.marker, second.marker} != {Marker.X, Marker.O}:
            raise ValueError("Participants must play X and O")
        if first.name == second.name:
            raise ValueError(f"Participants need distinct names, both are {first.name!r}")
        if rounds_to_win < 1:
            raise ValueError("rounds_to_win must be at least 1")

        self.players = {first.marker: first, second.marker: second}
        self.rounds_to_win = rounds_to_win
        self.first_marker = first_marker
        self.on_move = on_move
        self.on_round_end = on_round_end

        self.scores: dict[str, int] = {first.name: 0, second.name: 0}
        self.rounds: list[RoundResult] = []

    def player_for(self, marker: Marker) -> Any:
        return self.players[marker]

    @property
    def finished(self) -> bool:
        return max(self.scores.values()) >= self.rounds_to_win

    def play_round(self) -> RoundResult:
        """Play one round on a fresh board."""
        board = Board.empty()
        current = self.first_marker
        moves: list[int] = []

        while True:
            player = self.players[current]
            move = player.choose_move(board)
            board = board.copy_with(move, current)
            moves.append(move)

            if self.on_move is not None:
                self.on_move(player, move, board)

            if is_terminal(board):
                break
            current = current.opponent()

        winner = board.winner()
        if winner is not None:
            self.scores[self.players[winner].name] += 1

        result = RoundResult(winner=winner, board=board, moves=moves)
        self.rounds.append(result)

        if self.on_round_end is not None:
            self.on_round_end(result)
        return result

    def play(self, max_rounds: Optional[int] = None) -> MatchResult:
        """
        Play rounds until someone reaches `rounds_to_win`.

        Args:
            max_rounds: Stop after this many rounds even without a champion
                (two perfect players only ever draw)
        """
        played = 0
        while not self.finished:
            if max_rounds is not None and played >= max_rounds:
                break
            self.play_round()
            played += 1
        return MatchResult(scores=dict(self.scores), rounds=list(self.rounds))

    def reset(self) -> None:
        """Clear scores and round history for a new match."""
        for name in self.scores:
            self.scores[name] = 0
        self.rounds.clear()
