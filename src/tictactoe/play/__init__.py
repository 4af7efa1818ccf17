"""Play module - match coordination and participants."""

from .players import HumanPlayer, ComputerPlayer, RandomPlayer, pick_computer_name
from .match import Match, MatchResult, RoundResult

__all__ = [
    "HumanPlayer",
    "ComputerPlayer",
    "RandomPlayer",
    "pick_computer_name",
    "Match",
    "MatchResult",
    "RoundResult",
]
