"""Tests for match coordination."""

import random

import numpy as np
import pytest

from tictactoe.game import Board, Marker, InvalidMove
from tictactoe.play import (
    HumanPlayer,
    ComputerPlayer,
    RandomPlayer,
    Match,
    MatchResult,
    pick_computer_name,
)


def lowest_square(board: Board) -> int:
    return board.unmarked_positions()[0]


class TestMatchSetup:
    def test_markers_must_differ(self):
        a = HumanPlayer("Ann", Marker.X, lowest_square)
        b = HumanPlayer("Bob", Marker.X, lowest_square)
        with pytest.raises(ValueError):
            Match(a, b)

    def test_names_must_differ(self):
        a = HumanPlayer("Ann", Marker.X, lowest_square)
        b = ComputerPlayer("Ann", Marker.O)
        with pytest.raises(ValueError):
            Match(a, b)

    def test_rounds_to_win_positive(self):
        a = HumanPlayer("Ann", Marker.X, lowest_square)
        b = ComputerPlayer("Sonny", Marker.O)
        with pytest.raises(ValueError):
            Match(a, b, rounds_to_win=0)

    def test_player_for(self):
        a = HumanPlayer("Ann", Marker.O, lowest_square)
        b = ComputerPlayer("Sonny", Marker.X)
        match = Match(a, b)
        assert match.player_for(Marker.O) is a
        assert match.player_for(Marker.X) is b


class TestRound:
    def test_x_opens_and_turns_alternate(self):
        human = HumanPlayer("Ann", Marker.X, lowest_square)
        computer = ComputerPlayer("Sonny", Marker.O)
        seen = []
        match = Match(human, computer, on_move=lambda p, m, b: seen.append((p.marker, m)))

        result = match.play_round()

        assert seen[0] == (Marker.X, 1)
        markers = [m for m, _ in seen]
        assert all(a != b for a, b in zip(markers, markers[1:]))
        assert result.moves == [m for _, m in seen]
        assert Board.from_string(".........") != result.board

    def test_computer_punishes_naive_play(self):
        # Ann always takes the lowest square: 1, 2, ... O blocks at 3 and wins later
        human = HumanPlayer("Ann", Marker.X, lowest_square)
        computer = ComputerPlayer("Sonny", Marker.O)
        match = Match(human, computer)

        result = match.play_round()

        assert result.winner != Marker.X
        assert match.scores["Ann"] == 0

    def test_round_end_callback(self):
        human = HumanPlayer("Ann", Marker.X, lowest_square)
        computer = ComputerPlayer("Sonny", Marker.O)
        ended = []
        match = Match(human, computer, on_round_end=ended.append)

        result = match.play_round()

        assert ended == [result]
        assert match.rounds == [result]

    def test_illegal_human_move_raises(self):
        human = HumanPlayer("Ann", Marker.X, lambda board: 5)
        computer = ComputerPlayer("Sonny", Marker.O)
        match = Match(human, computer)
        with pytest.raises(InvalidMove):
            match.play_round()

    def test_first_marker_configurable(self):
        first = []
        human = HumanPlayer("Ann", Marker.X, lowest_square)
        computer = HumanPlayer("Bob", Marker.O, lowest_square)
        match = Match(
            human,
            computer,
            first_marker=Marker.O,
            on_move=lambda p, m, b: first.append(p.name),
        )
        match.play_round()
        assert first[0] == "Bob"


class TestScoring:
    def test_winner_scores_point(self):
        # Both take the lowest square: X gets 1, 3, 5, 7 and completes 3-5-7
        a = HumanPlayer("Ann", Marker.X, lowest_square)
        b = HumanPlayer("Bob", Marker.O, lowest_square)
        match = Match(a, b, rounds_to_win=2)

        result = match.play_round()

        assert result.winner == Marker.X
        assert result.moves == [1, 2, 3, 4, 5, 6, 7]
        assert match.scores == {"Ann": 1, "Bob": 0}
        assert not match.finished

    def test_match_ends_at_target(self):
        a = HumanPlayer("Ann", Marker.X, lowest_square)
        b = HumanPlayer("Bob", Marker.O, lowest_square)
        match = Match(a, b, rounds_to_win=3)

        result = match.play()

        assert isinstance(result, MatchResult)
        assert result.scores == {"Ann": 3, "Bob": 0}
        assert len(result.rounds) == 3
        assert result.champion == "Ann"

    def test_draw_scores_nothing(self):
        a = ComputerPlayer("R2D2", Marker.X)
        b = ComputerPlayer("C3PO", Marker.O)
        match = Match(a, b)

        result = match.play(max_rounds=1)

        assert result.rounds[0].is_draw
        assert result.scores == {"R2D2": 0, "C3PO": 0}
        assert result.champion is None

    def test_reset(self):
        a = HumanPlayer("Ann", Marker.X, lowest_square)
        b = HumanPlayer("Bob", Marker.O, lowest_square)
        match = Match(a, b, rounds_to_win=1)
        match.play()
        assert match.finished

        match.reset()
        assert match.scores == {"Ann": 0, "Bob": 0}
        assert match.rounds == []
        assert not match.finished


class TestComputerNeverLoses:
    def test_against_random_player(self):
        rng = np.random.default_rng(0)
        rand = RandomPlayer("Chaos", Marker.X, rng=rng)
        computer = ComputerPlayer("Sonny", Marker.O)
        match = Match(rand, computer, rounds_to_win=3)

        result = match.play(max_rounds=15)

        assert result.scores["Chaos"] == 0
        assert all(r.winner != Marker.X for r in result.rounds)


class TestNames:
    def test_pick_from_list(self):
        rng = random.Random(1)
        names = ["R2D2", "C3PO", "Sonny"]
        assert pick_computer_name(names, rng) in names

    def test_excludes_taken_names(self):
        rng = random.Random(1)
        for _ in range(20):
            assert pick_computer_name(["R2D2", "Sonny"], rng, exclude=["Sonny"]) == "R2D2"

    def test_no_name_left(self):
        with pytest.raises(ValueError):
            pick_computer_name(["Sonny"], exclude=["Sonny"])
