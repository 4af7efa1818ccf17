"""Tests for terminal detection and scoring."""

import pytest

from tictactoe.game import Board, Marker, PreconditionViolation
from tictactoe.search import is_terminal, score, WIN, DRAW, LOSS


class TestIsTerminal:
    def test_empty_board(self):
        assert not is_terminal(Board.empty())

    def test_win_before_full(self):
        assert is_terminal(Board.from_string("XXXOO...."))

    def test_full_draw(self):
        assert is_terminal(Board.from_string("XOXXOOOXX"))

    def test_in_progress(self):
        assert not is_terminal(Board.from_string("XX.OO...."))


class TestScore:
    def test_draw_scores_zero(self):
        board = Board.from_string("XOXXOOOXX")
        assert score(board, Marker.X, Marker.O) == DRAW == 0
        assert score(board, Marker.O, Marker.X) == 0

    def test_own_line_scores_plus_one(self):
        board = Board.from_string("XXXOO....")
        assert score(board, Marker.X, Marker.O) == WIN == 1

    def test_opponent_line_scores_minus_one(self):
        board = Board.from_string("XXXOO....")
        assert score(board, Marker.O, Marker.X) == LOSS == -1

    def test_full_board_with_winner(self):
        # X completes the 1-5-9 diagonal with the last cell
        board = Board.from_string("XOOOXXXOX")
        assert board.is_full()
        assert score(board, Marker.X, Marker.O) == 1

    def test_non_terminal_raises(self):
        with pytest.raises(PreconditionViolation):
            score(Board.from_string("XX.OO...."), Marker.X, Marker.O)

    def test_precondition_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            score(Board.empty(), Marker.X, Marker.O)
