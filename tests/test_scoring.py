"""Tests for the leaf evaluator."""

import pytest

from c4search.config import THREAT_BONUS, WIN_SCORE
from c4search.core.board import Board
from c4search.core.scoring import (
    Weights,
    can_win_next,
    center_control,
    count_lines,
    evaluate,
    line_balance,
)
from c4search.types import COLOR_A, COLOR_B

A = COLOR_A
B = COLOR_B


class TestLineCounts:
    """Exact-count window matching."""

    def test_empty_board(self):
        board = Board()
        assert count_lines(board, A, 2) == 0
        assert count_lines(board, A, 3) == 0

    def test_pair_on_bottom_row(self):
        board = Board.from_columns([[A], [A]])
        assert count_lines(board, A, 2) == 1
        assert count_lines(board, A, 3) == 0
        assert count_lines(board, B, 2) == 0

    def test_three_does_not_also_count_as_two(self):
        board = Board.from_columns([[A], [A], [A]])
        # window 0-3 holds three; window 1-4 holds the other two
        assert count_lines(board, A, 3) == 1
        assert count_lines(board, A, 2) == 1

    def test_blocked_windows_score_nothing(self):
        board = Board.from_columns([[A], [A], [A], [B]])
        assert count_lines(board, A, 3) == 0
        assert count_lines(board, A, 2) == 0

    def test_vertical_three(self):
        board = Board.from_columns([[], [], [A, A, A]])
        # rows 0-3 window only; rows 1-4 holds two
        assert count_lines(board, A, 3) == 1
        assert count_lines(board, A, 2) == 1

    def test_up_right_diagonal_three_from_corner(self):
        # A on (0,0), (1,1), (2,2) with B underneath
        board = Board.from_columns([[A], [B, A], [B, B, A]])
        # window from (0,0) holds three; window from (1,1) holds two
        assert count_lines(board, A, 3) == 1
        assert count_lines(board, A, 2) == 1

    def test_down_right_diagonal_two_at_edge(self):
        # A on (1,6) and (0,7); the window (3,4)..(0,7) ends in the corner
        board = Board.from_columns([[], [], [], [], [], [], [B, A], [A]])
        assert count_lines(board, A, 2) == 1
        assert count_lines(board, A, 3) == 0

    def test_diagonal_blocked_by_opponent(self):
        board = Board.from_columns([[A], [B, A], [B, B, A], [A, B, A, B]])
        # (3,3) holds B, so the only up-right window through all three is dead
        assert count_lines(board, A, 3) == 0


class TestCenterControl:

    def test_distance_from_middle(self):
        board = Board.from_columns([[A], [], [], [], [A], [B]])
        # width 8, middle column 4: col 0 -> 0, col 4 -> 4
        assert center_control(board, A) == 4
        # col 5 -> 3
        assert center_control(board, B) == 3


class TestThreats:

    def test_can_win_next(self):
        board = Board.from_columns([[A], [A], [A]])
        assert can_win_next(board, A)
        assert not can_win_next(board, B)

    def test_own_win_short_circuits(self):
        board = Board.from_columns([[A], [A], [A]])
        assert evaluate(board, A) == THREAT_BONUS

    def test_opponent_win_short_circuits(self):
        board = Board.from_columns([[A], [A], [A]])
        assert evaluate(board, B) == -THREAT_BONUS

    def test_own_win_checked_first(self):
        board = Board.from_columns([[A], [A], [A], [], [], [], [], [B, B, B]])
        assert evaluate(board, A) == THREAT_BONUS
        assert evaluate(board, B) == THREAT_BONUS


class TestWeightedSum:

    def test_exact_value(self):
        board = Board.from_columns([[A], [A], [], [], [], [], [], [B]])
        # one open pair for A (1000) + center of col 0 (0) and col 1 (1) * 100
        assert evaluate(board, A) == 1_000 + 100

    def test_custom_weights(self):
        board = Board.from_columns([[A], [A]])
        w = Weights(three=10, two=5, center=1, threat=1_000)
        assert evaluate(board, A, w) == 5 + 1

    def test_weights_stay_below_win(self):
        with pytest.raises(ValueError):
            Weights(three=WIN_SCORE // 10)
        with pytest.raises(ValueError):
            Weights(threat=WIN_SCORE)
        with pytest.raises(ValueError):
            Weights(two=60_000)


POSITIONS = [
    [[A], [A]],
    [[A, B], [B], [A, A], [], [B, A, B]],
    [[], [], [B, A], [A, B, A], [B, B], [A], [], [B]],
    [[A], [A], [A], [], [], [], [], [B, B, B]],
]


class TestColorSymmetry:
    """Swapping colors together with the perspective is a pure relabeling."""

    @pytest.mark.parametrize("columns", POSITIONS)
    @pytest.mark.parametrize("color", [A, B])
    def test_relabeling_invariance(self, columns, color):
        board = Board.from_columns(columns)
        assert evaluate(board.swapped(), -color) == evaluate(board, color)

    @pytest.mark.parametrize("columns", POSITIONS)
    @pytest.mark.parametrize("color", [A, B])
    def test_line_signals_invert_on_swap(self, columns, color):
        board = Board.from_columns(columns)
        assert line_balance(board.swapped(), color) == -line_balance(board, color)
        assert line_balance(board, -color) == -line_balance(board, color)
