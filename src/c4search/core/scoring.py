from __future__ import annotations
from dataclasses import dataclass

from c4search.config import (
    CONNECT_N,
    THREAT_BONUS,
    WEIGHT_CENTER,
    WEIGHT_THREE,
    WEIGHT_TWO,
    WIN_SCORE,
)
from c4search.types import Color, GameBoard, EMPTY


@dataclass(frozen=True, slots=True)
class Weights:
    three: int = WEIGHT_THREE
    two: int = WEIGHT_TWO
    center: int = WEIGHT_CENTER
    threat: int = THREAT_BONUS

    def __post_init__(self) -> None:
        # Accumulated heuristic weight must never outrank a real one-ply win.
        if not 0 <= self.three < WIN_SCORE // 10:
            raise ValueError(f"three-in-a-row weight must be in [0, {WIN_SCORE // 10}).")
        if not 0 <= self.two <= self.three:
            raise ValueError("two-in-a-row weight must be in [0, three].")
        if self.center < 0:
            raise ValueError("center weight must be non-negative.")
        if not 0 <= self.threat < WIN_SCORE:
            raise ValueError(f"threat bonus must be in [0, {WIN_SCORE}).")


DEFAULT_WEIGHTS = Weights()


def _window_match(board: GameBoard, r: int, c: int, dr: int, dc: int, color: Color, length: int) -> int:
    own = 0
    empty = 0
    for i in range(CONNECT_N):
        v = board.cell_color(r + i * dr, c + i * dc)
        if v == color:
            own += 1
        elif v == EMPTY:
            empty += 1
        else:
            return 0  # blocked by the other color
    return 1 if own == length and empty == CONNECT_N - length else 0


def count_lines(board: GameBoard, color: Color, length: int) -> int:
    """
    Number of open 4-cell windows holding exactly `length` pieces of `color`
    and empty cells everywhere else.
    """
    rows, cols = board.height(), board.width()
    span = CONNECT_N - 1
    total = 0

    # Horizontal
    for r in range(rows):
        for c in range(cols - span):
            total += _window_match(board, r, c, 0, 1, color, length)

    # Vertical
    for r in range(rows - span):
        for c in range(cols):
            total += _window_match(board, r, c, 1, 0, color, length)

    # Diagonal up-right
    for r in range(rows - span):
        for c in range(cols - span):
            total += _window_match(board, r, c, 1, 1, color, length)

    # Diagonal down-right
    for r in range(span, rows):
        for c in range(cols - span):
            total += _window_match(board, r, c, -1, 1, color, length)

    return total


def center_control(board: GameBoard, color: Color) -> int:
    half = board.width() // 2
    score = 0
    for r in range(board.height()):
        for c in range(board.width()):
            if board.cell_color(r, c) == color:
                score += half - abs(c - half)
    return score


def can_win_next(board: GameBoard, color: Color) -> bool:
    for col in range(board.width()):
        if not board.is_legal_move(col):
            continue
        trial = board.copy()
        trial.drop_piece(col, color)
        if trial.completes_four_in_row(col, color):
            return True
    return False


def line_balance(board: GameBoard, color: Color, weights: Weights = DEFAULT_WEIGHTS) -> int:
    score = weights.three * (count_lines(board, color, 3) - count_lines(board, -color, 3))
    score += weights.two * (count_lines(board, color, 2) - count_lines(board, -color, 2))
    return score


def evaluate(board: GameBoard, color: Color, weights: Weights = DEFAULT_WEIGHTS) -> int:
    """
    Leaf score of a non-terminal board, positive when it favors `color`.

    A win available on the next move returns the fixed threat bonus instead of
    the weighted sum; our own win is checked before the opponent's.
    """
    if can_win_next(board, color):
        return weights.threat
    if can_win_next(board, -color):
        return -weights.threat

    score = line_balance(board, color, weights)
    score += weights.center * center_control(board, color)
    return score
