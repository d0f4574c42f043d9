from __future__ import annotations
from typing import Optional, List, Tuple

from c4search.config import CONNECT_N
from c4search.core.board import Board, DIRECTIONS
from c4search.types import Color, EMPTY

Coord = Tuple[int, int]  # (row, col)


def check_winner_with_line(board: Board) -> Optional[Tuple[Color, List[Coord]]]:
    g = board.grid
    n = board.size
    k = CONNECT_N

    for dr, dc in DIRECTIONS:
        for r in range(n):
            for c in range(n):
                end_r = r + (k - 1) * dr
                end_c = c + (k - 1) * dc
                if not (0 <= end_r < n and 0 <= end_c < n):
                    continue
                p = g[r][c]
                if p == EMPTY:
                    continue
                line = [(r + i * dr, c + i * dc) for i in range(k)]
                if all(g[rr][cc] == p for rr, cc in line):
                    return p, line

    return None


def check_winner(board: Board) -> Optional[Color]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
