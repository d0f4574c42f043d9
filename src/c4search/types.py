# src/c4search/types.py

from __future__ import annotations
from typing import NewType, Protocol

Color = int                    # +1 / -1, opponent is -color
Move = NewType("Move", int)    # column index 0..N-1

EMPTY: Color = 0
COLOR_A: Color = 1
COLOR_B: Color = -1


class GameBoard(Protocol):
    """
    The only board surface the search and the evaluator are allowed to touch.
    Storage layout stays private to the implementation.
    """

    def width(self) -> int: ...

    def height(self) -> int: ...

    def cell_color(self, row: int, col: int) -> Color: ...

    def is_legal_move(self, col: int) -> bool: ...

    def drop_piece(self, col: int, color: Color) -> int: ...

    def completes_four_in_row(self, col: int, color: Color) -> bool: ...

    def has_legal_move(self) -> bool: ...

    def copy(self) -> "GameBoard": ...


def color_name(color: Color) -> str:
    if color == COLOR_A:
        return "A"
    if color == COLOR_B:
        return "B"
    return "."
