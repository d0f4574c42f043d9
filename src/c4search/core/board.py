# src/c4search/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from c4search.config import BOARD_SIZE, CONNECT_N
from c4search.types import Color, Move, EMPTY, color_name

# (d_row, d_col) for horizontal, vertical, diagonal up-right, diagonal down-right
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


@dataclass(slots=True)
class Board:
    """
    Square N x N grid. Row 0 is the bottom; pieces enter from the top row.
    Cells hold +1 / -1 for the two colors and 0 when empty.
    """
    size: int = BOARD_SIZE
    grid: List[List[Color]] = field(default_factory=list)
    heights: List[int] = field(default_factory=list)  # pieces per column

    def __post_init__(self) -> None:
        if self.size < CONNECT_N:
            raise ValueError(f"Board size must be at least {CONNECT_N}.")
        if not self.grid:
            self.grid = [[EMPTY for _ in range(self.size)] for _ in range(self.size)]
        else:
            self._check_grid()
        # A board built from an existing grid derives its column heights once.
        self.heights = [
            sum(1 for r in range(self.size) if self.grid[r][c] != EMPTY)
            for c in range(self.size)
        ]

    def _check_grid(self) -> None:
        n = self.size
        if len(self.grid) != n or any(len(row) != n for row in self.grid):
            raise ValueError(f"Grid must be {n}x{n}.")
        for r, row in enumerate(self.grid):
            for c, v in enumerate(row):
                if v not in (EMPTY, 1, -1):
                    raise ValueError(f"Invalid cell value {v!r} at ({r}, {c}).")
                # Gravity: nothing may rest on an empty cell.
                if v != EMPTY and r > 0 and self.grid[r - 1][c] == EMPTY:
                    raise ValueError(f"Floating piece at ({r}, {c}).")

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Color]], size: int = BOARD_SIZE) -> "Board":
        """
        Build a board by dropping pieces column by column, bottom piece first.
        `columns[c]` lists the colors stacked in column c.
        """
        b = cls(size)
        for c, stack in enumerate(columns):
            for color in stack:
                b.drop_piece(c, color)
        return b

    def copy(self) -> "Board":
        b = Board.__new__(Board)
        b.size = self.size
        b.grid = [row[:] for row in self.grid]
        b.heights = self.heights[:]
        return b

    def swapped(self) -> "Board":
        """Same position with the two colors exchanged."""
        b = self.copy()
        b.grid = [[-v for v in row] for row in self.grid]
        return b

    def width(self) -> int:
        return self.size

    def height(self) -> int:
        return self.size

    def cell_color(self, row: int, col: int) -> Color:
        return self.grid[row][col]

    def is_legal_move(self, col: int) -> bool:
        return 0 <= col < self.size and self.heights[col] < self.size

    def has_legal_move(self) -> bool:
        return any(h < self.size for h in self.heights)

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.size) if self.heights[c] < self.size]

    def is_full(self) -> bool:
        return not self.has_legal_move()

    def drop_piece(self, col: int, color: Color) -> int:
        c = int(col)
        if c < 0 or c >= self.size:
            raise ValueError("Column out of range.")
        if color not in (1, -1):
            raise ValueError(f"Invalid color: {color!r}")
        r = self.heights[c]
        if r >= self.size:
            raise ValueError("Column is full.")

        self.grid[r][c] = color
        self.heights[c] = r + 1
        return r

    def completes_four_in_row(self, col: int, color: Color) -> bool:
        """
        True if the top piece of `col` belongs to `color` and sits on a line of
        CONNECT_N or more. Meant to be called right after a drop into `col`.
        """
        r = self.heights[col] - 1
        if r < 0 or self.grid[r][col] != color:
            return False

        n = self.size
        g = self.grid
        for dr, dc in DIRECTIONS:
            run = 1
            for sign in (1, -1):
                rr, cc = r + sign * dr, col + sign * dc
                while 0 <= rr < n and 0 <= cc < n and g[rr][cc] == color:
                    run += 1
                    rr += sign * dr
                    cc += sign * dc
            if run >= CONNECT_N:
                return True
        return False

    def __str__(self) -> str:
        lines = []
        for r in range(self.size - 1, -1, -1):
            lines.append(" ".join(color_name(v) for v in self.grid[r]))
        lines.append(" ".join(str(c % 10) for c in range(self.size)))
        return "\n".join(lines)
