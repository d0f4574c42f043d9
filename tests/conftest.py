"""Shared board fixtures."""

import pytest

from c4search.core.board import Board
from c4search.types import COLOR_A, COLOR_B

A = COLOR_A
B = COLOR_B


def _no_four_grid(size):
    # Pairs of columns alternate by row: AABBAABB / BBAABBAA / ...
    # No horizontal, vertical or diagonal run ever reaches four.
    return [[A if (r + c // 2) % 2 == 0 else B for c in range(size)] for r in range(size)]


@pytest.fixture
def full_board():
    """8x8 board with every cell filled and no four-in-a-row anywhere."""
    return Board(8, grid=_no_four_grid(8))


@pytest.fixture
def one_slot_board():
    """Full no-four board with only the top cell of column 7 left empty."""
    grid = _no_four_grid(8)
    grid[7][7] = 0
    return Board(8, grid=grid)
