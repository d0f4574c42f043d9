from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from c4search.config import CLEAR_SCREEN
from c4search.core.board import Board
from c4search.types import Color, COLOR_A, EMPTY
from c4search.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET, color_enabled

Coord = Tuple[int, int]


def _piece(cell: Color) -> str:
    if cell == EMPTY:
        return c("·", FG_GRAY)
    if cell == COLOR_A:
        return c("A", FG_RED)
    return c("B", FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN and color_enabled():
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str((i + 1) % 10) for i in range(board.size))
    print(c(nums, DIM))

    # Row 0 is the bottom, so print from the top down.
    for r in range(board.size - 1, -1, -1):
        parts = []
        for cidx in range(board.size):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = f"{REVERSE}{p}{RESET}" if color_enabled() else "*"
            parts.append(p)

        print(" | " + " ".join(parts) + " |")

    print(c("   " + "—" * (2 * board.size - 1), DIM))
    print(c(f"   Enter 1-{board.size} to drop. Enter q to quit.", DIM))
