from __future__ import annotations
from dataclasses import dataclass

from c4search.core.board import Board
from c4search.types import Color, COLOR_A


@dataclass(slots=True)
class GameState:
    board: Board
    current: Color = COLOR_A
    last_status: str = "Player A starts."
