from __future__ import annotations

from c4search.types import Move
from c4search.game.state import GameState


class HumanAgent:
    name = "Human"

    def choose_move(self, state: GameState) -> Move:
        raise RuntimeError("HumanAgent.choose_move should never be called.")
