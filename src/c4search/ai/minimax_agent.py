from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time

from c4search.ai.ordering import center_first
from c4search.ai.search import SearchEngine
from c4search.config import SEARCH_DEPTH, WIN_SCORE
from c4search.game.state import GameState
from c4search.types import Color, GameBoard, Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    depth: int = SEARCH_DEPTH
    engine: SearchEngine = field(default_factory=SearchEngine)

    # Stats of the last decision
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 1:
            raise ValueError(f"Search depth must be a positive integer, got {self.depth!r}.")

    def choose_move(self, state: GameState) -> Move:
        return self.choose_column(state.board, state.current)

    def choose_column(self, board: GameBoard, color: Color) -> Move:
        start = time.perf_counter()
        self.last_info = {}

        nodes = 0
        cutoffs = 0
        searched = 0

        candidates: list[tuple[int, GameBoard]] = []
        for col in center_first(board.width()):
            if not board.is_legal_move(col):
                continue

            child = board.copy()
            child.drop_piece(col, color)

            # Winning right now beats anything the search could say.
            if child.completes_four_in_row(col, color):
                self._record(Move(col), WIN_SCORE, "win", 0, 0, 0, start)
                return Move(col)
            candidates.append((col, child))

        if not candidates:
            raise ValueError("No valid moves.")

        best_move = Move(candidates[0][0])
        best_score = -inf
        alpha = -inf

        for col, child in candidates:
            result = self.engine.search(child, -color, col, self.depth - 1, color, alpha, inf)
            searched += 1
            nodes += result.nodes
            cutoffs += result.cutoffs

            # Strictly greater: the first column found keeps ties.
            if result.score > best_score:
                best_score = result.score
                best_move = Move(col)
            alpha = max(alpha, result.score)

        self._record(best_move, int(best_score), "search", nodes, cutoffs, searched, start)
        return best_move

    def _record(
        self, move: Move, score: int, reason: str, nodes: int, cutoffs: int, searched: int, start: float
    ) -> None:
        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": nodes,
            "cutoffs": cutoffs,
            "searched": searched,
            "eval": score,
            "reason": reason,
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s chose column %d (%s, eval=%d, nodes=%d, cutoffs=%d, %dms)",
            self.name, int(move), reason, score, nodes, cutoffs, self.last_info["time_ms"],
        )
