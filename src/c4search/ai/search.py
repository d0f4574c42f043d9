from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
from typing import Optional

from c4search.ai.ordering import center_first
from c4search.config import DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from c4search.core.scoring import DEFAULT_WEIGHTS, Weights, evaluate
from c4search.types import Color, GameBoard


@dataclass(frozen=True, slots=True)
class SearchResult:
    score: int
    nodes: int = 0      # leaves handed to the evaluator
    cutoffs: int = 0


@dataclass(slots=True)
class _Tally:
    nodes: int = 0
    cutoffs: int = 0


@dataclass(slots=True)
class SearchEngine:
    """
    Fixed-depth minimax with alpha-beta pruning.

    Every child position is a private copy of its parent, so sibling branches
    never share a mutable board. Counters live in a per-call tally and come back
    in the SearchResult; the engine itself holds no state between calls.
    """
    weights: Weights = field(default=DEFAULT_WEIGHTS)

    def search(
        self,
        board: GameBoard,
        active: Color,
        last_column: Optional[int],
        depth: int,
        root: Color,
        alpha: float = -inf,
        beta: float = inf,
    ) -> SearchResult:
        tally = _Tally()
        score = self._value(board, active, last_column, depth, root, alpha, beta, tally)
        return SearchResult(score=int(score), nodes=tally.nodes, cutoffs=tally.cutoffs)

    def _value(
        self,
        board: GameBoard,
        active: Color,
        last_column: Optional[int],
        depth: int,
        root: Color,
        alpha: float,
        beta: float,
        tally: _Tally,
    ) -> float:
        # The previous mover may have just won, even with the board now full.
        mover = -active
        if last_column is not None and board.completes_four_in_row(last_column, mover):
            return WIN_SCORE if mover == root else LOSS_SCORE

        if not board.has_legal_move():
            return DRAW_SCORE

        if depth <= 0:
            tally.nodes += 1
            return evaluate(board, root, self.weights)

        maximizing = active == root
        best = -inf if maximizing else inf

        for col in center_first(board.width()):
            if not board.is_legal_move(col):
                continue

            child = board.copy()
            child.drop_piece(col, active)
            v = self._value(child, -active, col, depth - 1, root, alpha, beta, tally)

            if maximizing:
                best = max(best, v)
                alpha = max(alpha, best)
                if alpha >= beta:
                    tally.cutoffs += 1
                    break
            else:
                best = min(best, v)
                beta = min(beta, best)
                if beta <= alpha:
                    tally.cutoffs += 1
                    break

        return best
