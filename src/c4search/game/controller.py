from __future__ import annotations

from c4search.ai.base import Agent
from c4search.config import BOARD_SIZE
from c4search.core.board import Board
from c4search.core.rules import check_winner_with_line, is_draw
from c4search.game.state import GameState
from c4search.types import Color, COLOR_A, color_name
from c4search.ui.prompts import parse_move
from c4search.ui.render import render


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_a: Agent, agent_b: Agent, current: Color) -> str:
    a_name = _agent_name(agent_a, "Player A")
    b_name = _agent_name(agent_b, "Player B")

    header = f"A: {a_name} | B: {b_name} | Turn: {color_name(current)}"
    if status:
        return f"{header}\n{status}"
    return header


def _stats_line(agent: Agent, move: int) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} chose {move + 1}"
    return (
        f"{agent.name} chose {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(agent_a: Agent, agent_b: Agent, size: int = BOARD_SIZE) -> Color | None:
    """
    Console loop. Returns the winning color, 0 for a draw, or None if a human quit.
    """
    state = GameState(board=Board(size), current=COLOR_A, last_status="Player A starts.")

    while True:
        w = check_winner_with_line(state.board)
        if w is not None:
            winner, line = w
            render(
                state.board,
                _status_with_agents(f"Player {color_name(winner)} wins!", agent_a, agent_b, state.current),
                highlight=line,
            )
            return winner

        if is_draw(state.board):
            render(state.board, _status_with_agents("Draw game.", agent_a, agent_b, state.current))
            return 0

        render(state.board, _status_with_agents(state.last_status, agent_a, agent_b, state.current))

        current_agent = agent_a if state.current == COLOR_A else agent_b

        try:
            if current_agent.name == "Human":
                raw = input(f"Player {color_name(state.current)} move: ")
                move = parse_move(raw, state.board.size)
                if move is None:
                    render(state.board, _status_with_agents("Game quit.", agent_a, agent_b, state.current))
                    return None
                if not state.board.is_legal_move(move):
                    raise ValueError("Column is full.")
                status = f"Player {color_name(state.current)} chose {int(move) + 1}"
            else:
                move = current_agent.choose_move(state)
                status = _stats_line(current_agent, int(move))

            state.board.drop_piece(move, state.current)
            state.current = -state.current
            state.last_status = f"{status} | Next: Player {color_name(state.current)}"

        except ValueError as e:
            state.last_status = str(e)
