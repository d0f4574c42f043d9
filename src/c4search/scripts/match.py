from __future__ import annotations

import csv
import logging
import random
import time
from functools import partial
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

from c4search.ai.minimax_agent import MinimaxAgent
from c4search.ai.random_agent import RandomAgent
from c4search.config import BOARD_SIZE, OPENING_RANDOM_PLIES, RESULTS_DIR
from c4search.core.board import Board
from c4search.game.state import GameState
from c4search.types import Color, COLOR_A, COLOR_B

from .match_scoring import avg_ms_per_move, nodes_per_move, ppg, strength_score
from .match_types import Agg, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "depth",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move", "nodes_per_move",
    "moves", "time_ms", "nodes",
]

Stats = Dict[Color, Dict[str, int]]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(
    agent_a,
    agent_b,
    size: int = BOARD_SIZE,
    opening_plies: int = OPENING_RANDOM_PLIES,
    seed: int = 0,
) -> Tuple[Color, Stats]:
    """
    Play one silent game, A moving first. Returns the winning color (0 for a
    draw) and per-color move/time/node totals. A few random opening plies keep
    two deterministic agents from replaying the same game.
    """
    state = GameState(board=Board(size), current=COLOR_A, last_status="")
    stats: Stats = {
        COLOR_A: {"moves": 0, "time_ms": 0, "nodes": 0},
        COLOR_B: {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    seed_agent(agent_a, seed + 101)
    seed_agent(agent_b, seed + 202)

    rng = random.Random(seed)
    for _ in range(opening_plies):
        moves = state.board.valid_moves()
        if not moves:
            return 0, stats
        move = rng.choice(moves)
        state.board.drop_piece(move, state.current)
        if state.board.completes_four_in_row(move, state.current):
            return state.current, stats
        state.current = -state.current

    while True:
        if not state.board.has_legal_move():
            return 0, stats

        agent = agent_a if state.current == COLOR_A else agent_b
        start = time.perf_counter()
        move = agent.choose_move(state)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        info = getattr(agent, "last_info", None) or {}
        side = stats[state.current]
        side["moves"] += 1
        side["time_ms"] += max(1, int(info.get("time_ms", elapsed_ms)))
        side["nodes"] += int(info.get("nodes", 0))

        state.board.drop_piece(move, state.current)
        if state.board.completes_four_in_row(move, state.current):
            return state.current, stats
        state.current = -state.current


def add_result(agg_a: Agg, agg_b: Agg, outcome: Color, a_first: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == 0:
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == COLOR_A) == a_first
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def _add_stats(agg: Agg, side: Dict[str, int]) -> None:
    agg.moves += side["moves"]
    agg.time_ms += side["time_ms"]
    agg.nodes += side["nodes"]


def run_match(
    roster: Sequence[Team],
    games_per_pair: int = 2,
    size: int = BOARD_SIZE,
    seed: int = 1234,
    opening_plies: int = OPENING_RANDOM_PLIES,
) -> Dict[str, Agg]:
    """Round robin; the side that moves first alternates from game to game."""
    agg: Dict[str, Agg] = {t.name: Agg() for t in roster}

    game_no = 0
    for i, team_a in enumerate(roster):
        for team_b in roster[i + 1:]:
            for g in range(games_per_pair):
                a_first = g % 2 == 0
                first, second = (team_a, team_b) if a_first else (team_b, team_a)

                outcome, stats = play_headless(
                    first.make(), second.make(),
                    size=size, opening_plies=opening_plies, seed=seed + game_no,
                )
                game_no += 1

                add_result(agg[team_a.name], agg[team_b.name], outcome, a_first)
                _add_stats(agg[first.name], stats[COLOR_A])
                _add_stats(agg[second.name], stats[COLOR_B])

                logger.info(
                    "game %d: %s (A) vs %s (B) -> %s",
                    game_no, first.name, second.name,
                    {COLOR_A: "A wins", COLOR_B: "B wins"}.get(outcome, "draw"),
                )

    return agg


def build_roster(depths: Iterable[int], include_random: bool = True) -> List[Team]:
    teams: List[Team] = []
    if include_random:
        teams.append(Team("Random", partial(RandomAgent, name="Random")))
    for d in depths:
        name = f"Minimax d{d}"
        teams.append(Team(name, partial(MinimaxAgent, name=name, depth=d), depth=d))
    return teams


def export_csv(roster: Sequence[Team], agg: Dict[str, Agg], out_dir: Path | str = RESULTS_DIR, z: float = 1.28) -> Path:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"match_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for team in roster:
            a = agg[team.name]
            w.writerow([
                team.name, "" if team.depth is None else team.depth,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3), round(nodes_per_move(a), 3),
                a.moves, a.time_ms, a.nodes,
            ])

    return out_path


def print_standings(roster: Sequence[Team], agg: Dict[str, Agg], z: float = 1.28) -> None:
    ranked = sorted(roster, key=lambda t: (-strength_score(agg[t.name], z), avg_ms_per_move(agg[t.name])))
    print(f"{'rk':>3}  {'name':<16} {'W-D-L':>9} {'ppg':>6} {'lcb':>6} {'ms/mv':>8} {'nodes/mv':>10}")
    for rk, team in enumerate(ranked, 1):
        a = agg[team.name]
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(
            f"{rk:>3}  {team.name:<16} {wdl:>9} {ppg(a):>6.3f} {strength_score(a, z):>6.3f} "
            f"{avg_ms_per_move(a):>8.1f} {nodes_per_move(a):>10.1f}"
        )
