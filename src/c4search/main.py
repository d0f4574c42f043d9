from __future__ import annotations

import argparse
import logging
import time

from c4search.ai.minimax_agent import MinimaxAgent
from c4search.config import BOARD_SIZE, OPENING_RANDOM_PLIES, RESULTS_DIR, SEARCH_DEPTH
from c4search.game.controller import run_game
from c4search.scripts.match import build_roster, export_csv, print_standings, run_match
from c4search.ui.human import HumanAgent


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="c4search", description="Connect-4 alpha-beta player.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging (per-move search stats)")
    sub = ap.add_subparsers(dest="cmd")

    play = sub.add_parser("play", help="Human vs minimax in the terminal")
    play.add_argument("--size", type=int, default=BOARD_SIZE, help="Board is size x size")
    play.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth in plies")
    play.add_argument("--ai-first", action="store_true", help="Let the AI play color A")

    watch = sub.add_parser("watch", help="Minimax vs minimax in the terminal")
    watch.add_argument("--size", type=int, default=BOARD_SIZE)
    watch.add_argument("--depth-a", type=int, default=SEARCH_DEPTH)
    watch.add_argument("--depth-b", type=int, default=SEARCH_DEPTH)

    match = sub.add_parser("match", help="Headless round robin between search depths")
    match.add_argument("--size", type=int, default=BOARD_SIZE)
    match.add_argument("--depths", type=int, nargs="+", default=[2, 4], help="Depths to enter")
    match.add_argument("--games", type=int, default=2, help="Games per pairing")
    match.add_argument("--seed", type=int, default=1234)
    match.add_argument("--opening-plies", type=int, default=OPENING_RANDOM_PLIES, help="Random plies before agents take over")
    match.add_argument("--no-random", action="store_true", help="Leave the random baseline out")
    match.add_argument("--out", type=str, default=RESULTS_DIR, help="Directory for the results CSV")
    match.add_argument("--no-csv", action="store_true", help="Print standings only")

    return ap


def _run_match(args: argparse.Namespace) -> int:
    roster = build_roster(args.depths, include_random=not args.no_random)
    if len(roster) < 2:
        print("Need at least two entrants.")
        return 2

    print(f"Roster: {', '.join(t.name for t in roster)}")
    start = time.perf_counter()
    agg = run_match(roster, games_per_pair=args.games, size=args.size, seed=args.seed, opening_plies=args.opening_plies)
    elapsed = time.perf_counter() - start

    print()
    print_standings(roster, agg)
    print(f"\nTotal runtime: {elapsed:.1f}s")

    if not args.no_csv:
        path = export_csv(roster, agg, args.out)
        print(f"Wrote CSV: {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "watch":
            ai_a = MinimaxAgent(name=f"Minimax d{args.depth_a}", depth=args.depth_a)
            ai_b = MinimaxAgent(name=f"Minimax d{args.depth_b}", depth=args.depth_b)
            run_game(ai_a, ai_b, size=args.size)
            return 0

        if args.cmd == "match":
            return _run_match(args)

        # Default: human vs AI
        size = getattr(args, "size", BOARD_SIZE)
        depth = getattr(args, "depth", SEARCH_DEPTH)
        ai = MinimaxAgent(name=f"Minimax d{depth}", depth=depth)
        human = HumanAgent()
        if getattr(args, "ai_first", False):
            run_game(ai, human, size=size)
        else:
            run_game(human, ai, size=size)
        return 0

    except ValueError as e:
        print(f"Error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
