from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import RESULTS_GLOB, latest_results_csv, load_results
from ..metrics.summarize import SummaryConfig, depth_profile, filter_rows, numeric_summary, top_table
from ..plots.chart import plot_depth_cost, plot_scatter, plot_top_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="c4search_analysis", description="Analyze c4search match results CSVs.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help=f"Directory containing {RESULTS_GLOB}")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    ap.add_argument("--top", type=int, default=20, help="Top N for tables/bar charts")
    ap.add_argument("--metric", type=str, default="strength_wilson_lcb", help="Ranking metric (e.g. strength_wilson_lcb, ppg, nodes_per_move)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out entrants with fewer than this many games")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = latest_results_csv(Path(args.results_dir))

    df = load_results(csv_path)

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
    )

    table = top_table(df, cfg)
    print("\n=== Top table ===")
    print(table.to_string(index=False))

    profile = depth_profile(df) if "depth" in df.columns else None
    if profile is not None and not profile.empty:
        print("\n=== By depth ===")
        print(profile.to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    filtered = filter_rows(df, cfg)

    plot_top_bar(filtered, outdir, metric=args.metric, top_n=args.top, show=args.show)
    plot_scatter(filtered, outdir, x="avg_ms_per_move", y=args.metric, show=args.show)
    if profile is not None:
        plot_depth_cost(profile, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
