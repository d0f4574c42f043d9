from __future__ import annotations

from pathlib import Path

import pandas as pd

from c4search.scripts.match import CSV_COLUMNS

RESULTS_GLOB = "match_results_*.csv"


def load_results(csv_path: Path) -> pd.DataFrame:
    """Read a standings CSV written by `c4search match`, one row per entrant."""
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)
    if "name" not in df.columns:
        raise ValueError(f"CSV missing required column 'name'. Columns: {list(df.columns)}")

    # Blank depth (random baseline) becomes NaN
    for col in CSV_COLUMNS:
        if col != "name" and col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    df["name"] = df["name"].astype(str)
    return df


def latest_results_csv(results_dir: Path) -> Path:
    files = sorted(results_dir.glob(RESULTS_GLOB))
    if not files:
        raise FileNotFoundError(f"No {RESULTS_GLOB} in {results_dir}")
    # Timestamped names sort chronologically
    return files[-1]
