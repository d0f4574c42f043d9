from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "nodes_per_move",
    "wins",
    "points",
]

# Lower is better for the cost metrics
ASCENDING_METRICS = {"avg_ms_per_move", "nodes_per_move"}


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games].copy()
    return out


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = filter_rows(df, cfg)
    out = out.sort_values(cfg.metric, ascending=cfg.metric in ASCENDING_METRICS)

    cols = [
        "name", "depth",
        "games", "wins", "draws", "losses",
        "ppg",
        "strength_wilson_lcb",
        "avg_ms_per_move", "nodes_per_move",
    ]
    keep = [c for c in cols if c in out.columns]

    out = out[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def depth_profile(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per search depth: how much work each extra ply costs and what it buys.
    Rows without a depth (random baseline) are left out.
    """
    _require_cols(df, ["depth"])
    searched = df.dropna(subset=["depth"])
    if searched.empty:
        return pd.DataFrame(columns=["depth", "entrants", "ppg", "avg_ms_per_move", "nodes_per_move"])

    named_aggs = {"entrants": ("name", "count")}
    for c in ("ppg", "avg_ms_per_move", "nodes_per_move"):
        if c in searched.columns:
            named_aggs[c] = (c, "mean")

    prof = searched.groupby("depth").agg(**named_aggs).reset_index()
    prof["depth"] = prof["depth"].astype(int)
    return prof.sort_values("depth").reset_index(drop=True)


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T
