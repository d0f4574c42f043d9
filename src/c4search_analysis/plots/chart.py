from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")

    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.6)
    for _, row in df.iterrows():
        plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=7, alpha=0.8)
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)

    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show=show)


def plot_depth_cost(profile: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Nodes per move against search depth, log scale (cost grows roughly geometrically)."""
    if profile.empty or "nodes_per_move" not in profile.columns:
        return None

    fig = plt.figure()
    plt.plot(profile["depth"], profile["nodes_per_move"], marker="o")
    plt.yscale("log")
    plt.title("Evaluated leaves per move by depth")
    plt.xlabel("depth (plies)")
    plt.ylabel("nodes per move")

    return _finish(fig, outdir, "depth_nodes_per_move.png", show=show)
