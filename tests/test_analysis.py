"""Tests for the results analysis package."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from c4search.scripts.match import CSV_COLUMNS
from c4search_analysis.cli.analyze_csv import main as analyze_main
from c4search_analysis.io.load_results import latest_results_csv, load_results
from c4search_analysis.metrics.summarize import SummaryConfig, depth_profile, numeric_summary, top_table
from c4search_analysis.plots.chart import plot_depth_cost, plot_scatter, plot_top_bar

ROWS = [
    ["Random", "", 4, 0, 1, 3, 0.5, 0.125, 0.02, 0.01, 0.0, 40, 40, 0],
    ["Minimax d2", 2, 4, 2, 1, 1, 2.5, 0.625, 0.3, 3.2, 60.0, 40, 128, 2400],
    ["Minimax d4", 4, 4, 3, 0, 1, 3.0, 0.75, 0.4, 25.0, 900.0, 38, 950, 34200],
]


@pytest.fixture
def results_csv(tmp_path):
    path = tmp_path / "match_results_20260101_120000.csv"
    pd.DataFrame(ROWS, columns=CSV_COLUMNS).to_csv(path, index=False)
    return path


class TestLoad:

    def test_load_results(self, results_csv):
        df = load_results(results_csv)
        assert list(df["name"]) == ["Random", "Minimax d2", "Minimax d4"]
        assert pd.isna(df.loc[0, "depth"])
        assert df["nodes_per_move"].dtype.kind == "f"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(tmp_path / "nope.csv")

    def test_missing_name_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        pd.DataFrame({"games": [1]}).to_csv(path, index=False)
        with pytest.raises(ValueError):
            load_results(path)

    def test_latest_from_dir(self, tmp_path, results_csv):
        newer = tmp_path / "match_results_20260202_080000.csv"
        newer.write_text(results_csv.read_text())
        assert latest_results_csv(tmp_path) == newer

    def test_latest_from_empty_dir(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            latest_results_csv(tmp_path)


class TestSummaries:

    def test_top_table_by_strength(self, results_csv):
        df = load_results(results_csv)
        table = top_table(df, SummaryConfig(metric="strength_wilson_lcb", top_n=2))
        assert list(table["name"]) == ["Minimax d4", "Minimax d2"]
        assert list(table["rk"]) == [1, 2]

    def test_cost_metric_sorts_ascending(self, results_csv):
        df = load_results(results_csv)
        table = top_table(df, SummaryConfig(metric="nodes_per_move"))
        assert table.loc[0, "name"] == "Random"

    def test_unknown_metric(self, results_csv):
        df = load_results(results_csv)
        with pytest.raises(ValueError):
            top_table(df, SummaryConfig(metric="elo"))  # type: ignore[arg-type]

    def test_depth_profile(self, results_csv):
        df = load_results(results_csv)
        prof = depth_profile(df)
        assert list(prof["depth"]) == [2, 4]
        assert list(prof["nodes_per_move"]) == [60.0, 900.0]
        assert list(prof["entrants"]) == [1, 1]

    def test_numeric_summary(self, results_csv):
        df = load_results(results_csv)
        desc = numeric_summary(df)
        assert "games" in desc.index
        assert desc.loc["games", "mean"] == 4


class TestPlots:

    def test_saves_figures(self, results_csv, tmp_path):
        df = load_results(results_csv)
        outdir = tmp_path / "figs"
        bar = plot_top_bar(df, outdir, metric="ppg", top_n=3, show=False)
        scatter = plot_scatter(df, outdir, x="avg_ms_per_move", y="ppg", show=False)
        cost = plot_depth_cost(depth_profile(df), outdir, show=False)
        for p in (bar, scatter, cost):
            assert p is not None and p.exists()

    def test_skips_missing_metric(self, results_csv, tmp_path):
        df = load_results(results_csv)
        assert plot_top_bar(df, tmp_path, metric="elo", top_n=3, show=False) is None


class TestCli:

    def test_tables_only(self, results_csv, capsys):
        assert analyze_main(["--csv", str(results_csv), "--no-plots"]) == 0
        out = capsys.readouterr().out
        assert "Minimax d4" in out
        assert "By depth" in out

    def test_with_plots(self, results_csv, tmp_path):
        outdir = tmp_path / "out"
        assert analyze_main(["--csv", str(results_csv), "--outdir", str(outdir)]) == 0
        assert (outdir / "depth_nodes_per_move.png").exists()
