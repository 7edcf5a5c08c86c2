"""Tests for the sample run."""
import json

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from exact_tsp import main as main_module
from exact_tsp.config import RunConfig
from exact_tsp.main import EXPECTED_OPTIMAL_DISTANCE, run


class TestRun:
    def test_sample_solution(self, tmp_path):
        route = run(RunConfig(outdir=str(tmp_path), verbose=False))
        assert route.cities == (0, 2, 4, 1, 3, 0)
        assert route.total_distance == EXPECTED_OPTIMAL_DISTANCE

    def test_writes_results(self, tmp_path):
        run(RunConfig(outdir=str(tmp_path), verbose=False))
        data = json.loads((tmp_path / "results.json").read_text())
        assert data["optimal_tour_names"][0] == data["optimal_tour_names"][-1] == "Toronto"
        assert data["search_space_size"] == 120
        assert len(pd.read_csv(tmp_path / "iterations.csv")) == 120
        assert (tmp_path / "results.csv").exists()
        assert not (tmp_path / "running_best.png").exists()

    def test_fix_start(self, tmp_path):
        route = run(RunConfig(outdir=str(tmp_path), verbose=False, fix_start=True))
        assert route.cities == (0, 2, 4, 1, 3, 0)
        assert json.loads((tmp_path / "results.json").read_text())["search_space_size"] == 24

    def test_plot(self, tmp_path):
        run(RunConfig(outdir=str(tmp_path), verbose=False, plot=True))
        assert (tmp_path / "running_best.png").stat().st_size > 0

    def test_verbose_output(self, tmp_path, capsys):
        run(RunConfig(outdir=str(tmp_path)))
        out = capsys.readouterr().out
        assert "This is iteration #120" in out
        assert "The shortest route distance is -> 115" in out

    def test_limit_enforced(self, tmp_path):
        with pytest.raises(ValueError):
            run(RunConfig(outdir=str(tmp_path), max_locations=4))

    def test_baseline_drift(self, tmp_path, monkeypatch):
        monkeypatch.setattr(main_module, "EXPECTED_OPTIMAL_DISTANCE", 100.0)
        with pytest.raises(RuntimeError, match="Baseline drift"):
            run(RunConfig(outdir=str(tmp_path), verbose=False))

    def test_reads_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TSP_OUTDIR", str(tmp_path / "env"))
        monkeypatch.setenv("TSP_VERBOSE", "false")
        run()
        assert (tmp_path / "env" / "results.json").exists()
