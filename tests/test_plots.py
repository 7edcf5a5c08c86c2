"""Tests for the running-best figure."""
import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from exact_tsp.classical import ExactTSPSolver
from exact_tsp.plots import plot_running_best
from exact_tsp.problem import sample_distance_matrix
from exact_tsp.report import RecordingReporter


class TestPlotRunningBest:
    def test_saves_png(self, tmp_path):
        recorder = RecordingReporter()
        route = ExactTSPSolver(sample_distance_matrix()).solve(reporter=recorder)
        path = plot_running_best(recorder.to_frame(), route.total_distance, tmp_path / "figs" / "best.png")
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_empty_frame_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            plot_running_best(RecordingReporter().to_frame(), 0.0, tmp_path / "x.png")

    def test_accepts_string_path(self, tmp_path):
        frame = pd.DataFrame({"iteration": [1, 2], "distance": [5.0, 3.0], "running_best": [5.0, 3.0]})
        path = plot_running_best(frame, 3.0, str(tmp_path / "s.png"))
        assert path.name == "s.png"
