from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Sequence

import pandas as pd

from .problem import city_label

if TYPE_CHECKING:
    from .classical import Route

BANNER = "+" * 81


class Reporter(Protocol):
    """Observer of a search: one call per scored candidate, then the result."""

    def on_candidate(self, cities: Sequence[int], distance: float, iteration: int) -> None:
        ...

    def finish(self, route: "Route") -> None:
        ...


def describe_route(cities: Sequence[int], names: Sequence[str]) -> str:
    """Render indices as 'START -> Toronto -> ... -> FINISH'."""
    labels = [city_label(i, names) for i in cities]
    return " -> ".join(["START", *labels, "FINISH"])


class ConsoleReporter:
    """
    Print the search to stdout.

    Args:
        names: Display name for each location index.
        verbose: Print every candidate, not only the final summary.
    """

    def __init__(self, names: Sequence[str], verbose: bool = True):
        self.names = list(names)
        self.verbose = verbose

    def on_candidate(self, cities: Sequence[int], distance: float, iteration: int) -> None:
        if not self.verbose:
            return
        print(f"This is iteration #{iteration}")
        print(f"The current distance of route is -> {distance:g}")
        print(f"The route is -> {describe_route(cities, self.names)}")
        print()

    def finish(self, route: "Route") -> None:
        print(f"\n{BANNER}\n")
        print(f"The shortest route distance is -> {route.total_distance:g}")
        print(f"The route is -> {describe_route(route.cities, self.names)}")
        print(f"\n{BANNER}\n")


class RecordingReporter:
    """Keep one row per candidate for later analysis."""

    def __init__(self):
        self.rows: List[Dict] = []
        self.best: Optional["Route"] = None

    def on_candidate(self, cities: Sequence[int], distance: float, iteration: int) -> None:
        running_best = min(distance, self.rows[-1]["running_best"]) if self.rows else distance
        self.rows.append({
            "iteration": iteration,
            "route": " ".join(str(c) for c in cities),
            "distance": float(distance),
            "running_best": float(running_best),
        })

    def finish(self, route: "Route") -> None:
        self.best = route

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=["iteration", "route", "distance", "running_best"])


class MultiReporter:
    """Forward every event to each wrapped reporter, in order."""

    def __init__(self, *reporters: Reporter):
        self.reporters = reporters

    def on_candidate(self, cities: Sequence[int], distance: float, iteration: int) -> None:
        for reporter in self.reporters:
            reporter.on_candidate(cities, distance, iteration)

    def finish(self, route: "Route") -> None:
        for reporter in self.reporters:
            reporter.finish(route)


def save_results(row: dict, outdir: str = "results") -> Path:
    """
    Save results to both JSON and CSV formats.

    Args:
        row: Dictionary containing result data to save.
        outdir: Output directory path (default: "results").

    Returns:
        Path of the JSON file.
    """
    Path(outdir).mkdir(parents=True, exist_ok=True)
    json_path = Path(outdir) / "results.json"
    with open(json_path, "w") as f:
        json.dump(row, f, indent=2)
    # csv (single-row)
    pd.DataFrame([row]).to_csv(Path(outdir) / "results.csv", index=False)
    return json_path


def save_iterations(frame: pd.DataFrame, outdir: str = "results") -> Path:
    """Write the per-candidate log to <outdir>/iterations.csv."""
    Path(outdir).mkdir(parents=True, exist_ok=True)
    path = Path(outdir) / "iterations.csv"
    frame.to_csv(path, index=False)
    return path
