from __future__ import annotations

from pathlib import Path
from typing import Optional

from .classical import ExactTSPSolver, Route, search_space_size
from .config import RunConfig, load_config
from .problem import DistanceMatrix, sample_distance_matrix, toronto_locations, validate_distance_matrix
from .report import ConsoleReporter, MultiReporter, RecordingReporter, save_iterations, save_results


# Regression check: expected optimal round trip for the sample matrix
# If this changes, the sample matrix or the search was modified
EXPECTED_OPTIMAL_DISTANCE = 115.0
REGRESSION_TOLERANCE = 1e-9


def run(config: Optional[RunConfig] = None) -> Route:
    """
    Solve the sample five-city problem and write its results.

    Args:
        config: Run settings; read from the environment when omitted.

    Returns:
        The shortest closed route.

    Raises:
        RuntimeError: If the optimum differs from EXPECTED_OPTIMAL_DISTANCE.
    """
    config = load_config() if config is None else config

    cities = toronto_locations()
    names = [c.name for c in cities]
    D = DistanceMatrix(sample_distance_matrix())

    checks = validate_distance_matrix(D)
    print(f"Distance matrix checks: {checks}")

    solver = ExactTSPSolver(D, fix_start=config.fix_start, max_size=config.max_locations)
    candidates = search_space_size(D.size, config.fix_start)
    print(f"\nSolving TSP by exhaustive search ({candidates} candidate tours)...\n")

    recorder = RecordingReporter()
    route = solver.solve(reporter=MultiReporter(ConsoleReporter(names, verbose=config.verbose), recorder))

    if abs(route.total_distance - EXPECTED_OPTIMAL_DISTANCE) > REGRESSION_TOLERANCE:
        raise RuntimeError(
            f"Baseline drift: expected {EXPECTED_OPTIMAL_DISTANCE}, got {route.total_distance}"
        )

    save_results(
        {
            "problem": "TSP-GTA-5",
            "cities": names,
            "start_city_index": route.cities[0],
            "optimal_tour_indices": list(route.cities),
            "optimal_tour_names": route.named(names),
            "optimal_distance": route.total_distance,
            "search_space_size": candidates,
            "fix_start": config.fix_start,
            "distance_matrix_checks": checks,
        },
        outdir=config.outdir,
    )
    frame = recorder.to_frame()
    log_path = save_iterations(frame, outdir=config.outdir)
    print(f"Results saved to {Path(config.outdir)} ({len(frame)} candidates in {log_path.name})")

    if config.plot:
        from .plots import plot_running_best

        figure = plot_running_best(frame, route.total_distance, Path(config.outdir) / "running_best.png")
        print(f"Figure saved to: {figure}")

    return route


def main() -> None:
    """Entry point for `python -m exact_tsp.main`."""
    run()


if __name__ == "__main__":
    main()
