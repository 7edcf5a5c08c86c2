from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUE_VALUES = {"1", "true", "yes", "on"}


def _flag(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class RunConfig:
    """
    Settings for the demo run, overridable through the environment.

    Attributes:
        outdir: Directory for results.json, results.csv and iterations.csv (TSP_OUTDIR).
        verbose: Print every candidate, not just the summary (TSP_VERBOSE).
        fix_start: Only enumerate tours starting at location 0 (TSP_FIX_START).
        max_locations: Largest problem the run accepts (TSP_MAX_LOCATIONS).
        plot: Also save the running-best figure (TSP_PLOT).
    """
    outdir: str = "results"
    verbose: bool = True
    fix_start: bool = False
    max_locations: int = 10
    plot: bool = False


def load_config(env: Optional[Mapping[str, str]] = None) -> RunConfig:
    """
    Build a RunConfig from environment variables.

    Args:
        env: Mapping to read instead of os.environ.

    Raises:
        ValueError: If TSP_MAX_LOCATIONS is not a positive integer.
    """
    env = os.environ if env is None else env
    defaults = RunConfig()

    raw_max = env.get("TSP_MAX_LOCATIONS", str(defaults.max_locations))
    try:
        max_locations = int(raw_max)
    except ValueError:
        raise ValueError(f"TSP_MAX_LOCATIONS must be an integer, got {raw_max!r}") from None
    if max_locations < 1:
        raise ValueError(f"TSP_MAX_LOCATIONS must be positive, got {max_locations}")

    return RunConfig(
        outdir=env.get("TSP_OUTDIR", defaults.outdir),
        verbose=_flag(env.get("TSP_VERBOSE", str(defaults.verbose))),
        fix_start=_flag(env.get("TSP_FIX_START", str(defaults.fix_start))),
        max_locations=max_locations,
        plot=_flag(env.get("TSP_PLOT", str(defaults.plot))),
    )
