"""
Convergence figure for an exhaustive search.

Plots the running best distance against the iteration number, with the
optimum drawn as a reference line.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def plot_running_best(frame: pd.DataFrame, optimal_length: float, output_path: str | Path) -> Path:
    """
    Save a running-best figure built from RecordingReporter.to_frame().

    Args:
        frame: Per-candidate table with "iteration", "distance" and "running_best".
        optimal_length: Distance of the returned route.
        output_path: PNG destination; parent directories are created.

    Returns:
        Path of the written figure.
    """
    if frame.empty:
        raise ValueError("No candidates to plot.")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.scatter(frame["iteration"], frame["distance"], s=12, color='#9E9E9E',
               alpha=0.6, label='Candidate distance', zorder=2)
    ax.step(frame["iteration"], frame["running_best"], where='post', linewidth=2.5,
            color='#1565C0', label='Running best', zorder=3)

    ax.axhline(y=optimal_length, color='#2E7D32', linestyle='--', linewidth=2,
               label=f'Optimal: {optimal_length:g}', zorder=2, alpha=0.8)

    # mark where the optimum was first reached
    first_hit = frame.loc[frame["running_best"] <= optimal_length, "iteration"]
    if not first_hit.empty:
        it = int(first_hit.iloc[0])
        ax.annotate(f'Best: {optimal_length:g}\n(iteration {it})',
                    xy=(it, optimal_length), xytext=(10, 30), textcoords='offset points',
                    arrowprops=dict(arrowstyle='->', color='black', lw=1.5),
                    fontsize=10, fontweight='bold',
                    bbox=dict(boxstyle='round,pad=0.5', facecolor='yellow', alpha=0.7),
                    zorder=5)

    ax.set_xlabel('Iteration', fontsize=12, fontweight='bold')
    ax.set_ylabel('Tour distance', fontsize=12, fontweight='bold')
    ax.set_title(f'Exhaustive search: {len(frame)} candidate tours',
                 fontsize=13, fontweight='bold', pad=10)
    ax.grid(True, alpha=0.3, linestyle='--', zorder=1)
    ax.legend(loc='upper right', fontsize=10, framealpha=0.9)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, facecolor='white')
    plt.close(fig)
    return output_path
