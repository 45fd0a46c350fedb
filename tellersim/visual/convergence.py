"""Convergence plot: simulated average wait against run length."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def plot_convergence(frame: pd.DataFrame, output_path: str | Path) -> Path:
    """Plot average wait time vs simulated hours, one line per server count.

    The steady-state wait of each server count is drawn as a dashed
    horizontal line when it is finite.

    Args:
        frame: Table produced by tellersim.experiments.sweep().
        output_path: Image file to write. Parent directories are created.

    Returns:
        The path written.
    """
    import matplotlib.pyplot as plt

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 6))
    for server_count, group in frame.groupby("total_servers"):
        group = group.sort_values("total_time")
        line, = ax.plot(
            group["total_time"],
            group["average_wait_time"],
            marker="o",
            linewidth=1.5,
            label=f"{server_count} server(s), simulated",
        )
        theory = float(group["theoretical_wait_time"].iloc[0])
        if math.isfinite(theory):
            ax.axhline(
                y=theory,
                color=line.get_color(),
                linestyle="--",
                alpha=0.7,
                label=f"{server_count} server(s), steady state ({theory:.2f} min)",
            )

    ax.set_xscale("log")
    ax.set_xlabel("Simulated time (hours)")
    ax.set_ylabel("Average wait (minutes)")
    ax.set_title("Average Wait vs Simulation Length")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    logger.info("Saved convergence plot: %s", output_path)
    return output_path
