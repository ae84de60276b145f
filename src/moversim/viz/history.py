"""
Population history plots.

Shows how the mover and egg counts evolve over a run, with kills and
hatchings per tick underneath.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from moversim.analysis.census import CensusResult
    from moversim.core.engine import TickReport


def plot_population(
    censuses: Sequence["CensusResult"],
    reports: Sequence["TickReport"] | None = None,
    title: str = "Population",
    figsize: tuple[float, float] = (10, 6),
) -> tuple[Figure, list[Axes]]:
    """
    Plot population counts over time.

    Args:
        censuses: One census per recorded tick, in tick order
        reports: Optional per-tick reports; adds a killed/hatched panel
        title: Figure title
        figsize: Figure size

    Returns:
        (fig, axes) tuple
    """
    n_rows = 2 if reports else 1
    fig, axes = plt.subplots(n_rows, 1, figsize=figsize, sharex=True, squeeze=False)
    axes = list(axes[:, 0])

    ticks = np.array([c.tick for c in censuses])
    ax = axes[0]
    ax.plot(ticks, [c.n_movers for c in censuses], label="movers", linewidth=2)
    ax.plot(ticks, [c.n_eggs for c in censuses], label="eggs", linewidth=2, linestyle="--")
    ax.set_ylabel("count")
    ax.set_title(title)
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    if reports:
        ax = axes[1]
        report_ticks = np.array([r.tick for r in reports])
        ax.plot(report_ticks, [r.killed for r in reports], label="killed", color="tab:red")
        ax.plot(report_ticks, [r.hatched for r in reports], label="hatched", color="tab:green")
        ax.set_ylabel("per tick")
        ax.legend(loc="upper left")
        ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel("tick")
    fig.tight_layout()
    return fig, axes
