"""
Population census: summary statistics of a world.

IMPORTANT: This is NOT seen by the engine. It only reads world state.

Limb angles are circular quantities, so their spread is measured with
circular statistics rather than a plain mean and standard deviation.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy import stats

from moversim.viz.render import shape_hash

if TYPE_CHECKING:
    from moversim.core.world import World


@dataclass
class CensusResult:
    """Snapshot statistics of the population."""

    tick: int
    n_movers: int
    n_eggs: int
    mean_speed: float
    mean_momentum: float

    # Movers per shape hash
    shape_counts: Counter = field(default_factory=Counter)

    # Circular mean / std of the angle of limb k, over movers that have limb k
    limb_angle_mean: list[float] = field(default_factory=list)
    limb_angle_std: list[float] = field(default_factory=list)

    @property
    def n_shapes(self) -> int:
        """Number of distinct coarse shapes among movers."""
        return len(self.shape_counts)

    def dominant_shape(self) -> tuple[int, int] | None:
        """(hash, count) of the commonest mover shape, or None if no movers."""
        if not self.shape_counts:
            return None
        return self.shape_counts.most_common(1)[0]


def limb_angle_table(world: "World") -> list[np.ndarray]:
    """Angles of limb k across all movers that have it, for each k."""
    w = world.size
    per_limb: list[list[float]] = []
    for mover in world.movers:
        for k, ang in enumerate(mover.body.limb_angles(w)):
            if k == len(per_limb):
                per_limb.append([])
            per_limb[k].append(ang)
    return [np.array(angles) for angles in per_limb]


def census(world: "World", tick: int = 0) -> CensusResult:
    """
    Take a census of the world.

    Args:
        world: World to summarise
        tick: Tick label stored on the result

    Returns:
        CensusResult; means are 0.0 for an empty population
    """
    w = world.size
    movers = world.movers

    if movers:
        mean_speed = float(np.mean([m.speed for m in movers]))
        mean_momentum = float(np.mean([m.momentum() for m in movers]))
    else:
        mean_speed = 0.0
        mean_momentum = 0.0

    shape_counts = Counter(shape_hash(m.body, w) for m in movers)

    angle_means = []
    angle_stds = []
    for angles in limb_angle_table(world):
        angle_means.append(float(stats.circmean(angles, high=np.pi, low=-np.pi)))
        angle_stds.append(float(stats.circstd(angles, high=np.pi, low=-np.pi)))

    return CensusResult(
        tick=tick,
        n_movers=len(movers),
        n_eggs=len(world.eggs),
        mean_speed=mean_speed,
        mean_momentum=mean_momentum,
        shape_counts=shape_counts,
        limb_angle_mean=angle_means,
        limb_angle_std=angle_stds,
    )
