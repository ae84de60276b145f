"""
Simulation engine: one discrete tick at a time.

Each tick runs these phases in order, each over the whole population
before the next begins:

1. Kinematics: move, then randomly turn, every mover
2. Collisions: for every pair of touching movers, the one closing
   in more slowly along the line between them is marked
3. Removal of marked movers
4. Acceleration of survivors
5. Laying: movers whose countdown ran out lay a mutated egg
6. Hatching: ripe eggs with a clear site become movers
7. Removal of hatched eggs

Collision marks are computed against the positions and velocities at the
start of phase 2; nothing is removed until every pair has been seen.
Removal is by index, so survivors keep their relative order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, TYPE_CHECKING
import logging

import numpy as np

from moversim.core.geometry import normalize, wrapped_delta
from moversim.core.organisms import Egg, Mover

if TYPE_CHECKING:
    from moversim.core.world import SimulationConfig, World


logger = logging.getLogger(__name__)


class AmbiguousCollisionError(RuntimeError):
    """
    Two touching movers close in on each other at exactly the same speed.

    The collision rule cannot pick a loser, so the run cannot continue.
    """

    def __init__(self, i: int, j: int, i_par: float, j_par: float):
        self.i = i
        self.j = j
        self.i_par = i_par
        self.j_par = j_par
        super().__init__(
            f"Movers {i} and {j} collide with equal parallel speeds: {i_par!r} and {j_par!r}"
        )


@dataclass
class TickReport:
    """What happened during one tick."""

    tick: int
    killed: int = 0
    laid: int = 0
    hatched: int = 0


def find_collision_losers(movers: list[Mover], w: np.ndarray) -> set[int]:
    """
    Indices of movers that lose a collision.

    For each pair (i, j), i < j, of touching movers, with u the unit vector
    from i's core to j's core:
        i_par = v_i . u     (how fast i closes on j)
        j_par = -v_j . u    (how fast j closes on i)
    The slower one loses. The (j, i) view is the same pair with u flipped,
    so u is measured once per pair. Measuring it twice would let the views
    disagree at exactly half the world size, where two periodic images are
    equally near.

    Raises:
        AmbiguousCollisionError: if i_par == j_par exactly
    """
    losers: set[int] = set()
    n = len(movers)
    for i in range(n):
        for j in range(i + 1, n):
            mi, mj = movers[i], movers[j]
            if not mi.body.intersects(mj.body, w):
                continue
            unit_sep = normalize(wrapped_delta(mi.position, mj.position, w))
            i_par = float(np.dot(mi.velocity, unit_sep))
            j_par = -float(np.dot(mj.velocity, unit_sep))
            if i_par == j_par:
                raise AmbiguousCollisionError(i, j, i_par, j_par)
            losers.add(j if i_par > j_par else i)
    return losers


@dataclass
class Simulation:
    """
    Evolves a World tick by tick.

    All randomness (turning, mutation, newborn velocities) comes from `rng`,
    so a fixed seed replays a run exactly.
    """

    world: "World"
    config: "SimulationConfig"
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    current_tick: int = field(default=0, init=False)
    total_killed: int = field(default=0, init=False)
    total_laid: int = field(default=0, init=False)
    total_hatched: int = field(default=0, init=False)

    def run(
        self,
        n_ticks: int,
        callback: Callable[["Simulation", TickReport], None] | None = None,
    ) -> dict:
        """
        Run for n_ticks.

        Args:
            n_ticks: Number of ticks
            callback: Called as callback(simulation, report) after every tick

        Raises:
            AmbiguousCollisionError: aborts the run mid-tick
        """
        for _ in range(n_ticks):
            report = self.step()
            if callback is not None:
                callback(self, report)

        return {
            "n_ticks": n_ticks,
            "current_tick": self.current_tick,
            "total_killed": self.total_killed,
            "total_laid": self.total_laid,
            "total_hatched": self.total_hatched,
            "n_movers": self.world.n_movers,
            "n_eggs": self.world.n_eggs,
        }

    def step(self) -> TickReport:
        """Advance the world by one tick."""
        report = TickReport(tick=self.current_tick)
        world = self.world
        cfg = self.config
        w = world.size

        # 1. Kinematics
        for mover in world.movers:
            mover.move(w)
            mover.rotate(cfg.rotation_angle, self.rng)

        # 2-3. Collisions, then removal
        losers = find_collision_losers(world.movers, w)
        if losers:
            world.movers = [m for i, m in enumerate(world.movers) if i not in losers]
        report.killed = len(losers)

        # 4. Acceleration
        for mover in world.movers:
            mover.accelerate(cfg.acceleration)

        # 5. Laying
        report.laid = self._lay()

        # 6-7. Hatching, then removal
        report.hatched = self._hatch()

        self.current_tick += 1
        self.total_killed += report.killed
        self.total_laid += report.laid
        self.total_hatched += report.hatched

        if report.killed or report.hatched:
            logger.debug(
                "tick %d: %d killed, %d laid, %d hatched (%d movers, %d eggs)",
                report.tick, report.killed, report.laid, report.hatched,
                world.n_movers, world.n_eggs,
            )
        return report

    def _lay(self) -> int:
        """Movers whose countdown ran out lay a mutated egg and start over."""
        cfg = self.config
        w = self.world.size
        laid = 0
        for mover in self.world.movers:
            if mover.time_to_lay > 0:
                mover.time_to_lay -= 1
                continue
            self.world.eggs.append(
                Egg(
                    body=mover.body.mutate(cfg.mutation_angle, w, self.rng),
                    time_to_hatch=cfg.incubation_period,
                )
            )
            mover.time_to_lay = cfg.laying_period
            laid += 1
        return laid

    def _hatch(self) -> int:
        """
        Ripe eggs hatch if no mover touches them.

        A blocked egg is left as is and tries again next tick. Movers that
        hatched earlier in this phase count as blockers.
        """
        cfg = self.config
        w = self.world.size
        hatched: set[int] = set()
        for k, egg in enumerate(self.world.eggs):
            if egg.time_to_hatch > 0:
                egg.time_to_hatch -= 1
                continue
            if any(egg.body.intersects(m.body, w) for m in self.world.movers):
                continue
            self.world.movers.append(
                Mover.spawn(egg.body, cfg.initial_speed, cfg.laying_period, self.rng)
            )
            hatched.add(k)

        if hatched:
            self.world.eggs = [e for k, e in enumerate(self.world.eggs) if k not in hatched]
        return len(hatched)
