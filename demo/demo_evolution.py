#!/usr/bin/env python3
"""
Demo: Shape Evolution by Collision

Runs the default two-mover world and follows the population:
1. Seed the world with two mirrored L-shaped movers and one egg
2. Run, taking a census every few ticks
3. Plot mover/egg counts and kills/hatchings over time
4. Save the final frame and a snapshot

Shows how a population grows from two founders and how shape diversity
changes as slow movers are culled.
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

from moversim.core import Simulation, SimulationConfig, create_default_world
from moversim.analysis import census
from moversim.io import save_snapshot
from moversim.viz import plot_population, save_frame


def main():
    print("=" * 60)
    print("  SHAPE EVOLUTION BY COLLISION")
    print("=" * 60)

    config = SimulationConfig(
        width=600,
        height=600,
        core_radius=15,
        laying_period=20,
        incubation_period=20,
        initial_speed=5.0,
        mutation_angle=0.5,
        rotation_angle=0.1,
    )
    seed = 42
    n_ticks = 1500
    census_every = 10

    print(f"\n1. Setup:")
    print(f"   World: {config.width:g}x{config.height:g}, core radius {config.core_radius:g}")
    print(f"   Laying period: {config.laying_period}, incubation: {config.incubation_period}")
    print(f"   Mutation angle: ±{config.mutation_angle}, rotation angle: ±{config.rotation_angle}")

    rng = np.random.default_rng(seed)
    world = create_default_world(config, rng)
    sim = Simulation(world=world, config=config, rng=rng)

    censuses = [census(world, tick=0)]
    reports = []

    def record(sim, report):
        reports.append(report)
        if (report.tick + 1) % census_every == 0:
            censuses.append(census(sim.world, tick=report.tick + 1))

    print(f"\n2. Running {n_ticks} ticks...")
    stats = sim.run(n_ticks, callback=record)
    print(f"   Movers: {stats['n_movers']}, eggs: {stats['n_eggs']}")
    print(f"   Killed: {stats['total_killed']}, laid: {stats['total_laid']}, "
          f"hatched: {stats['total_hatched']}")

    final = censuses[-1]
    print("\n3. Final population:")
    print(f"   Distinct shapes: {final.n_shapes}")
    dominant = final.dominant_shape()
    if dominant is not None:
        shape, count = dominant
        print(f"   Commonest shape: {shape:08x} ({count} movers)")
    print(f"   Mean speed:      {final.mean_speed:.3f}")
    for k, (mean, std) in enumerate(zip(final.limb_angle_mean, final.limb_angle_std)):
        print(f"   Limb {k} angle:    {mean:+.3f} ± {std:.3f} rad")

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    print("\n4. Saving outputs...")
    fig, _ = plot_population(censuses, reports, title="Population over time")
    output_path = output_dir / "population.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"   Saved to: {output_path}")
    print(f"   Saved to: {save_frame(sim.world, sim.current_tick, output_dir)}")
    print(f"   Saved to: {save_snapshot(sim.world, sim.current_tick, output_dir)}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)

    return stats


if __name__ == "__main__":
    main()
