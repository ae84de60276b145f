"""
Command-line entry point.

    python -m moversim --n-ticks 2000 --seed 1 --draw --out-dir img

Runs one simulation from the default starting population, writing PNG
frames and/or TSV snapshots every `--output-every` ticks. Exits with 1 if
two movers collide with exactly equal closing speeds, 0 otherwise.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Sequence
import argparse
import cProfile
import logging

import numpy as np

from moversim.analysis.census import census
from moversim.core.engine import AmbiguousCollisionError, Simulation, TickReport
from moversim.core.world import SimulationConfig, create_default_world
from moversim.io.snapshot import save_snapshot
from moversim.viz.render import save_frame


logger = logging.getLogger("moversim")

# Log a census line every this many ticks
PROGRESS_EVERY = 100


@dataclass
class OutputOptions:
    """Where and how often a command-line run writes its output."""

    out_dir: Path = Path("img")
    output_every: int = 1  # Frames/snapshots every this many ticks
    draw: bool = False  # Write out_NNNNN.png frames
    snapshot: bool = False  # Write snapshot_NNNNN.tsv files

    def validate(self) -> None:
        if self.output_every <= 0:
            raise ValueError(f"output_every must be positive, got {self.output_every}")


def build_parser() -> argparse.ArgumentParser:
    """Parser with one flag per SimulationConfig field, plus output options."""
    parser = argparse.ArgumentParser(
        prog="moversim",
        description="Evolve limbed circles that compete by collision on a torus.",
    )
    defaults = SimulationConfig()
    for f in fields(SimulationConfig):
        default = getattr(defaults, f.name)
        parser.add_argument("--" + f.name.replace("_", "-"), dest=f.name,
                            type=type(default), default=default,
                            help=f"(default: {default})")

    output = parser.add_argument_group("output")
    output.add_argument("--out-dir", type=Path, default=Path("img"),
                        help="directory for frames and snapshots (default: img)")
    output.add_argument("--output-every", type=int, default=1,
                        help="write output every this many ticks (default: 1)")
    output.add_argument("--draw", action="store_true", help="write PNG frames")
    output.add_argument("--snapshot", action="store_true", help="write TSV snapshots")

    parser.add_argument("--seed", type=int, default=None,
                        help="random seed (default: fresh entropy)")
    parser.add_argument("--cpuprofile", type=Path, default=None,
                        help="write cpu profile to file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig(**{f.name: getattr(args, f.name) for f in fields(SimulationConfig)})
    config.validate()
    return config


def output_from_args(args: argparse.Namespace) -> OutputOptions:
    output = OutputOptions(
        out_dir=args.out_dir,
        output_every=args.output_every,
        draw=args.draw,
        snapshot=args.snapshot,
    )
    output.validate()
    return output


def run(config: SimulationConfig, output: OutputOptions, seed: int | None = None) -> dict:
    """
    Run a full simulation with periodic output.

    Raises:
        AmbiguousCollisionError: propagated from the engine
    """
    rng = np.random.default_rng(seed)
    world = create_default_world(config, rng)
    sim = Simulation(world=world, config=config, rng=rng)

    def on_tick(sim: Simulation, report: TickReport) -> None:
        t = report.tick
        if t % output.output_every == 0:
            if output.draw:
                save_frame(sim.world, t, output.out_dir)
            if output.snapshot:
                save_snapshot(sim.world, t, output.out_dir)
        if t % PROGRESS_EVERY == 0:
            c = census(sim.world, tick=t)
            dominant = c.dominant_shape()
            logger.info(
                "tick %d: %d movers, %d eggs, %d shapes (commonest %s), mean speed %.3f",
                t, c.n_movers, c.n_eggs, c.n_shapes,
                "none" if dominant is None else f"{dominant[0]:08x} x{dominant[1]}",
                c.mean_speed,
            )

    logger.info("Running %d ticks in a %gx%g world", config.n_ticks, config.width, config.height)
    return sim.run(config.n_ticks, callback=on_tick)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        output = output_from_args(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    profiler = None
    if args.cpuprofile is not None:
        profiler = cProfile.Profile()
        profiler.enable()

    try:
        stats = run(config, output, seed=args.seed)
    except AmbiguousCollisionError as e:
        logger.critical("%s", e)
        return 1
    finally:
        if profiler is not None:
            profiler.disable()
            profiler.dump_stats(args.cpuprofile)

    logger.info(
        "Done after %d ticks: %d movers, %d eggs (%d killed, %d laid, %d hatched)",
        stats["current_tick"], stats["n_movers"], stats["n_eggs"],
        stats["total_killed"], stats["total_laid"], stats["total_hatched"],
    )
    return 0
