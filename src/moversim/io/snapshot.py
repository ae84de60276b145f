"""
Tab-separated snapshots of a world.

One header row, then one row per mover (kind "m") and per egg (kind "e"):

    kind  nr_limbs  core_x  core_y  core_R  limb_0_x  limb_0_y  limb_0_R  ...

Circles are listed core first, then limbs in construction order. Limb
columns in the header cover the body with the most limbs; rows for bodies
with fewer limbs are simply shorter.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, TextIO
import csv

import numpy as np

if TYPE_CHECKING:
    from moversim.core.body import Body
    from moversim.core.world import World


CIRCLE_ATTRS = ("x", "y", "R")


def format_float(value: float) -> str:
    """Shortest round-trip decimal, never in exponent form."""
    return np.format_float_positional(float(value), trim="-")


def header_columns(n_limbs: int) -> list[str]:
    """Header for bodies with up to n_limbs limbs."""
    cols = ["kind", "nr_limbs"]
    cols += [f"core_{attr}" for attr in CIRCLE_ATTRS]
    for i in range(n_limbs):
        cols += [f"limb_{i}_{attr}" for attr in CIRCLE_ATTRS]
    return cols


def body_columns(body: "Body", kind: str) -> list[str]:
    """One row: kind, limb count, then x, y, R of the core and each limb."""
    cols = [kind, str(body.n_limbs)]
    for c in body.circles():
        cols += [format_float(c.centre[0]), format_float(c.centre[1]), format_float(c.radius)]
    return cols


def write_snapshot(world: "World", stream: TextIO) -> None:
    """Write a snapshot of `world` to an open text stream."""
    writer = csv.writer(stream, delimiter="\t", lineterminator="\n")
    max_limbs = max((body.n_limbs for body, _ in world.bodies()), default=0)
    writer.writerow(header_columns(max_limbs))

    for mover in world.movers:
        writer.writerow(body_columns(mover.body, "m"))
    for egg in world.eggs:
        writer.writerow(body_columns(egg.body, "e"))


def save_snapshot(world: "World", tick: int, out_dir: str | Path) -> Path:
    """Write `snapshot_<tick>.tsv` into out_dir and return its path."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"snapshot_{tick:05d}.tsv"
    with path.open("w", newline="") as f:
        write_snapshot(world, f)
    return path
