"""
Frame rendering of a world.

Each body is drawn with all 9 periodic images of each of its circles, so
bodies straddling a seam show up on both sides. Movers are filled, eggs
are outlined. A body's colour comes from a coarse hash of its limb angles,
so related shapes keep the same colour from frame to frame.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING
import zlib

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch

from moversim.core.geometry import IMAGE_OFFSETS

if TYPE_CHECKING:
    from moversim.core.body import Body
    from moversim.core.world import World


# Qualitative palette (ColorBrewer Set3), 0-255 RGB
PALETTE = [
    (141, 211, 199),
    (255, 255, 179),
    (190, 186, 218),
    (251, 128, 114),
    (128, 177, 211),
    (253, 180, 98),
    (179, 222, 105),
    (252, 205, 229),
    (217, 217, 217),
    (188, 128, 189),
    (204, 235, 197),
    (255, 237, 111),
]

# Only the first N_COLOURS palette entries are used
N_COLOURS = 10

# Quantisation buckets per full turn of limb angle
ANGLE_BUCKETS = 10


def quantize_angles(angles: list[float]) -> np.ndarray:
    """Map angles in [-pi, pi] to integers 0..ANGLE_BUCKETS."""
    fractions = np.asarray(angles, dtype=np.float64) / (2 * np.pi) + 0.5
    # Fractions are non-negative, so floor(x + 0.5) rounds half away from zero
    return np.floor(ANGLE_BUCKETS * fractions + 0.5).astype("<i8")


def shape_hash(body: "Body", w: np.ndarray) -> int:
    """
    CRC-32 of the body's quantised limb angles.

    The angles are bucketed, packed as little-endian int64 and checksummed,
    so the hash depends on nothing but the (coarse) shape.
    """
    buckets = quantize_angles(body.limb_angles(w))
    return zlib.crc32(buckets.tobytes())


def body_colour(body: "Body", w: np.ndarray) -> tuple[float, float, float]:
    """Palette colour for a body, as matplotlib RGB floats."""
    r, g, b = PALETTE[shape_hash(body, w) % N_COLOURS]
    return r / 255.0, g / 255.0, b / 255.0


def wrapped_patches(body: "Body", w: np.ndarray) -> list[CirclePatch]:
    """One patch per periodic image of every circle of the body."""
    patches = []
    for c in body.circles():
        for offset in IMAGE_OFFSETS * w:
            patches.append(CirclePatch(tuple(c.centre + offset), c.radius))
    return patches


def draw_world(
    world: "World",
    ax: Axes | None = None,
    background: str = "black",
    figsize: tuple[float, float] | None = None,
    dpi: int = 100,
) -> tuple[Figure, Axes]:
    """
    Draw every mover and egg.

    Args:
        world: World to draw
        ax: Existing axes (creates new figure if None)
        background: Axes face colour
        figsize: Figure size if creating a new figure (defaults to one pixel
                 per world unit at `dpi`)
        dpi: Resolution used for the default figure size

    Returns:
        (fig, ax) tuple
    """
    w = world.size
    if ax is None:
        if figsize is None:
            figsize = (w[0] / dpi, w[1] / dpi)
        fig, ax = plt.subplots(figsize=figsize, dpi=dpi)
    else:
        fig = ax.figure

    ax.set_facecolor(background)

    for body, is_mover in world.bodies():
        colour = body_colour(body, w)
        if is_mover:
            collection = PatchCollection(
                wrapped_patches(body, w), facecolor=colour, edgecolor="none"
            )
        else:
            collection = PatchCollection(
                wrapped_patches(body, w), facecolor="none", edgecolor=colour, linewidth=1.0
            )
        ax.add_collection(collection)

    ax.set_xlim(0, w[0])
    ax.set_ylim(0, w[1])
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    return fig, ax


def save_frame(world: "World", tick: int, out_dir: str | Path, dpi: int = 100) -> Path:
    """Render `world` to `out_<tick>.png` in out_dir and return its path."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"out_{tick:05d}.png"

    fig, ax = draw_world(world, dpi=dpi)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    fig.savefig(path, dpi=dpi, facecolor=ax.get_facecolor())
    plt.close(fig)
    return path
