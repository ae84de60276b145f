"""
Visualization utilities.

- Frame rendering of a world (PNG)
- Shape hash and palette used to colour bodies
- Population history plots
"""

from moversim.viz.render import (
    PALETTE,
    shape_hash,
    body_colour,
    draw_world,
    save_frame,
)
from moversim.viz.history import plot_population

__all__ = [
    "PALETTE",
    "shape_hash",
    "body_colour",
    "draw_world",
    "save_frame",
    "plot_population",
]
