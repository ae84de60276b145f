"""
Core engine primitives.

This layer knows NOTHING about drawing, files or the command line.
It only knows:
- Points, circles and distances on a torus
- Bodies built from a core circle and tangent limbs
- Movers and eggs
- The tick rule that moves, culls, breeds and hatches them

Everything random draws from one injected numpy Generator.
"""

from moversim.core.geometry import (
    Circle,
    circles_intersect,
    wrapped_circles_intersect,
    bounding_squares_intersect,
    wrap,
    wrapped_delta,
)
from moversim.core.body import Body
from moversim.core.organisms import Mover, Egg
from moversim.core.world import World, SimulationConfig, create_default_world
from moversim.core.engine import (
    Simulation,
    TickReport,
    AmbiguousCollisionError,
    find_collision_losers,
)

__all__ = [
    "Circle",
    "circles_intersect",
    "wrapped_circles_intersect",
    "bounding_squares_intersect",
    "wrap",
    "wrapped_delta",
    "Body",
    "Mover",
    "Egg",
    "World",
    "SimulationConfig",
    "create_default_world",
    "Simulation",
    "TickReport",
    "AmbiguousCollisionError",
    "find_collision_losers",
]
