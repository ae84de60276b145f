"""
Geometry on the toroidal plane.

Points and vectors are plain length-2 float64 arrays. The plane has no
edges: every coordinate is taken modulo the world size W, and distances
are measured against the 9 periodic images of a point (the direct one
plus its 8 neighbours across the seams).
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


# Offsets (in units of W) of the 9 periodic images
IMAGE_OFFSETS = np.array(
    [(ox, oy) for ox in (-1.0, 0.0, 1.0) for oy in (-1.0, 0.0, 1.0)],
    dtype=np.float64,
)


def point(x: float, y: float) -> np.ndarray:
    """Make a 2D point/vector."""
    return np.array([x, y], dtype=np.float64)


def unit_from_angle(angle: float) -> np.ndarray:
    """Unit vector at `angle` radians from the x axis."""
    return np.array([np.cos(angle), np.sin(angle)], dtype=np.float64)


def point_angle(v: np.ndarray) -> float:
    """Angle of a vector from the x axis, in (-pi, pi]."""
    return float(np.arctan2(v[1], v[0]))


def rotate(v: np.ndarray, angle: float) -> np.ndarray:
    """Rotate a vector anticlockwise by `angle` radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([c * v[0] - s * v[1], s * v[0] + c * v[1]], dtype=np.float64)


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Unit vector along v.

    The zero vector has no direction; it maps to the zero vector.
    """
    norm = np.hypot(v[0], v[1])
    if norm == 0.0:
        return np.zeros(2, dtype=np.float64)
    return v / norm


def rand_symmetric(rng: np.random.Generator, scale: float) -> float:
    """Uniform draw from [-scale, +scale]."""
    return float(rng.uniform(-scale, scale))


def random_unit_vector(rng: np.random.Generator) -> np.ndarray:
    """Unit vector with uniformly distributed heading."""
    return unit_from_angle(rng.uniform(0.0, 2.0 * np.pi))


def wrap(p: np.ndarray, w: np.ndarray) -> np.ndarray:
    """
    Reduce a point into the fundamental domain [0, Wx) x [0, Wy).

    Returns a new array; the input is left untouched.
    """
    wrapped = np.mod(p, w)
    # mod of a tiny negative number can round up to exactly W
    over = wrapped >= w
    wrapped[over] -= w[over]
    return wrapped


def wrapped_delta(a: np.ndarray, b: np.ndarray, w: np.ndarray) -> np.ndarray:
    """
    Displacement from a to b under the torus metric.

    Picks the shortest of the 9 periodic images of b - a.
    """
    candidates = (b - a) + IMAGE_OFFSETS * w
    dist_sq = np.einsum("ij,ij->i", candidates, candidates)
    return candidates[np.argmin(dist_sq)].copy()


@dataclass(eq=False)
class Circle:
    """A closed disk. Immutable by convention: offsetting returns a new Circle."""

    centre: np.ndarray
    radius: float

    def __post_init__(self):
        self.centre = np.asarray(self.centre, dtype=np.float64).copy()
        self.radius = float(self.radius)

    def offset(self, d: np.ndarray, w: np.ndarray | None = None) -> Circle:
        """Same circle translated by d, with its centre wrapped if w is given."""
        centre = self.centre + d
        if w is not None:
            centre = wrap(centre, w)
        return Circle(centre, self.radius)

    def area(self) -> float:
        return np.pi * self.radius ** 2

    def copy(self) -> Circle:
        return Circle(self.centre, self.radius)

    def __repr__(self) -> str:
        return f"Circle(centre=({self.centre[0]:g}, {self.centre[1]:g}), radius={self.radius:g})"


def circles_intersect(c1: Circle, c2: Circle) -> bool:
    """True iff the closed disks overlap or touch."""
    d = c2.centre - c1.centre
    reach = c1.radius + c2.radius
    return bool(d[0] * d[0] + d[1] * d[1] <= reach * reach)


def wrapped_circles_intersect(c1: Circle, c2: Circle, w: np.ndarray) -> bool:
    """True iff any of the 9 periodic placements of c2 intersects c1."""
    deltas = (c2.centre - c1.centre) + IMAGE_OFFSETS * w
    reach = c1.radius + c2.radius
    dist_sq = np.einsum("ij,ij->i", deltas, deltas)
    return bool(np.any(dist_sq <= reach * reach))


def bounding_squares_intersect(
    a: np.ndarray,
    b: np.ndarray,
    ra: float,
    rb: float,
    w: np.ndarray,
) -> bool:
    """
    Cheap prefilter: do the axis-aligned squares of half-width ra and rb,
    centred on a and b, overlap on the torus?
    """
    d = wrapped_delta(a, b, w)
    reach = ra + rb
    return bool(abs(d[0]) <= reach and abs(d[1]) <= reach)
