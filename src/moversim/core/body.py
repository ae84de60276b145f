"""
Body: the shape of an organism.

A body is one core circle plus an ordered list of limb circles. Each limb
has the core's radius and sits tangent to the core, i.e. its centre is at
distance 2r from the core centre. The shape is therefore fully described
by r and the limb angles around the core.

Limbs are stored as circles (not angles) so that motion and wrapping treat
every circle of the body the same way; angles are recovered on demand.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np

from moversim.core.geometry import (
    Circle,
    bounding_squares_intersect,
    point_angle,
    rand_symmetric,
    rotate,
    unit_from_angle,
    wrapped_circles_intersect,
    wrapped_delta,
)


def limb_circle(core: Circle, angle: float) -> Circle:
    """The limb tangent to `core` at `angle`."""
    return core.offset(unit_from_angle(angle) * (2.0 * core.radius))


class Body:
    """Core circle plus a fixed number of tangent limb circles."""

    def __init__(self, core: Circle, limbs: Sequence[Circle] = ()):
        self.core = core
        self.limbs = list(limbs)

    @classmethod
    def from_angles(
        cls,
        centre: Sequence[float] | np.ndarray,
        radius: float,
        angles: Sequence[float],
    ) -> Body:
        """
        Build a body from its core and limb angles.

        Args:
            centre: Core centre (x, y)
            radius: Core radius, shared by every limb
            angles: Limb angles in radians, in limb order
        """
        core = Circle(np.asarray(centre, dtype=np.float64), radius)
        return cls(core, [limb_circle(core, ang) for ang in angles])

    @property
    def n_limbs(self) -> int:
        return len(self.limbs)

    @property
    def radius(self) -> float:
        return self.core.radius

    def copy(self) -> Body:
        """Deep copy; the new body shares no arrays with this one."""
        return Body(self.core.copy(), [c.copy() for c in self.limbs])

    def circles(self) -> list[Circle]:
        """Core followed by limbs, for uniform iteration."""
        return [self.core, *self.limbs]

    def limb_angles(self, w: np.ndarray) -> list[float]:
        """Angle of each limb around the core, measured across the seams."""
        return [
            point_angle(wrapped_delta(self.core.centre, limb.centre, w))
            for limb in self.limbs
        ]

    def area(self) -> float:
        """
        Number of limbs times the area of one circle.

        Used as the organism's "mass"; the core itself is not counted.
        """
        return self.n_limbs * self.core.area()

    def mutate(self, angle_scale: float, w: np.ndarray, rng: np.random.Generator) -> Body:
        """
        Return a mutated copy.

        The core is unchanged. Each limb is swung around the core by an
        independent angle drawn uniformly from [-angle_scale, angle_scale],
        keeping its distance to the core, and then wrapped back into the world.
        """
        limbs = []
        for limb in self.limbs:
            offset = wrapped_delta(self.core.centre, limb.centre, w)
            swung = rotate(offset, rand_symmetric(rng, angle_scale))
            limbs.append(self.core.offset(swung, w))
        return Body(self.core.copy(), limbs)

    def intersects(self, other: Body, w: np.ndarray) -> bool:
        """
        Does this body touch `other` on the torus?

        Limb/limb, limb/core and core/limb pairs are tested; core/core alone
        does not count. A body without limbs therefore never intersects.
        """
        # Limb radius always equals core radius, so this is core.r + limb.r
        bound = 2.0 * self.core.radius
        bound_other = 2.0 * other.core.radius
        if not bounding_squares_intersect(
            self.core.centre, other.core.centre, bound, bound_other, w
        ):
            return False

        for c in self.limbs:
            for c_other in other.limbs:
                if wrapped_circles_intersect(c, c_other, w):
                    return True
        for c in self.limbs:
            if wrapped_circles_intersect(c, other.core, w):
                return True
        for c_other in other.limbs:
            if wrapped_circles_intersect(c_other, self.core, w):
                return True
        return False

    def translate(self, d: np.ndarray, w: np.ndarray) -> None:
        """Move every circle rigidly by d, wrapping each centre."""
        self.core = self.core.offset(d, w)
        self.limbs = [c.offset(d, w) for c in self.limbs]

    def __repr__(self) -> str:
        return f"Body(core={self.core!r}, n_limbs={self.n_limbs})"
