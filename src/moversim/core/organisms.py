"""
Organisms: the mutable records the engine evolves.

- Mover: a living body with a velocity and a countdown to laying
- Egg: a dormant body with a countdown to hatching

Both hold a Body by composition; neither is a kind of Body.
"""

from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from moversim.core.body import Body
from moversim.core.geometry import normalize, rand_symmetric, random_unit_vector, rotate


def random_velocity(rng: np.random.Generator, max_speed: float) -> np.ndarray:
    """Uniform heading, speed uniform in [0, max_speed)."""
    return random_unit_vector(rng) * (rng.random() * max_speed)


@dataclass(eq=False)
class Mover:
    """A living organism."""

    body: Body
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))
    time_to_lay: int = 0

    def __post_init__(self):
        self.velocity = np.asarray(self.velocity, dtype=np.float64).copy()

    @classmethod
    def spawn(
        cls,
        body: Body,
        initial_speed: float,
        laying_period: int,
        rng: np.random.Generator,
    ) -> Mover:
        """New mover with a freshly drawn random velocity."""
        return cls(
            body=body,
            velocity=random_velocity(rng, initial_speed),
            time_to_lay=laying_period,
        )

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    @property
    def position(self) -> np.ndarray:
        """Core centre."""
        return self.body.core.centre

    def move(self, w: np.ndarray) -> None:
        """Translate the whole body by one velocity step, wrapping each circle."""
        self.body.translate(self.velocity, w)

    def rotate(self, angle_scale: float, rng: np.random.Generator) -> None:
        """Turn the heading by a random angle in [-angle_scale, angle_scale]."""
        self.velocity = rotate(self.velocity, rand_symmetric(rng, angle_scale))

    def momentum(self) -> float:
        """Speed times body area. A scalar, not a physical momentum."""
        return self.speed * self.body.area()

    def accelerate(self, a: float) -> None:
        """
        Add `a` to the speed along the current heading.

        A stationary mover has no heading and is left at rest.
        """
        self.velocity = self.velocity + normalize(self.velocity) * a


@dataclass(eq=False)
class Egg:
    """A dormant offspring waiting to hatch."""

    body: Body
    time_to_hatch: int = 0

    @property
    def position(self) -> np.ndarray:
        return self.body.core.centre
