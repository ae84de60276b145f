"""
World: the toroidal plane and everything living on it.

The world stores ONLY state:
- Its size W = (Wx, Wy)
- The movers, in a stable order
- The eggs, in a stable order

The rules that evolve that state live in the engine.
"""

from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from moversim.core.body import Body
from moversim.core.organisms import Egg, Mover


@dataclass
class SimulationConfig:
    """Run constants. Fixed for the lifetime of a run."""

    width: float = 600.0  # World size along x
    height: float = 600.0  # World size along y
    core_radius: float = 25.0  # Radius of every circle of a body
    n_ticks: int = 10000  # Ticks to run
    laying_period: int = 20  # Ticks between eggs
    incubation_period: int = 20  # Ticks from laying to first hatch attempt
    initial_speed: float = 10.0  # Newborn speed is uniform in [0, initial_speed)
    acceleration: float = 0.0  # Speed gained per tick
    mutation_angle: float = 0.5  # Max limb swing per generation (radians)
    rotation_angle: float = 0.1  # Max heading change per tick (radians)

    @property
    def size(self) -> np.ndarray:
        """World size W as a vector."""
        return np.array([self.width, self.height], dtype=np.float64)

    def validate(self) -> None:
        """Raise ValueError if the constants cannot describe a run."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"World size must be positive, got {self.width}x{self.height}")
        if self.core_radius <= 0:
            raise ValueError(f"core_radius must be positive, got {self.core_radius}")
        for name in ("n_ticks", "laying_period", "incubation_period"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        for name in ("initial_speed", "mutation_angle", "rotation_angle"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")


@dataclass(eq=False)
class World:
    """Toroidal plane holding the movers and eggs."""

    size: np.ndarray
    movers: list[Mover] = field(default_factory=list)
    eggs: list[Egg] = field(default_factory=list)

    def __post_init__(self):
        self.size = np.asarray(self.size, dtype=np.float64).copy()
        if self.size.shape != (2,) or np.any(self.size <= 0):
            raise ValueError(f"World size must be two positive numbers, got {self.size}")

    @property
    def n_movers(self) -> int:
        return len(self.movers)

    @property
    def n_eggs(self) -> int:
        return len(self.eggs)

    def bodies(self) -> list[tuple[Body, bool]]:
        """
        Every body for drawing, as (body, is_mover).

        Movers first, then eggs, each in collection order.
        """
        return [(m.body, True) for m in self.movers] + [(e.body, False) for e in self.eggs]


def create_default_world(
    config: SimulationConfig,
    rng: np.random.Generator,
) -> World:
    """
    The standard starting population.

    Two L-shaped movers in opposite quarters of the world with mirrored limbs,
    plus one egg sharing the first mover's shape and site (it waits for the
    mover to leave before it can hatch).
    """
    w = config.size
    r = config.core_radius
    near = w / 6.0
    far = 2.0 * w / 3.0

    movers = [
        Mover.spawn(
            Body.from_angles(near, r, [0.0, np.pi / 2]),
            config.initial_speed,
            config.laying_period,
            rng,
        ),
        Mover.spawn(
            Body.from_angles(far, r, [0.0, -np.pi / 2]),
            config.initial_speed,
            config.laying_period,
            rng,
        ),
    ]
    eggs = [
        Egg(
            body=Body.from_angles(near, r, [0.0, np.pi / 2]),
            time_to_hatch=config.incubation_period,
        ),
    ]
    return World(size=w, movers=movers, eggs=eggs)
