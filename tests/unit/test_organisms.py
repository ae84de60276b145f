"""Unit tests for Mover and Egg."""

import numpy as np
import pytest

from moversim.core.body import Body
from moversim.core.geometry import point
from moversim.core.organisms import Egg, Mover, random_velocity


def make_mover(x, y, vx, vy, angles=(0.0, np.pi / 2), radius=2.0, time_to_lay=0):
    return Mover(
        body=Body.from_angles((x, y), radius, list(angles)),
        velocity=point(vx, vy),
        time_to_lay=time_to_lay,
    )


class TestMove:
    """Tests for Mover.move."""

    def test_translates_whole_body(self, world_size):
        m = make_mover(50, 50, 3, -2)
        m.move(world_size)
        assert np.allclose(m.body.core.centre, [53.0, 48.0])
        assert np.allclose(m.body.limbs[0].centre, [57.0, 48.0])
        assert np.allclose(m.body.limbs[1].centre, [53.0, 52.0])

    def test_wraps(self, world_size):
        m = make_mover(98, 50, 5, 0)
        m.move(world_size)
        assert np.allclose(m.body.core.centre, [3.0, 50.0])

    def test_full_width_returns_home(self, world_size):
        m = make_mover(10, 20, 100, 0)
        m.move(world_size)
        assert np.array_equal(m.body.core.centre, [10.0, 20.0])

    def test_full_height_returns_home(self, world_size):
        m = make_mover(37.5, 62.25, 0, 100)
        m.move(world_size)
        assert np.array_equal(m.body.core.centre, [37.5, 62.25])


class TestRotate:
    """Tests for Mover.rotate."""

    def test_preserves_speed(self, rng):
        m = make_mover(50, 50, 3, 4)
        for _ in range(20):
            m.rotate(0.5, rng)
        assert np.isclose(m.speed, 5.0)

    def test_heading_change_bounded(self, rng):
        m = make_mover(50, 50, 1, 0)
        m.rotate(0.2, rng)
        assert abs(np.arctan2(m.velocity[1], m.velocity[0])) <= 0.2 + 1e-12

    def test_zero_scale_no_change(self, rng):
        m = make_mover(50, 50, 3, 4)
        m.rotate(0.0, rng)
        assert np.allclose(m.velocity, [3.0, 4.0])


class TestMomentum:
    """Tests for the collision scalar."""

    def test_speed_times_area(self):
        m = make_mover(50, 50, 3, 4, angles=(0.0, 1.0, 2.0), radius=2.0)
        assert np.isclose(m.momentum(), 5.0 * 3 * np.pi * 4)

    def test_stationary_has_none(self):
        assert make_mover(50, 50, 0, 0).momentum() == 0.0


class TestAccelerate:
    """Tests for Mover.accelerate."""

    def test_along_heading(self):
        m = make_mover(50, 50, 3, 4)
        m.accelerate(5.0)
        assert np.allclose(m.velocity, [6.0, 8.0])

    def test_zero_acceleration(self):
        m = make_mover(50, 50, 3, 4)
        m.accelerate(0.0)
        assert np.allclose(m.velocity, [3.0, 4.0])

    def test_stationary_stays_put(self):
        m = make_mover(50, 50, 0, 0)
        m.accelerate(2.0)
        assert np.array_equal(m.velocity, [0.0, 0.0])
        assert np.all(np.isfinite(m.velocity))


class TestSpawn:
    """Tests for newborn movers."""

    def test_spawn(self, rng):
        body = Body.from_angles((50, 50), 2, [0.0])
        m = Mover.spawn(body, initial_speed=4.0, laying_period=7, rng=rng)
        assert m.body is body
        assert m.time_to_lay == 7
        assert 0.0 <= m.speed < 4.0

    def test_random_velocity_range(self, rng):
        speeds = [np.linalg.norm(random_velocity(rng, 2.0)) for _ in range(200)]
        assert min(speeds) >= 0.0
        assert max(speeds) < 2.0

    def test_random_velocity_reproducible(self):
        a = random_velocity(np.random.default_rng(7), 3.0)
        b = random_velocity(np.random.default_rng(7), 3.0)
        assert np.array_equal(a, b)

    def test_velocity_is_copied(self):
        v = point(1, 2)
        m = Mover(body=Body.from_angles((0, 0), 1, []), velocity=v)
        v[0] = 99
        assert m.velocity[0] == 1.0


class TestEgg:
    """Tests for Egg."""

    def test_creation(self):
        body = Body.from_angles((10, 20), 2, [0.0])
        egg = Egg(body=body, time_to_hatch=5)
        assert egg.time_to_hatch == 5
        assert np.array_equal(egg.position, [10.0, 20.0])
