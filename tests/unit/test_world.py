"""Unit tests for World and SimulationConfig."""

import numpy as np
import pytest

from moversim.core.body import Body
from moversim.core.organisms import Egg, Mover
from moversim.core.world import SimulationConfig, World, create_default_world


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_default_config(self):
        cfg = SimulationConfig()
        assert cfg.width == 600
        assert cfg.height == 600
        assert cfg.core_radius == 25
        assert cfg.n_ticks == 10000
        assert cfg.laying_period == 20
        assert cfg.incubation_period == 20
        assert cfg.initial_speed == 10.0
        assert cfg.acceleration == 0.0
        assert cfg.mutation_angle == 0.5
        assert cfg.rotation_angle == 0.1

    def test_size(self):
        cfg = SimulationConfig(width=300, height=200)
        assert np.array_equal(cfg.size, [300.0, 200.0])

    def test_validate_accepts_defaults(self):
        SimulationConfig().validate()

    @pytest.mark.parametrize(
        "field, value",
        [
            ("width", 0),
            ("height", -5),
            ("core_radius", 0),
            ("laying_period", -1),
            ("incubation_period", -1),
            ("n_ticks", -1),
            ("mutation_angle", -0.1),
            ("rotation_angle", -0.1),
            ("initial_speed", -1.0),
        ],
    )
    def test_validate_rejects(self, field, value):
        cfg = SimulationConfig(**{field: value})
        with pytest.raises(ValueError):
            cfg.validate()


class TestWorld:
    """Tests for World."""

    def test_creation(self):
        world = World(size=[100, 50])
        assert np.array_equal(world.size, [100.0, 50.0])
        assert world.n_movers == 0
        assert world.n_eggs == 0

    def test_bad_size_raises(self):
        with pytest.raises(ValueError):
            World(size=[100, 0])
        with pytest.raises(ValueError):
            World(size=[100, 50, 20])

    def test_bodies_movers_then_eggs(self):
        m_body = Body.from_angles((10, 10), 2, [0.0])
        e_body = Body.from_angles((50, 50), 2, [0.0])
        world = World(
            size=[100, 100],
            movers=[Mover(body=m_body)],
            eggs=[Egg(body=e_body)],
        )
        assert world.bodies() == [(m_body, True), (e_body, False)]


class TestDefaultWorld:
    """Tests for the standard starting population."""

    def test_population(self, rng):
        cfg = SimulationConfig()
        world = create_default_world(cfg, rng)
        assert world.n_movers == 2
        assert world.n_eggs == 1
        assert np.array_equal(world.size, [600.0, 600.0])

    def test_positions(self, rng):
        cfg = SimulationConfig()
        world = create_default_world(cfg, rng)
        assert np.allclose(world.movers[0].position, [100.0, 100.0])
        assert np.allclose(world.movers[1].position, [400.0, 400.0])
        assert np.allclose(world.eggs[0].position, [100.0, 100.0])

    def test_shapes(self, rng):
        cfg = SimulationConfig()
        world = create_default_world(cfg, rng)
        w = world.size
        assert np.allclose(world.movers[0].body.limb_angles(w), [0.0, np.pi / 2])
        assert np.allclose(world.movers[1].body.limb_angles(w), [0.0, -np.pi / 2])
        assert np.allclose(world.eggs[0].body.limb_angles(w), [0.0, np.pi / 2])
        assert world.eggs[0].body is not world.movers[0].body

    def test_timers_and_speeds(self, rng):
        cfg = SimulationConfig(laying_period=7, incubation_period=9, initial_speed=2.0)
        world = create_default_world(cfg, rng)
        assert all(m.time_to_lay == 7 for m in world.movers)
        assert all(m.speed < 2.0 for m in world.movers)
        assert world.eggs[0].time_to_hatch == 9
