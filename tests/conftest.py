"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def world_size():
    """A 100x100 torus."""
    return np.array([100.0, 100.0])


@pytest.fixture
def small_config():
    """Deterministic-kinematics config for a 100x100 test world."""
    from moversim.core import SimulationConfig
    return SimulationConfig(
        width=100,
        height=100,
        core_radius=2,
        n_ticks=10,
        laying_period=1000,
        incubation_period=5,
        initial_speed=1.0,
        acceleration=0.0,
        mutation_angle=0.3,
        rotation_angle=0.0,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
