"""Shared fixtures for the hexworld test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from hexworld.grid.world import World
from hexworld.simulation.config import SimulationConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_world(rng: Generator) -> World:
    """An empty 8x8 world for fast tests."""
    return World(size=8, rng=rng)


@pytest.fixture
def world12(rng: Generator) -> World:
    """An empty 12x12 world, the size the command line uses."""
    return World(size=12, rng=rng)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()
