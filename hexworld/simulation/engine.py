"""SimulationEngine — the main tick loop.

Owns the world and its seeded random generator, places the starting
population, and advances the world with ``tick`` one step at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from hexworld.agents.agent import new_food, new_predator, new_prey
from hexworld.grid.world import World
from hexworld.simulation.config import SimulationConfig
from hexworld.simulation.step import TickReport, new_world
from hexworld.simulation.step import tick as advance

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        world: The hex grid and its population.
        tick: Current tick count.
        last_report: Counts from the most recent tick (None before the
            first step).
    """

    config: SimulationConfig
    world: World = field(init=False)
    tick: int = 0
    last_report: TickReport | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Build the world from config and place the starting agents."""
        self.config.validate()
        self.world = new_world(
            self.config.world_size,
            np.random.default_rng(self.config.seed),
        )
        self.populate()

    def populate(self) -> None:
        """Place the configured predators, prey and food at random cells."""
        for _ in range(self.config.initial_predators):
            self.world.add(new_predator(self.world))
        for _ in range(self.config.initial_prey):
            self.world.add(new_prey(self.world))
        for _ in range(self.config.initial_food):
            self.world.add(new_food(self.world))
        logger.info(
            "Placed %d predators, %d prey, %d food",
            self.config.initial_predators,
            self.config.initial_prey,
            self.config.initial_food,
        )

    def step(self) -> TickReport:
        """Advance the simulation by one tick.

        Returns:
            The counts reported by the tick.
        """
        self.last_report = advance(self.world)
        self.tick += 1
        return self.last_report

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def summary(self) -> str:
        """Return a one-line population count, e.g. for the CLI."""
        counts = self.world.counts()
        parts = [f"{kind.name.lower()}={n}" for kind, n in counts.items()]
        return f"tick {self.tick}: " + " ".join(parts)
