"""Config — load simulation parameters from YAML files.

World size, starting population, seed and pacing live in YAML and are
parsed into a typed dataclass here.  The behaviour rules themselves are
fixed in ``hexworld.agents.traits`` and are not configurable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_size: Rows and columns of the hex grid.
        initial_predators: Predators placed at start-up.
        initial_prey: Prey placed at start-up.
        initial_food: Food items placed at start-up.
        ticks: Number of ticks the command line runs for.
        tick_interval: Seconds to wait between rendered ticks.
    """

    seed: int = 42
    world_size: int = 12
    initial_predators: int = 2
    initial_prey: int = 6
    initial_food: int = 4
    ticks: int = 500
    tick_interval: float = 0.2

    def validate(self) -> None:
        """Check that every value can build a world.

        Raises:
            ValueError: If the size is not positive or a count, the tick
                total or the interval is negative.
        """
        if self.world_size <= 0:
            msg = f"world_size must be positive, got {self.world_size}"
            raise ValueError(msg)
        for name in ("initial_predators", "initial_prey", "initial_food", "ticks"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must not be negative, got {value}"
                raise ValueError(msg)
        if self.tick_interval < 0:
            msg = f"tick_interval must not be negative, got {self.tick_interval}"
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        config = cls(
            seed=data.get("seed", cls.seed),
            world_size=data.get("world_size", cls.world_size),
            initial_predators=data.get("initial_predators", cls.initial_predators),
            initial_prey=data.get("initial_prey", cls.initial_prey),
            initial_food=data.get("initial_food", cls.initial_food),
            ticks=data.get("ticks", cls.ticks),
            tick_interval=data.get("tick_interval", cls.tick_interval),
        )
        config.validate()
        return config
