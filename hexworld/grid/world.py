"""World grid — the spatial container for the simulation.

The World owns a square hex grid, the live agent population and the
random source used for picking cells.  It provides the spatial queries
(bounds, neighbours, random cells, occupancy) that the simulation step
and the agents rely on.  Only the simulation step mutates the
population.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING

from hexworld.agents.traits import AgentKind
from hexworld.grid.hex import Hex

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.random import Generator

    from hexworld.agents.agent import Agent

logger = logging.getLogger(__name__)

EMPTY_SYMBOL = " "

# When several agents share a cell, the first kind listed here is shown.
_RENDER_PRIORITY: tuple[AgentKind, ...] = (
    AgentKind.PREDATOR,
    AgentKind.PREY,
    AgentKind.FOOD,
    AgentKind.SCENT,
)


@dataclass
class World:
    """A bounded ``size x size`` hex grid holding every live agent.

    Attributes:
        size: Number of rows and of columns.
        rng: Random source; only used through ``integers``.
        agents: Live population keyed by agent id.
    """

    size: int
    rng: Generator = field(repr=False)
    agents: dict[int, Agent] = field(init=False, default_factory=dict, repr=False)
    _ids: Iterator[int] = field(init=False, repr=False)
    _border: list[Hex] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the size and precompute the border cells.

        Raises:
            ValueError: If ``size`` is not positive.
        """
        if self.size <= 0:
            msg = f"world size must be positive, got {self.size}"
            raise ValueError(msg)
        self._ids = count()
        last = self.size - 1
        self._border = [
            Hex(row, col)
            for row in range(self.size)
            for col in range(self.size)
            if row in (0, last) or col in (0, last)
        ]
        logger.info("Created %dx%d hex world", self.size, self.size)

    def __len__(self) -> int:
        return len(self.agents)

    # -- Spatial queries ------------------------------------------------------

    def contains(self, cell: Hex) -> bool:
        """Return True if ``cell`` lies inside the grid."""
        return 0 <= cell.row < self.size and 0 <= cell.col < self.size

    def neighbours(self, cell: Hex) -> list[Hex]:
        """Return the in-bounds neighbours of ``cell`` in E..SE order."""
        return [n for n in cell.neighbours() if self.contains(n)]

    def random_cell(self) -> Hex:
        """Return a cell chosen uniformly from the whole grid."""
        row = int(self.rng.integers(0, self.size))
        col = int(self.rng.integers(0, self.size))
        return Hex(row, col)

    def random_border_cell(self) -> Hex:
        """Return a cell chosen uniformly from the outer boundary.

        Used as the dissipation target of scents.
        """
        return self._border[int(self.rng.integers(0, len(self._border)))].copy()

    def border_cells(self) -> list[Hex]:
        """Return copies of every boundary cell in row-major order."""
        return [cell.copy() for cell in self._border]

    # -- Population -----------------------------------------------------------

    def population(self) -> list[Agent]:
        """Return a snapshot of the live agents in ascending id order."""
        return list(self.agents.values())

    def add(self, agent: Agent) -> int:
        """Insert an agent, assign it a fresh id and return that id.

        Raises:
            IndexError: If the agent's location is outside the grid.
        """
        if not self.contains(agent.location):
            msg = f"{agent.location} out of bounds for {self.size}x{self.size}"
            raise IndexError(msg)
        agent_id = next(self._ids)
        agent.agent_id = agent_id
        self.agents[agent_id] = agent
        return agent_id

    def remove(self, agent_id: int) -> Agent:
        """Remove and return the agent with ``agent_id``.

        Raises:
            KeyError: If no live agent has that id.
        """
        return self.agents.pop(agent_id)

    def agents_at(self, cell: Hex) -> list[Agent]:
        """Return every agent currently located at ``cell``."""
        return [a for a in self.agents.values() if a.location == cell]

    def counts(self) -> dict[AgentKind, int]:
        """Return the number of live agents of each kind."""
        result = dict.fromkeys(AgentKind, 0)
        for agent in self.agents.values():
            result[agent.kind] += 1
        return result

    # -- Rendering hook -------------------------------------------------------

    def symbol_grid(self) -> list[list[str]]:
        """Return a row-major grid with one display symbol per cell.

        Empty cells hold a blank.  A shared cell shows the agent whose
        kind comes first in Predator, Prey, Food, Scent order.
        """
        grid = [[EMPTY_SYMBOL] * self.size for _ in range(self.size)]
        rank = {kind: i for i, kind in enumerate(_RENDER_PRIORITY)}
        shown: dict[tuple[int, int], int] = {}
        for agent in self.agents.values():
            key = agent.location.as_tuple()
            r = rank[agent.kind]
            if key not in shown or r < shown[key]:
                shown[key] = r
                grid[agent.location.row][agent.location.col] = agent.symbol()
        return grid
