"""One simulation tick over a world's population.

A tick runs four phases in a fixed order against the population as it
stood when the tick began:

1. Move     -- every mobile agent steps toward its goal
2. Interact -- agents sharing a cell react to each other, both ways
3. Spawn    -- emitters roll for new agents, which are queued
4. Commit   -- dead agents are removed and queued spawns added

Nothing is added to or removed from the world before Commit, so every
agent present at the start of the tick takes part in every encounter on
its cell, even one that died earlier in the same tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations

import numpy as np
from numpy.random import Generator

from hexworld.agents.agent import Agent
from hexworld.agents.traits import Motion
from hexworld.grid.world import World

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """What happened during one tick.

    Attributes:
        moved: Mobile agents that were updated.
        goals_reached: Agents whose goal policy fired.
        encounters: Unordered co-located pairs resolved.
        spawned: Agents added at Commit.
        removed: Dead agents removed at Commit.
    """

    moved: int = 0
    goals_reached: int = 0
    encounters: int = 0
    spawned: int = 0
    removed: int = 0


def new_world(
    size: int,
    rng: Generator | None = None,
    *,
    seed: int | None = None,
) -> World:
    """Create an empty world.

    Args:
        size: Rows and columns of the grid.
        rng: Random source to use; built from ``seed`` when omitted.
        seed: Seed for a fresh generator (ignored if ``rng`` is given).

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    return World(size=size, rng=rng)


def tick(world: World) -> TickReport:
    """Advance ``world`` by one tick.

    Args:
        world: The world to advance in place.

    Returns:
        Per-phase counts for this tick.
    """
    report = TickReport()
    snapshot = world.population()

    _move(world, snapshot, report)
    _interact(snapshot, report)
    spawned = _spawn(world, snapshot)
    _commit(world, snapshot, spawned, report)

    logger.debug(
        "tick: moved=%d reached=%d encounters=%d spawned=%d removed=%d",
        report.moved,
        report.goals_reached,
        report.encounters,
        report.spawned,
        report.removed,
    )
    return report


def _move(world: World, snapshot: list[Agent], report: TickReport) -> None:
    for agent in snapshot:
        if agent.traits.motion is Motion.STATIONARY:
            continue
        report.moved += 1
        if agent.update(world):
            report.goals_reached += 1


def _interact(snapshot: list[Agent], report: TickReport) -> None:
    """Resolve every co-located pair in ascending id order."""
    cells: dict[tuple[int, int], list[Agent]] = {}
    for agent in snapshot:
        cells.setdefault(agent.location.as_tuple(), []).append(agent)

    for occupants in cells.values():
        for a, b in combinations(occupants, 2):
            a.encounter(b)
            b.encounter(a)
            report.encounters += 1


def _spawn(world: World, snapshot: list[Agent]) -> list[Agent]:
    spawned: list[Agent] = []
    for agent in snapshot:
        child = agent.spawn(world)
        if child is not None:
            spawned.append(child)
    return spawned


def _commit(
    world: World,
    snapshot: list[Agent],
    spawned: list[Agent],
    report: TickReport,
) -> None:
    for agent in snapshot:
        if not agent.is_alive:
            world.remove(agent.agent_id)
            report.removed += 1
            logger.debug(
                "%s #%d died at %s",
                agent.kind.name,
                agent.agent_id,
                agent.location,
            )
    for child in spawned:
        world.add(child)
        report.spawned += 1
