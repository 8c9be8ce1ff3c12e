"""Traits — the fixed behaviour composition of each agent kind.

Every agent is assembled from a handful of small capabilities: how it
moves, what happens when it reaches its goal, whether it can die,
whether it emits anything, and how it reacts to meeting each other
kind.  The table at the bottom of this module is the single source of
truth for which capabilities each kind carries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class AgentKind(Enum):
    """The four agent variants living in the world."""

    PREDATOR = auto()
    PREY = auto()
    FOOD = auto()
    SCENT = auto()


class Motion(Enum):
    """Whether an agent walks toward a goal."""

    STATIONARY = auto()
    MOBILE = auto()


class GoalPolicy(Enum):
    """Action taken by a mobile agent when it arrives at its goal."""

    NONE = auto()
    REROLL = auto()  # pick a fresh random cell
    DIE = auto()


class Vitality(Enum):
    """Whether an agent's alive flag can ever go false."""

    IMMORTAL = auto()
    MORTAL = auto()


class Emission(Enum):
    """What, if anything, an agent spawns each tick."""

    NONE = auto()
    SCENT = auto()  # a Scent originating at the emitter's location


class Reaction(Enum):
    """Response of an agent to sharing a cell with another agent."""

    IGNORE = auto()
    DIE = auto()
    FOLLOW = auto()  # adopt the scent's origin as the new goal


@dataclass(frozen=True)
class TraitSet:
    """Capabilities carried by one agent kind.

    Attributes:
        symbol: Single character used by the text renderer.
        motion: Movement capability.
        on_goal: Goal-reached policy (``NONE`` for stationary kinds).
        vitality: Mortality capability.
        emission: Emission capability.
        emission_rate: Average ticks between emissions (1/rate chance
            per tick); 0 for non-emitters.
        on_predator: Reaction to meeting a Predator.
        on_prey: Reaction to meeting a Prey.
        on_scent: Reaction to meeting a Scent.
    """

    symbol: str
    motion: Motion
    on_goal: GoalPolicy
    vitality: Vitality
    emission: Emission = Emission.NONE
    emission_rate: int = 0
    on_predator: Reaction = Reaction.IGNORE
    on_prey: Reaction = Reaction.IGNORE
    on_scent: Reaction = Reaction.IGNORE


FOOD_EMISSION_RATE = 5

TRAITS: dict[AgentKind, TraitSet] = {
    AgentKind.PREDATOR: TraitSet(
        symbol="P",
        motion=Motion.MOBILE,
        on_goal=GoalPolicy.REROLL,
        vitality=Vitality.IMMORTAL,
        on_scent=Reaction.FOLLOW,
    ),
    AgentKind.PREY: TraitSet(
        symbol="p",
        motion=Motion.MOBILE,
        on_goal=GoalPolicy.REROLL,
        vitality=Vitality.MORTAL,
        on_predator=Reaction.DIE,
        on_scent=Reaction.FOLLOW,
    ),
    AgentKind.FOOD: TraitSet(
        symbol="*",
        motion=Motion.STATIONARY,
        on_goal=GoalPolicy.NONE,
        vitality=Vitality.MORTAL,
        emission=Emission.SCENT,
        emission_rate=FOOD_EMISSION_RATE,
        on_prey=Reaction.DIE,
    ),
    AgentKind.SCENT: TraitSet(
        symbol="x",
        motion=Motion.MOBILE,
        on_goal=GoalPolicy.DIE,
        vitality=Vitality.MORTAL,
    ),
}
