"""Agent -- a predator, prey, food or scent living on the hex grid.

All four kinds share one dataclass tagged by ``AgentKind``.  Behaviour
is looked up in the trait table (``hexworld.agents.traits``) and
dispatched with ``match`` statements, so each kind's state stays
explicit on the instance:

- **Movement**: mobile agents take one step toward ``goal`` per tick.
  Arriving triggers the kind's goal policy (pick a new random goal, or
  die for scents).
- **Encounters**: when two agents share a cell each one is notified of
  the other's kind and reacts by doing nothing, dying, or following the
  scent back to where it came from.
- **Emission**: emitters roll a ``1/rate`` chance each tick to produce
  a new agent (food gives off scents).

Agents only ever mutate their own location, goal and alive flag.  The
simulation step owns adding and removing them from the world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hexworld.agents.traits import (
    TRAITS,
    AgentKind,
    Emission,
    GoalPolicy,
    Motion,
    Reaction,
    TraitSet,
    Vitality,
)

if TYPE_CHECKING:
    from hexworld.grid.hex import Hex
    from hexworld.grid.world import World


@dataclass(eq=False)
class Agent:
    """A single agent.

    Attributes:
        kind: Which variant this agent is.
        location: Current cell; moved in place by ``update``.
        goal: Destination of a mobile agent (None when stationary).
        origin: Cell a scent was emitted from (None for other kinds).
        alive: Own mortality flag; ignored for immortal kinds.
        agent_id: Identity assigned by ``World.add`` (-1 until added).
    """

    kind: AgentKind
    location: Hex
    goal: Hex | None = None
    origin: Hex | None = None
    alive: bool = True
    agent_id: int = -1

    def __post_init__(self) -> None:
        """Reject compositions the trait table cannot drive.

        Raises:
            ValueError: If a mobile agent has no goal, an emitter has a
                non-positive rate, or a scent has no origin.
        """
        traits = self.traits
        if traits.motion is Motion.MOBILE and self.goal is None:
            msg = f"mobile {self.kind.name} needs a goal"
            raise ValueError(msg)
        if traits.emission is not Emission.NONE and traits.emission_rate <= 0:
            msg = f"{self.kind.name} emission rate must be positive"
            raise ValueError(msg)
        if self.kind is AgentKind.SCENT and self.origin is None:
            msg = "SCENT needs an origin"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.symbol()

    @property
    def traits(self) -> TraitSet:
        """Return the capability set for this agent's kind."""
        return TRAITS[self.kind]

    @property
    def is_alive(self) -> bool:
        """Return True if this agent is still alive."""
        return self.traits.vitality is Vitality.IMMORTAL or self.alive

    def symbol(self) -> str:
        """Return the single-character display symbol."""
        return self.traits.symbol

    def position(self) -> Hex:
        """Return a copy of the current location."""
        return self.location.copy()

    def kill(self) -> None:
        """Clear the alive flag; immortal agents are unaffected."""
        if self.traits.vitality is Vitality.MORTAL:
            self.alive = False

    # -- Move phase ----------------------------------------------------------

    def update(self, world: World) -> bool:
        """Take one step toward the goal, reacting if it is reached.

        Args:
            world: The world the agent lives in (bounds and random goals).

        Returns:
            True if the goal was reached during this update.
        """
        if self.traits.motion is Motion.STATIONARY:
            return False
        assert self.goal is not None

        self.location.move_toward(self.goal, within=world.contains)
        if self.location != self.goal:
            return False

        match self.traits.on_goal:
            case GoalPolicy.REROLL:
                self.goal = world.random_cell()
            case GoalPolicy.DIE:
                self.kill()
        return True

    # -- Interact phase ------------------------------------------------------

    def encounter(self, other: Agent) -> None:
        """React to sharing a cell with ``other``.

        Dispatches on the other agent's kind; this agent's own kind
        decides the reaction through its trait set.
        """
        match other.kind:
            case AgentKind.PREDATOR:
                self.on_encounter_predator(other)
            case AgentKind.PREY:
                self.on_encounter_prey(other)
            case AgentKind.SCENT:
                self.on_encounter_scent(other)
            case AgentKind.FOOD:
                pass  # nothing reacts to food

    def on_encounter_predator(self, predator: Agent) -> None:
        """Apply this kind's reaction to a predator."""
        self._react(self.traits.on_predator, predator)

    def on_encounter_prey(self, prey: Agent) -> None:
        """Apply this kind's reaction to a prey."""
        self._react(self.traits.on_prey, prey)

    def on_encounter_scent(self, scent: Agent) -> None:
        """Apply this kind's reaction to a scent."""
        self._react(self.traits.on_scent, scent)

    def _react(self, reaction: Reaction, other: Agent) -> None:
        match reaction:
            case Reaction.IGNORE:
                pass
            case Reaction.DIE:
                self.kill()
            case Reaction.FOLLOW:
                if other.origin is not None:
                    self.goal = other.origin.copy()

    # -- Spawn phase ---------------------------------------------------------

    def spawn(self, world: World) -> Agent | None:
        """Roll this tick's emission and return the new agent, if any.

        Dead agents and non-emitters never spawn.  Emitters succeed
        when ``rng.integers(0, rate)`` comes up zero.

        Args:
            world: Supplies the random source and scent destinations.

        Returns:
            The freshly built agent (not yet added to the world) or None.
        """
        traits = self.traits
        if traits.emission is Emission.NONE or not self.is_alive:
            return None
        if int(world.rng.integers(0, traits.emission_rate)) != 0:
            return None

        match traits.emission:
            case Emission.SCENT:
                return new_scent(world, self.location)
        return None


# -- Constructors ------------------------------------------------------------


def new_predator(
    world: World,
    location: Hex | None = None,
    goal: Hex | None = None,
) -> Agent:
    """Create a predator, defaulting to a random cell and random goal."""
    if location is None:
        location = world.random_cell()
    if goal is None:
        goal = world.random_cell()
    return Agent(kind=AgentKind.PREDATOR, location=location, goal=goal)


def new_prey(
    world: World,
    location: Hex | None = None,
    goal: Hex | None = None,
) -> Agent:
    """Create a prey, defaulting to a random cell and random goal."""
    if location is None:
        location = world.random_cell()
    if goal is None:
        goal = world.random_cell()
    return Agent(kind=AgentKind.PREY, location=location, goal=goal)


def new_food(world: World, location: Hex | None = None) -> Agent:
    """Create a stationary food item, defaulting to a random cell."""
    if location is None:
        location = world.random_cell()
    return Agent(kind=AgentKind.FOOD, location=location)


def new_scent(world: World, source: Hex, goal: Hex | None = None) -> Agent:
    """Create a scent leaving ``source`` for a random border cell.

    Args:
        world: Supplies the border cell when ``goal`` is omitted.
        source: Location of the emitter; becomes both the scent's
            starting cell and its fixed origin.
        goal: Explicit destination, mainly for tests.

    Returns:
        A new scent agent (not yet added to the world).
    """
    if goal is None:
        goal = world.random_border_cell()
    return Agent(
        kind=AgentKind.SCENT,
        location=source.copy(),
        goal=goal,
        origin=source.copy(),
    )
