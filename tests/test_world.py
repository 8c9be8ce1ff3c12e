"""Tests for hexworld.grid.world."""

import numpy as np
import pytest
from numpy.random import Generator

from hexworld.agents.agent import new_food, new_predator, new_prey, new_scent
from hexworld.agents.traits import AgentKind
from hexworld.grid.hex import Hex
from hexworld.grid.world import World


class TestConstruction:
    """Tests for world creation."""

    def test_size(self, small_world: World) -> None:
        assert small_world.size == 8
        assert len(small_world) == 0

    def test_zero_size_rejected(self, rng: Generator) -> None:
        with pytest.raises(ValueError, match="positive"):
            World(size=0, rng=rng)

    def test_negative_size_rejected(self, rng: Generator) -> None:
        with pytest.raises(ValueError):
            World(size=-3, rng=rng)


class TestSpatialQueries:
    """Tests for bounds, neighbours and random cells."""

    def test_contains(self, small_world: World) -> None:
        assert small_world.contains(Hex(0, 0))
        assert small_world.contains(Hex(7, 7))
        assert not small_world.contains(Hex(8, 0))
        assert not small_world.contains(Hex(0, -1))

    def test_neighbours_centre(self, small_world: World) -> None:
        assert len(small_world.neighbours(Hex(3, 3))) == 6

    def test_neighbours_corner(self, small_world: World) -> None:
        # Even-row top-left corner: only E, SE remain in bounds
        neighbours = small_world.neighbours(Hex(0, 0))
        assert [n.as_tuple() for n in neighbours] == [(0, 1), (1, 0)]

    def test_random_cell_in_bounds(self, world12: World) -> None:
        for _ in range(10_000):
            assert world12.contains(world12.random_cell())

    def test_random_cell_covers_grid(self, rng: Generator) -> None:
        world = World(size=3, rng=rng)
        seen = {world.random_cell().as_tuple() for _ in range(2_000)}
        assert len(seen) == 9

    def test_border_cell_count(self, small_world: World) -> None:
        assert len(small_world.border_cells()) == 4 * 8 - 4

    def test_random_border_cell_on_border(self, world12: World) -> None:
        last = world12.size - 1
        for _ in range(2_000):
            cell = world12.random_border_cell()
            assert world12.contains(cell)
            assert cell.row in (0, last) or cell.col in (0, last)

    def test_random_border_cell_covers_border(self, rng: Generator) -> None:
        world = World(size=4, rng=rng)
        seen = {world.random_border_cell().as_tuple() for _ in range(2_000)}
        assert len(seen) == 12

    def test_single_cell_world(self, rng: Generator) -> None:
        world = World(size=1, rng=rng)
        assert world.random_cell() == Hex(0, 0)
        assert world.random_border_cell() == Hex(0, 0)

    def test_border_cell_is_a_copy(self, rng: Generator) -> None:
        world = World(size=1, rng=rng)
        world.random_border_cell().move_toward(Hex(5, 5))
        assert world.random_border_cell() == Hex(0, 0)


class TestPopulation:
    """Tests for adding, removing and counting agents."""

    def test_add_assigns_increasing_ids(self, small_world: World) -> None:
        first = small_world.add(new_food(small_world))
        second = small_world.add(new_prey(small_world))
        assert second > first
        assert len(small_world) == 2

    def test_add_sets_agent_id(self, small_world: World) -> None:
        food = new_food(small_world)
        agent_id = small_world.add(food)
        assert food.agent_id == agent_id

    def test_add_out_of_bounds(self, small_world: World) -> None:
        with pytest.raises(IndexError):
            small_world.add(new_food(small_world, location=Hex(8, 8)))

    def test_remove(self, small_world: World) -> None:
        food = new_food(small_world)
        agent_id = small_world.add(food)
        assert small_world.remove(agent_id) is food
        assert small_world.population() == []

    def test_remove_unknown(self, small_world: World) -> None:
        with pytest.raises(KeyError):
            small_world.remove(99)

    def test_population_is_snapshot(self, small_world: World) -> None:
        small_world.add(new_food(small_world))
        snapshot = small_world.population()
        small_world.add(new_food(small_world))
        assert len(snapshot) == 1

    def test_agents_at(self, small_world: World) -> None:
        cell = Hex(2, 2)
        a = new_food(small_world, location=cell.copy())
        b = new_prey(small_world, location=cell.copy())
        small_world.add(a)
        small_world.add(b)
        small_world.add(new_food(small_world, location=Hex(5, 5)))
        assert small_world.agents_at(cell) == [a, b]

    def test_counts(self, small_world: World) -> None:
        small_world.add(new_predator(small_world))
        small_world.add(new_prey(small_world))
        small_world.add(new_prey(small_world))
        counts = small_world.counts()
        assert counts[AgentKind.PREDATOR] == 1
        assert counts[AgentKind.PREY] == 2
        assert counts[AgentKind.FOOD] == 0
        assert counts[AgentKind.SCENT] == 0


class TestSymbolGrid:
    """Tests for the per-cell rendering hook."""

    def test_empty(self, rng: Generator) -> None:
        world = World(size=2, rng=rng)
        assert world.symbol_grid() == [[" ", " "], [" ", " "]]

    def test_symbols(self, small_world: World) -> None:
        small_world.add(new_predator(small_world, location=Hex(0, 0)))
        small_world.add(new_prey(small_world, location=Hex(0, 1)))
        small_world.add(new_food(small_world, location=Hex(1, 0)))
        small_world.add(new_scent(small_world, Hex(1, 1)))
        grid = small_world.symbol_grid()
        assert grid[0][0] == "P"
        assert grid[0][1] == "p"
        assert grid[1][0] == "*"
        assert grid[1][1] == "x"

    def test_shared_cell_priority(self, small_world: World) -> None:
        cell = Hex(3, 3)
        # Added lowest priority first so insertion order cannot decide
        small_world.add(new_scent(small_world, cell))
        small_world.add(new_food(small_world, location=cell.copy()))
        assert small_world.symbol_grid()[3][3] == "*"
        small_world.add(new_prey(small_world, location=cell.copy()))
        assert small_world.symbol_grid()[3][3] == "p"
        small_world.add(new_predator(small_world, location=cell.copy()))
        assert small_world.symbol_grid()[3][3] == "P"

    def test_deterministic_across_seeds(self) -> None:
        grids = []
        for seed in (1, 2):
            world = World(size=4, rng=np.random.default_rng(seed))
            world.add(new_food(world, location=Hex(2, 2)))
            world.add(new_prey(world, location=Hex(2, 2)))
            grids.append(world.symbol_grid())
        assert grids[0] == grids[1]
