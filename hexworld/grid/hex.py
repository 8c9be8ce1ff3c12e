"""Hex — a cell coordinate on a pointy-top hexagonal grid.

Coordinates are stored as ``(row, col)`` in the "odd-r" offset layout:
every odd row is shifted half a cell to the right.  Distance and
adjacency are computed by converting to cube coordinates, so a
neighbour is exactly a cell at distance 1.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

# Cube-coordinate steps in neighbour enumeration order: E, NE, NW, W, SW, SE.
# ``move_toward`` breaks ties by taking the first candidate in this order.
_CUBE_DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
)

_ROW_SPACING = math.sqrt(3.0) / 2.0


@dataclass
class Hex:
    """A mutable hex-grid coordinate compared by value.

    Attributes:
        row: Row index (also the cube ``z`` axis).
        col: Column index in odd-r offset form.
    """

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    @classmethod
    def from_cube(cls, x: int, z: int) -> Hex:
        """Build a Hex from cube coordinates (``y`` is implied)."""
        return cls(row=z, col=x + (z - (z & 1)) // 2)

    def cube(self) -> tuple[int, int, int]:
        """Return the cube coordinates ``(x, y, z)`` of this cell."""
        x = self.col - (self.row - (self.row & 1)) // 2
        z = self.row
        return x, -x - z, z

    def as_tuple(self) -> tuple[int, int]:
        """Return ``(row, col)``, usable as a dict key."""
        return self.row, self.col

    def copy(self) -> Hex:
        """Return an independent copy of this coordinate."""
        return Hex(self.row, self.col)

    def distance(self, other: Hex) -> int:
        """Return the number of single hex steps between two cells."""
        return distance(self, other)

    def neighbours(self) -> list[Hex]:
        """Return the six adjacent cells in E, NE, NW, W, SW, SE order."""
        x, _, z = self.cube()
        return [Hex.from_cube(x + dx, z + dz) for dx, _, dz in _CUBE_DIRECTIONS]

    def move_toward(
        self,
        goal: Hex,
        within: Callable[[Hex], bool] | None = None,
    ) -> None:
        """Step in place to the neighbour closest to ``goal``.

        Only neighbours strictly closer than the current cell are
        considered.  Among equally close candidates the first one in
        neighbour order wins.  Does nothing when already at ``goal``.

        Args:
            goal: Destination cell.
            within: Optional bounds predicate; neighbours for which it
                returns False are never chosen.
        """
        best_dist = distance(self, goal)
        if best_dist == 0:
            return

        best: Hex | None = None
        for candidate in self.neighbours():
            if within is not None and not within(candidate):
                continue
            d = distance(candidate, goal)
            if d < best_dist:
                best_dist = d
                best = candidate

        if best is not None:
            self.row, self.col = best.row, best.col

    def to_cartesian(self) -> tuple[float, float]:
        """Return the cell centre in Cartesian space.

        Cells are one unit wide, odd rows are offset by half a unit and
        rows are ``sqrt(3) / 2`` apart, so neighbouring centres are
        exactly one unit from each other.

        Returns:
            ``(x, y)`` with ``y`` growing downward like the row index.
        """
        x = self.col + 0.5 * (self.row & 1)
        y = self.row * _ROW_SPACING
        return x, y


def distance(a: Hex, b: Hex) -> int:
    """Return the hex-grid shortest-path distance between two cells.

    Args:
        a: First cell.
        b: Second cell.

    Returns:
        ``max(|dx|, |dy|, |dz|)`` over the cube-coordinate differences.
    """
    ax, ay, az = a.cube()
    bx, by, bz = b.cube()
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))
