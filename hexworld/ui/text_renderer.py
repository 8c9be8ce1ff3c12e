"""Plain-text view of the hex world.

Each grid row becomes one line with cells separated by a space.  Odd
rows are indented by one character so the output mirrors the odd-r
hex layout:

    P . x
     . * .
    p . .

(shown with dots for clarity; empty cells are blanks.)  A border frame
keeps the grid's edges visible when the corners are empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexworld.grid.world import World

_FRAME = "+"
_SIDE = "|"


def render(world: World) -> str:
    """Return a multi-line text picture of ``world``.

    Args:
        world: The world to draw.

    Returns:
        The framed grid, one line per row, without a trailing newline.
    """
    grid = world.symbol_grid()
    # Every line is 2 * size characters wide once odd rows are indented.
    width = 2 * world.size
    lines = [_FRAME + "-" * width + _FRAME]
    for row, cells in enumerate(grid):
        indent = " " if row & 1 else ""
        body = (indent + " ".join(cells)).ljust(width)
        lines.append(_SIDE + body + _SIDE)
    lines.append(_FRAME + "-" * width + _FRAME)
    return "\n".join(lines)
