"""Resolves a single slide across the grid."""

from __future__ import annotations

from typing import NamedTuple

from backend.models.grid import CellKind, Direction, Grid, Position


class Slide(NamedTuple):
    landing: Position
    cost: int

    @property
    def moved(self) -> bool:
        return self.cost > 0


def resolve_slide(grid: Grid, position: Position, direction: Direction) -> Slide:
    """Slide from *position* in *direction* and return where it stops.

    The mover keeps going across ice and halts on the first non-ice cell it
    enters, or on the last cell before a rock or the grid edge.  Every cell
    entered costs one step.  A slide blocked on its first cell returns
    *position* itself with a cost of 0.
    """
    if not grid.is_passable(position):
        raise ValueError(f"Cannot slide from {position}: not a passable cell.")

    landing = position
    cost = 0
    while True:
        nxt = landing.step(direction)
        if not grid.is_passable(nxt):
            break
        landing = nxt
        cost += 1
        if grid.kind_at(landing) is not CellKind.ICE:
            break
    return Slide(landing, cost)
