"""Tracks the mover while a route is being played out."""

from __future__ import annotations

from backend.models.grid import Grid, Position


class GameState:
    """Holds the grid, the mover's position, and the move/step counters."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.position: Position = grid.start
        self.moves: int = 0
        self.steps: int = 0
        self.history: list[Position] = [grid.start]

    # -- moves ----------------------------------------------------------------

    def advance(self, landing: Position, cost: int) -> None:
        self.position = landing
        self.steps += cost
        self.moves += 1
        self.history.append(landing)

    @property
    def is_finished(self) -> bool:
        return self.position == self.grid.finish
