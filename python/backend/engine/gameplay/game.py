"""Plays directions out on a grid one slide at a time."""

from __future__ import annotations

from collections.abc import Iterable

from backend.engine.gamesolver.slide import resolve_slide
from backend.engine.gamestate import GameState
from backend.models.grid import Direction, Grid


class GamePlay:
    """Replays a session of slides from the grid's start."""

    def __init__(self, grid: Grid) -> None:
        self.state = GameState(grid)

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Slide the mover in *direction*.

        Returns False, leaving the state untouched, if the slide is blocked
        on its first cell or the finish has already been reached.
        """
        if self.is_won:
            return False
        slide = resolve_slide(self.state.grid, self.state.position, direction)
        if not slide.moved:
            return False
        self.state.advance(slide.landing, slide.cost)
        return True

    def replay(self, moves: Iterable[Direction]) -> bool:
        """Apply every move in order; stop at the first invalid one."""
        return all(self.move(direction) for direction in moves)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_finished
