"""Solution route and its textual instructions."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.grid import Direction, Position


@dataclass(frozen=True)
class Route:
    """An ordered sequence of landing positions from start to finish.

    ``steps`` is the total number of cells travelled along the route.
    """

    positions: tuple[Position, ...]
    steps: int

    def __post_init__(self) -> None:
        if not self.positions:
            raise ValueError("A route needs at least one position.")
        # Raises on a zero-length move.
        self.moves()

    @property
    def start(self) -> Position:
        return self.positions[0]

    @property
    def finish(self) -> Position:
        return self.positions[-1]

    def moves(self) -> list[Direction]:
        return [
            Direction.between(a, b)
            for a, b in zip(self.positions, self.positions[1:])
        ]

    def instructions(self) -> list[str]:
        """Return the unnumbered instruction lines of the route.

        Example::

            ["Start at (1,1)", "Move right to (3,1)", "Done!"]
        """
        lines = [f"Start at {self.start.label()}"]
        for direction, target in zip(self.moves(), self.positions[1:]):
            lines.append(f"Move {direction.value} to {target.label()}")
        lines.append("Done!")
        return lines
