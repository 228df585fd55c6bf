"""Grid model for the ice sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Return the ``(row, col)`` unit offset of this direction."""
        return _DELTAS[self]

    @classmethod
    def between(cls, source: Position, target: Position) -> Direction:
        """Return the direction of the move from *source* to *target*.

        Rows take precedence over columns.  Identical positions are not a
        move at all and raise ``ValueError``.
        """
        if target.row > source.row:
            return cls.DOWN
        if target.row < source.row:
            return cls.UP
        if target.col > source.col:
            return cls.RIGHT
        if target.col < source.col:
            return cls.LEFT
        raise ValueError(f"Zero-length move at {source.label()}.")


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class CellKind(StrEnum):
    OPEN = "open"
    ICE = "ice"
    ROCK = "rock"
    START = "start"
    FINISH = "finish"


@dataclass(frozen=True)
class Position:
    """A 0-indexed ``(row, col)`` cell coordinate."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position:
        dr, dc = direction.delta
        return Position(self.row + dr, self.col + dc)

    def label(self) -> str:
        """1-indexed ``(column,row)`` label used in reports."""
        return f"({self.col + 1},{self.row + 1})"


@dataclass(frozen=True)
class Grid:
    """Represents an immutable puzzle map.

    Cells are stored row-major as a tuple of tuples of ``CellKind``.
    """

    cells: tuple[tuple[CellKind, ...], ...]
    start: Position
    finish: Position

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("A grid needs at least one row and one column.")
        width = len(self.cells[0])
        for r, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {width}."
                )
        for name, pos in (("start", self.start), ("finish", self.finish)):
            if not self.contains(pos):
                raise ValueError(f"The {name} {pos} lies outside the grid.")
            if self.kind_at(pos) is CellKind.ROCK:
                raise ValueError(f"The {name} {pos} lies on a rock.")

    # -- queries --------------------------------------------------------------

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0])

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def kind_at(self, pos: Position) -> CellKind:
        return self.cells[pos.row][pos.col]

    def is_passable(self, pos: Position) -> bool:
        """True if *pos* is on the grid and not a rock."""
        return self.contains(pos) and self.kind_at(pos) is not CellKind.ROCK
