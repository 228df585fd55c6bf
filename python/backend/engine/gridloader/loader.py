"""Reads puzzle text files into validated grids."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from backend.models.errors import (
    InputNotFoundError,
    MalformedInputError,
    PuzzleInputError,
)
from backend.models.grid import CellKind, Grid, Position

logger = logging.getLogger(__name__)

SYMBOLS: dict[str, CellKind] = {
    "S": CellKind.START,
    "F": CellKind.FINISH,
    ".": CellKind.ICE,
    "0": CellKind.ROCK,
}


class GridLoader:
    """Stateless loader — all methods are static."""

    @staticmethod
    def load(path: Path) -> Grid:
        """Read and validate the puzzle stored at *path*."""
        path = Path(path)
        if not path.is_file():
            raise InputNotFoundError(f"File not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PuzzleInputError(f"Could not read {path}: {exc}") from exc
        return GridLoader.parse(GridLoader._split_lines(text))

    @staticmethod
    def parse(lines: Iterable[str]) -> Grid:
        """Build a grid from one text line per row.

        Example::

            GridLoader.parse(["S..", "0.F"])
        """
        rows = GridLoader._check_shape(list(lines))

        cells: list[tuple[CellKind, ...]] = []
        start: Position | None = None
        finish: Position | None = None
        for r, line in enumerate(rows):
            row: list[CellKind] = []
            for c, symbol in enumerate(line):
                kind = SYMBOLS.get(symbol)
                if kind is None:
                    raise MalformedInputError(
                        f"Invalid character {symbol!r} found in input file "
                        f"(line {r + 1}, column {c + 1})."
                    )
                if kind is CellKind.START:
                    if start is not None:
                        raise MalformedInputError(
                            "Multiple start positions found in input file."
                        )
                    start = Position(r, c)
                elif kind is CellKind.FINISH:
                    if finish is not None:
                        raise MalformedInputError(
                            "Multiple finish positions found in input file."
                        )
                    finish = Position(r, c)
                row.append(kind)
            cells.append(tuple(row))

        if start is None:
            raise MalformedInputError(
                "Start position 'S' not found in input file."
            )
        if finish is None:
            raise MalformedInputError(
                "Finish position 'F' not found in input file."
            )

        grid = Grid(cells=tuple(cells), start=start, finish=finish)
        logger.debug(
            "Loaded %dx%d grid, start %s, finish %s",
            grid.width, grid.height, start.label(), finish.label(),
        )
        return grid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _split_lines(text: str) -> list[str]:
        # read_text already turned \r\n and \r into \n; nothing else ends a row.
        if not text:
            return []
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return lines

    @staticmethod
    def _check_shape(rows: list[str]) -> list[str]:
        width = -1
        for i, line in enumerate(rows, 1):
            if not line:
                raise MalformedInputError(
                    f"Empty line found in input file (line {i})."
                )
            if width == -1:
                width = len(line)
            elif len(line) != width:
                raise MalformedInputError(
                    f"Inconsistent line lengths in input file (line {i} has "
                    f"length {len(line)}, expected {width})."
                )
        if not rows:
            raise MalformedInputError("Empty input file.")
        return rows
