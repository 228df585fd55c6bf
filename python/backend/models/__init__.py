from backend.models.errors import (
    InputNotFoundError,
    MalformedInputError,
    PuzzleInputError,
)
from backend.models.grid import CellKind, Direction, Grid, Position
from backend.models.route import Route

__all__ = [
    "CellKind",
    "Direction",
    "Grid",
    "InputNotFoundError",
    "MalformedInputError",
    "Position",
    "PuzzleInputError",
    "Route",
]
