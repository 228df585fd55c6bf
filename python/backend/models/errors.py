"""Errors raised while reading a puzzle file."""


class PuzzleInputError(ValueError):
    """Base class for every problem with the puzzle input."""


class InputNotFoundError(PuzzleInputError):
    pass


class MalformedInputError(PuzzleInputError):
    pass
