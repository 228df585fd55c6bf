"""Vanilla terminal frontend — no third-party dependencies.

Prints the solution report as plain numbered lines on stdout.
"""

from __future__ import annotations

from backend.engine.gamesolver import SolveResult
from backend.models.grid import Grid


NO_SOLUTION = "No solution found."


def _format_time(seconds: float) -> str:
    return f"{seconds * 1000:.2f} ms"


def render(result: SolveResult, show_timing: bool = True) -> list[str]:
    """Return the report lines for *result*."""
    route = result.route
    if route is None:
        return [NO_SOLUTION]

    lines = ["", "Shortest path:", ""]
    for i, instruction in enumerate(route.instructions(), 1):
        lines.append(f"{i}. {instruction}")
    lines.append("")
    lines.append(f"Total steps: {route.steps}")
    if show_timing:
        lines.append(f"Solved in {_format_time(result.elapsed)}.")
    return lines


# -- public entry point -------------------------------------------------------


def run(grid: Grid, result: SolveResult, show_timing: bool = True) -> None:
    """Print the report for a solved (or unsolvable) *grid*.

    Every frontend runner shares this signature; the plain report has no
    use for the grid itself.
    """
    for line in render(result, show_timing=show_timing):
        print(line)
