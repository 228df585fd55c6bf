"""Rich terminal frontend — coloured grid, route panel, and stats.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SolveResult
from backend.models.grid import CellKind, Grid, Position
from backend.models.route import Route

console = Console()

_GLYPHS: dict[CellKind, str] = {
    CellKind.OPEN: "[white]_[/white]",
    CellKind.ICE: "[dim cyan]·[/dim cyan]",
    CellKind.ROCK: "[bold bright_black]■[/bold bright_black]",
    CellKind.START: "[bold green]S[/bold green]",
    CellKind.FINISH: "[bold red]F[/bold red]",
}


# -- grid rendering -----------------------------------------------------------


def _render_grid(grid: Grid, landings: set[Position]) -> Table:
    """Return a Rich Table of the map with the route's landings marked."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(grid.width):
        table.add_column(width=1, justify="center")

    for r, row in enumerate(grid.cells):
        cells: list[str] = []
        for c, kind in enumerate(row):
            pos = Position(r, c)
            if pos in landings and kind not in (CellKind.START, CellKind.FINISH):
                cells.append("[bold yellow]●[/bold yellow]")
            else:
                cells.append(_GLYPHS[kind])
        table.add_row(*cells)
    return table


def _render_steps(route: Route) -> Text:
    steps = Text()
    for i, instruction in enumerate(route.instructions(), 1):
        steps.append(f"{i:>3}. ", style="dim")
        steps.append(instruction + "\n", style="bold white")
    return steps


# -- public entry point -------------------------------------------------------


def run(
    grid: Grid,
    result: SolveResult,
    show_timing: bool = True,
    out: Console | None = None,
) -> None:
    """Print a styled report for *grid* and its solve *result*."""
    out = out or console
    route = result.route
    landings = set(route.positions) if route else set()

    title = f"[bold cyan]Ice Slide  {grid.width}×{grid.height}[/bold cyan]"
    out.print()
    out.print(
        Align.center(
            Panel(
                Align.center(_render_grid(grid, landings)),
                title=title,
                border_style="bright_blue",
                padding=(1, 2),
            )
        )
    )

    if route is None:
        out.print(Align.center(Text("No solution found.", style="bold red")))
        return

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(len(route.positions) - 1), style="bold yellow")
    stats.append("    Steps: ", style="dim")
    stats.append(str(route.steps), style="bold yellow")
    if show_timing:
        stats.append("    Time: ", style="dim")
        stats.append(f"{result.elapsed * 1000:.2f} ms", style="bold yellow")

    out.print(
        Align.center(
            Panel(
                Group(_render_steps(route)),
                title="[bold green]Shortest path[/bold green]",
                border_style="green",
                padding=(0, 2),
            )
        )
    )
    out.print(Align.center(stats))
