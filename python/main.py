#!/usr/bin/env python3
"""Ice Slide Puzzle Solver.

Usage::

    python main.py puzzle.txt              # plain report
    python main.py puzzle.txt -f rich      # Rich terminal report
    python main.py puzzle.txt --order fifo # insertion-order search
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import SearchOrder, Solver  # noqa: E402
from backend.engine.gridloader import GridLoader  # noqa: E402
from backend.models.errors import PuzzleInputError  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Path = typer.Argument(
        ..., help="Puzzle text file: S start, F finish, . ice, 0 rock.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="ICE_SLIDE_FRONTEND",
        help="How to print the report.",
    ),
    order: SearchOrder = typer.Option(
        SearchOrder.UNIFORM_COST, "--order",
        help="Frontier order: uniform-cost (optimal) or fifo.",
    ),
    timing: bool = typer.Option(
        True, "--timing/--no-timing",
        help="Report how long the search took.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log loader and solver details to stderr.",
    ),
) -> None:
    """Ice Slide Puzzle Solver."""
    _configure_logging(verbose)

    try:
        grid = GridLoader.load(puzzle)
    except PuzzleInputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    logger.debug("Solving %s with %s order", puzzle, order.value)
    result = Solver(grid, order=order).solve()

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(grid, result, show_timing=timing)


if __name__ == "__main__":
    app()
