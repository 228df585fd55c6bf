from backend.engine.gamesolver.slide import Slide, resolve_slide
from backend.engine.gamesolver.solver import (
    SearchNode,
    SearchOrder,
    Solver,
    SolveResult,
)

__all__ = [
    "SearchNode",
    "SearchOrder",
    "Slide",
    "SolveResult",
    "Solver",
    "resolve_slide",
]
