from slidequest.engine.gamesolver.graph import (
    ShortestPaths,
    SlidePath,
    TransitionGraph,
    find_alternate,
)
from slidequest.engine.gamesolver.solver import Solver

__all__ = ["ShortestPaths", "SlidePath", "Solver", "TransitionGraph", "find_alternate"]
