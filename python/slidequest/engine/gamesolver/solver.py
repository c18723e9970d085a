"""Sliding puzzle solver."""

from __future__ import annotations

from slidequest.engine.gamesolver.graph import ShortestPaths, TransitionGraph, find_alternate
from slidequest.models.grid import Coordinate, Direction, Grid


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def graph(grid: Grid) -> TransitionGraph:
        return TransitionGraph.build(grid.width, grid.height, grid.is_blocked)

    @staticmethod
    def solve(grid: Grid, origin: tuple[int, int] | None = None) -> list[Direction]:
        """Return a shortest move sequence from *origin* (default: start) to the end.

        Returns ``[]`` when *origin* already is the end or the end is unreachable.
        """
        source = Coordinate(*origin) if origin is not None else grid.start.coord
        if source == grid.end.coord:
            return []

        paths = ShortestPaths.search(Solver.graph(grid), source)
        if not paths.reaches(grid.end.coord):
            return []
        return paths.first_path(grid.end.coord).moves

    @staticmethod
    def hint(grid: Grid, origin: tuple[int, int] | None = None) -> Direction | None:
        """Return the first move of a shortest solution, or ``None``."""
        moves = Solver.solve(grid, origin)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(grid: Grid) -> bool:
        paths = ShortestPaths.search(Solver.graph(grid), grid.start.coord)
        return paths.reaches(grid.end.coord)

    @staticmethod
    def is_unique(grid: Grid) -> bool:
        """True if ``grid.moves_for_win`` is the only shortest solution."""
        paths = ShortestPaths.search(Solver.graph(grid), grid.start.coord)
        if not paths.reaches(grid.end.coord):
            return False
        return find_alternate(paths, grid.end.coord, grid.moves_for_win) is None
