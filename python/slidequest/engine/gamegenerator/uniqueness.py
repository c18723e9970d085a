"""Make the guaranteed move sequence the only shortest solution.

Each round rebuilds the sliding-transition graph of the working grid,
searches it for another solving sequence no longer than the primary one,
and drops a single isolated obstacle on that alternate's slide legs. The
round repeats until no alternate is left.
"""

from __future__ import annotations

import logging

from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.errors import AttemptInvalid, GraphInconsistency
from slidequest.engine.gamegenerator.obstacles import forbidden_cells
from slidequest.engine.gamesolver.graph import (
    ShortestPaths,
    SlidePath,
    TransitionGraph,
    find_alternate,
)
from slidequest.engine.simulator import simulate
from slidequest.models.grid import CellKind, Coordinate, Direction, Grid

logger = logging.getLogger(__name__)


def primary_solves(context: GenerationContext) -> bool:
    """Replay the primary moves against every obstacle on the working grid."""
    return simulate(context.moves, context.is_blocked, context.start, context.end).reached


def search_alternate(context: GenerationContext) -> SlidePath | None:
    graph = TransitionGraph.build(context.width, context.height, context.is_blocked)
    paths = ShortestPaths.search(graph, context.start)
    if not paths.reaches(context.end):
        raise GraphInconsistency(f"end {tuple(context.end)} unreachable from {tuple(context.start)}")
    return find_alternate(paths, context.end, context.moves)


def corridor(context: GenerationContext, alternate: SlidePath) -> list[Coordinate]:
    """Cells crossed by the alternate's slides, landing cells excluded."""
    cells: list[Coordinate] = []
    for a, b in zip(alternate.stops, alternate.stops[1:]):
        direction = Direction.between(a, b)
        cur = a
        while True:
            nxt = cur.step(direction)
            if nxt == b or context.is_blocked(nxt):
                break
            cells.append(nxt)
            cur = nxt
    return cells


def enforce_uniqueness(context: GenerationContext) -> int:
    """Block alternates until the primary sequence is unique.

    Returns the number of obstacles added. Raises :class:`AttemptInvalid`
    when an alternate cannot be blocked without breaking the primary
    sequence, or when the round budget (the grid area) runs out.
    """
    if not primary_solves(context):
        raise AttemptInvalid("primary moves no longer solve the grid")

    forbidden = forbidden_cells(context)
    added = 0

    for _ in range(context.width * context.height):
        alternate = search_alternate(context)
        if alternate is None:
            return added

        candidates = corridor(context, alternate)
        context.rng.shuffle(candidates)

        for coord in candidates:
            if not context.can_place_isolated(coord, forbidden):
                continue
            context.paint(coord, CellKind.OBSTACLE)
            if primary_solves(context):
                forbidden.add(coord)
                context.enforced.append(coord)
                added += 1
                logger.debug(
                    "blocked %d-move alternate %s at %s",
                    len(alternate.moves), "/".join(alternate.moves), tuple(coord),
                )
                break
            context.paint(coord, CellKind.EMPTY)
        else:
            raise AttemptInvalid(
                f"no obstacle blocks alternate {'/'.join(alternate.moves)}"
            )

    raise AttemptInvalid("uniqueness round budget exhausted")


def verify_unique(grid: Grid) -> None:
    """Check the finished grid: its winning moves must be the only shortest solution."""
    graph = TransitionGraph.build(grid.width, grid.height, grid.is_blocked)
    paths = ShortestPaths.search(graph, grid.start.coord)
    if not paths.reaches(grid.end.coord):
        raise GraphInconsistency("end unreachable on the bordered grid")

    alternate = find_alternate(paths, grid.end.coord, grid.moves_for_win)
    if alternate is not None:
        raise AttemptInvalid(
            f"bordered grid also solved by {len(alternate.moves)}-move "
            f"{'/'.join(alternate.moves)}"
        )
