"""Random obstacle placement: edge decoys first, then sparse filler."""

from __future__ import annotations

import logging

from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.rules import (
    PATH_AVOIDANCE,
    decoy_target,
    filler_target,
    obstacle_cap,
)
from slidequest.models.grid import CellKind, Coordinate

logger = logging.getLogger(__name__)


def forbidden_cells(context: GenerationContext) -> set[Coordinate]:
    """Cells that must never become a random obstacle."""
    return {*context.path, *context.blockers, context.start, context.end}


def place_obstacles(context: GenerationContext) -> int:
    """Place decoys and filler around the painted path.

    Every new obstacle is isolated (no orthogonal obstacle neighbour) and
    strictly interior. Placement stops once the grid holds the size
    dependent obstacle cap. Returns the number of obstacles added.
    """
    forbidden = forbidden_cells(context)
    cap = obstacle_cap(context.width, context.height)

    decoys = _place_decoys(context, forbidden, cap)
    filler = _place_filler(context, forbidden, cap)
    logger.debug(
        "placed %d decoys and %d filler obstacles (%d/%d)",
        decoys, filler, context.obstacle_count, cap,
    )
    return decoys + filler


def _place_decoys(context: GenerationContext, forbidden: set[Coordinate], cap: int) -> int:
    """Obstacles on the rows and columns next to the border.

    They give slides along the edges somewhere to stop, away from the path.
    """
    rng = context.rng
    w, h = context.width, context.height
    path = set(context.path)

    target = decoy_target(w, h)
    placed = 0
    guard = w * h

    while placed < target and guard > 0:
        guard -= 1
        if context.obstacle_count >= cap:
            break

        if rng.random() < 0.5:
            x = rng.randrange(1, w - 1)
            y = 1 if rng.random() < 0.5 else h - 2
        else:
            x = 1 if rng.random() < 0.5 else w - 2
            y = rng.randrange(1, h - 1)
        coord = Coordinate(x, y)

        if coord in forbidden:
            continue
        if coord in path or any(n in path for n in coord.neighbors()):
            continue
        if coord.manhattan(context.start) <= 1 or coord.manhattan(context.end) <= 1:
            continue
        if not context.can_place_isolated(coord, forbidden):
            continue

        context.paint(coord, CellKind.OBSTACLE)
        forbidden.add(coord)
        placed += 1

    return placed


def _place_filler(context: GenerationContext, forbidden: set[Coordinate], cap: int) -> int:
    rng = context.rng
    w, h = context.width, context.height
    path = set(context.path)

    to_place = min(filler_target(w, h), max(0, cap - context.obstacle_count))
    placed = 0
    guard = w * h * 5

    while placed < to_place and guard > 0:
        guard -= 1
        if context.obstacle_count >= cap:
            break

        coord = Coordinate(rng.randrange(w), rng.randrange(h))
        if coord in forbidden:
            continue
        # Soft avoidance: most, not all, candidates touching the path are skipped.
        if any(n in path for n in coord.neighbors()) and rng.random() < PATH_AVOIDANCE:
            continue
        if not context.can_place_isolated(coord, forbidden):
            continue

        context.paint(coord, CellKind.OBSTACLE)
        placed += 1

    return placed
