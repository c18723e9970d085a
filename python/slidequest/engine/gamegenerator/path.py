"""Guaranteed path: rasterise anchors, derive moves, place mandatory stoppers."""

from __future__ import annotations

from collections.abc import Sequence

from slidequest.engine.gamegenerator.anchors import build_anchors
from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.errors import AttemptInvalid
from slidequest.engine.gamegenerator.rules import move_window
from slidequest.engine.simulator import blocked_by, simulate
from slidequest.models.grid import CellKind, Coordinate, Direction


def rasterize(anchors: Sequence[Coordinate]) -> list[Coordinate]:
    """Expand the anchor polyline into consecutive unit steps."""
    cells = [anchors[0]]
    for a, b in zip(anchors, anchors[1:]):
        direction = Direction.between(a, b)
        cur = a
        while cur != b:
            cur = cur.step(direction)
            cells.append(cur)
    return cells


def derive_moves(cells: Sequence[Coordinate]) -> list[Direction]:
    """Run-length encode unit steps into one move per straight run."""
    moves: list[Direction] = []
    for a, b in zip(cells, cells[1:]):
        direction = Direction.between(a, b)
        if not moves or moves[-1] != direction:
            moves.append(direction)
    return moves


def mandatory_blockers(
    context: GenerationContext, anchors: Sequence[Coordinate]
) -> list[Coordinate]:
    """Cells just past each landing anchor; they make every slide stop on time."""
    blockers: dict[Coordinate, None] = {}
    for a, b in zip(anchors, anchors[1:]):
        beyond = b.step(Direction.between(a, b))
        if context.in_grid(beyond) and beyond not in (context.start, context.end):
            blockers[beyond] = None
    return list(blockers)


def entry_stopper(
    context: GenerationContext, moves: Sequence[Direction]
) -> Coordinate | None:
    """Cell that stops the slide entering from the border ring on Start.

    Only needed when the first move turns away from the inward direction.
    """
    inward = context.start_side.inward
    if moves and moves[0] == inward:
        return None
    stopper = context.start.step(inward)
    if not context.in_grid(stopper) or stopper == context.end:
        return None
    return stopper


def build_guaranteed_path(context: GenerationContext) -> None:
    """Fill ``context.moves``, ``context.path`` and ``context.blockers``.

    Raises :class:`AttemptInvalid` when the drawn anchors do not yield a
    path inside the move window that replays onto End.
    """
    low, high = move_window(context.width, context.height)
    target_moves = context.rng.randint(low, high)

    anchors = build_anchors(context, target_moves)
    if anchors is None or len(anchors) < 2:
        raise AttemptInvalid("no usable anchor polyline")

    blockers = mandatory_blockers(context, anchors)
    moves = derive_moves(rasterize(anchors))
    if not low <= len(moves) <= high:
        raise AttemptInvalid(f"{len(moves)} moves outside window [{low}, {high}]")

    stopper = entry_stopper(context, moves)
    if stopper is not None and stopper not in blockers:
        blockers.append(stopper)

    result = simulate(
        moves, blocked_by(context.width, context.height, set(blockers)), context.start, context.end
    )
    if not result.reached:
        raise AttemptInvalid("guaranteed path does not replay onto End")

    context.moves = moves
    context.path = result.trace
    context.blockers = blockers


def paint_path(context: GenerationContext) -> None:
    """Mark path, stoppers, Start and End on the working grid."""
    for coord in context.path:
        context.paint(coord, CellKind.PATH)
    for coord in context.blockers:
        if context.kind(coord) == CellKind.EMPTY:
            context.paint(coord, CellKind.OBSTACLE)
    context.paint(context.start, CellKind.START)
    context.paint(context.end, CellKind.END)

    stoppers = set(context.blockers)
    for coord in context.blockers:
        if any(n in stoppers for n in coord.neighbors()):
            raise AttemptInvalid(f"stopper {tuple(coord)} touches another stopper")
