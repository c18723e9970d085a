"""Start/End placement and zig-zag anchor construction."""

from __future__ import annotations

from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.rules import ANCHOR_RESAMPLE_TRIES, END_RESAMPLE_TRIES
from slidequest.models.grid import Coordinate, Direction, Side


def random_cell_on_side(context: GenerationContext, side: Side) -> Coordinate:
    rng = context.rng
    if side == Side.TOP:
        return Coordinate(rng.randrange(context.width), 0)
    if side == Side.RIGHT:
        return Coordinate(context.width - 1, rng.randrange(context.height))
    if side == Side.BOTTOM:
        return Coordinate(rng.randrange(context.width), context.height - 1)
    return Coordinate(0, rng.randrange(context.height))


def pick_start_and_end(context: GenerationContext) -> None:
    """Place Start on a random border and End on the opposite one.

    End is resampled so that it does not share Start's column (top/bottom
    pairing) or row (left/right pairing); if every draw collides it is
    nudged by one cell, wrapping around.
    """
    start_side = list(Side)[context.rng.randrange(4)]
    end_side = start_side.opposite
    start = random_cell_on_side(context, start_side)

    def aligned(cell: Coordinate) -> bool:
        if start_side.is_horizontal:
            return cell.x == start.x
        return cell.y == start.y

    end = None
    for _ in range(END_RESAMPLE_TRIES):
        candidate = random_cell_on_side(context, end_side)
        if not aligned(candidate):
            end = candidate
            break

    if end is None:
        forced = random_cell_on_side(context, end_side)
        if start_side.is_horizontal:
            x = (forced.x + 1) % context.width
            if x == start.x:
                x = (x + 1) % context.width
            end = Coordinate(x, forced.y)
        else:
            y = (forced.y + 1) % context.height
            if y == start.y:
                y = (y + 1) % context.height
            end = Coordinate(forced.x, y)

    context.start, context.end = start, end
    context.start_side, context.end_side = start_side, end_side


def _resample(context: GenerationContext, upper: int, avoid: tuple[int, int]) -> int:
    value = context.rng.randint(1, upper)
    for _ in range(ANCHOR_RESAMPLE_TRIES):
        if value not in avoid:
            break
        value = context.rng.randint(1, upper)
    return value


def build_anchors(context: GenerationContext, target_moves: int) -> list[Coordinate] | None:
    """Build the waypoints of the guaranteed path, Start first and End last.

    Segments alternate between horizontal and vertical, starting
    horizontally when Start sits on the top or bottom border. Returns
    ``None`` when the polyline is unusable.
    """
    if context.width < 3 or context.height < 3:
        return None

    start, end = context.start, context.end
    anchors = [start]
    horizontal = context.start_side.is_horizontal
    current = start

    for _ in range(target_moves - 1):
        if horizontal:
            col = _resample(context, context.width - 2, (current.x, end.x))
            current = Coordinate(col, current.y)
        else:
            row = _resample(context, context.height - 2, (current.y, end.y))
            current = Coordinate(current.x, row)
        anchors.append(current)
        horizontal = not horizontal

    last = anchors[-1]
    if not (last.x == end.x or last.y == end.y):
        # Move the last anchor along its own segment so the closing
        # segment runs straight into End.
        if horizontal:
            anchors[-1] = Coordinate(last.x, end.y)
        else:
            anchors[-1] = Coordinate(end.x, last.y)
    anchors.append(end)

    for a, b in zip(anchors, anchors[1:]):
        if a == b or not (a.x == b.x or a.y == b.y):
            return None
        beyond = b.step(Direction.between(a, b))
        if not context.in_grid(beyond) and b != end:
            return None
        if beyond in (start, end):
            return None

    return anchors
