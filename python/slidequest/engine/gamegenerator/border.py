"""Frame the interior with an obstacle ring and move Start/End onto it."""

from __future__ import annotations

from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.errors import AttemptInvalid
from slidequest.engine.simulator import simulate
from slidequest.models.grid import Cell, CellKind, Coordinate, Direction, Grid, Side


def ring_coordinate(context: GenerationContext, coord: Coordinate, side: Side) -> Coordinate:
    """Ring cell facing *coord* on *side*, in bordered coordinates."""
    if side == Side.TOP:
        return Coordinate(coord.x + 1, 0)
    if side == Side.BOTTOM:
        return Coordinate(coord.x + 1, context.height + 1)
    if side == Side.LEFT:
        return Coordinate(0, coord.y + 1)
    return Coordinate(context.width + 1, coord.y + 1)


def bordered_moves(context: GenerationContext) -> list[Direction]:
    """Primary moves with the step in from Start and out to End added when needed."""
    moves = list(context.moves)
    inward = context.start_side.inward
    outward = context.end_side.outward
    if not moves or moves[0] != inward:
        moves.insert(0, inward)
    if moves[-1] != outward:
        moves.append(outward)
    return moves


def wrap_with_border(context: GenerationContext) -> Grid:
    """Build the final :class:`Grid`.

    Raises :class:`AttemptInvalid` if the adjusted move sequence does not
    land exactly on the ring End.
    """
    out_w, out_h = context.width + 2, context.height + 2
    kinds = [[CellKind.OBSTACLE] * out_w for _ in range(out_h)]
    for y, row in enumerate(context.cells):
        kinds[y + 1][1 : context.width + 1] = row

    for coord in (context.start, context.end):
        kinds[coord.y + 1][coord.x + 1] = CellKind.PATH

    start = ring_coordinate(context, context.start, context.start_side)
    end = ring_coordinate(context, context.end, context.end_side)
    kinds[start.y][start.x] = CellKind.START
    kinds[end.y][end.x] = CellKind.END

    def is_blocked(coord: Coordinate) -> bool:
        x, y = coord
        if not (0 <= x < out_w and 0 <= y < out_h):
            return True
        return kinds[y][x] == CellKind.OBSTACLE

    moves = bordered_moves(context)
    result = simulate(moves, is_blocked, start, end)
    if not result.reached:
        raise AttemptInvalid("bordered moves do not land on the ring End")

    # Only cells the final replay actually crosses stay marked as path.
    for row in kinds:
        for x, kind in enumerate(row):
            if kind == CellKind.PATH:
                row[x] = CellKind.EMPTY
    for coord in result.trace:
        if coord not in (start, end) and kinds[coord.y][coord.x] == CellKind.EMPTY:
            kinds[coord.y][coord.x] = CellKind.PATH

    cells = tuple(
        tuple(Cell(x, y, kind) for x, kind in enumerate(row)) for y, row in enumerate(kinds)
    )
    return Grid(
        width=out_w,
        height=out_h,
        seed=context.seed,
        cells=cells,
        start=cells[start.y][start.x],
        end=cells[end.y][end.x],
        moves_for_win=tuple(moves),
    )
