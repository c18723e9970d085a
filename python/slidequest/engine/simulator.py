"""Slide-until-blocked simulation shared by the generator, solver and gameplay."""

from __future__ import annotations

from collections.abc import Callable, Container, Sequence
from typing import NamedTuple

from slidequest.models.grid import Coordinate, Direction

BlockedPredicate = Callable[[Coordinate], bool]


class Simulation(NamedTuple):
    """Outcome of replaying a move sequence.

    ``trace`` lists every visited coordinate (start included), ``stops``
    only the start and the landing cell of each completed move.
    """

    reached: bool
    trace: list[Coordinate]
    stops: list[Coordinate]

    @property
    def final(self) -> Coordinate:
        return self.stops[-1]


def blocked_by(
    width: int, height: int, obstacles: Container[tuple[int, int]]
) -> BlockedPredicate:
    """Predicate treating off-grid coordinates and *obstacles* as blocked."""

    def is_blocked(coord: Coordinate) -> bool:
        x, y = coord
        if not (0 <= x < width and 0 <= y < height):
            return True
        return coord in obstacles

    return is_blocked


def slide(
    origin: tuple[int, int], direction: Direction, is_blocked: BlockedPredicate
) -> list[Coordinate]:
    """Cells entered while sliding from *origin*; empty if the first step is blocked."""
    visited: list[Coordinate] = []
    pos = Coordinate(*origin)
    while True:
        nxt = pos.step(direction)
        if is_blocked(nxt):
            return visited
        visited.append(nxt)
        pos = nxt


def simulate(
    moves: Sequence[Direction],
    is_blocked: BlockedPredicate,
    start: tuple[int, int],
    target: tuple[int, int] | None = None,
) -> Simulation:
    """Replay *moves* from *start*.

    A move whose very first step is blocked fails the whole simulation. An
    empty move list never reaches anything. Without a *target*, ``reached``
    only reports that every move could be played.
    """
    pos = Coordinate(*start)
    trace = [pos]
    stops = [pos]

    if not moves:
        return Simulation(False, trace, stops)

    for move in moves:
        visited = slide(pos, move, is_blocked)
        if not visited:
            return Simulation(False, trace, stops)
        trace.extend(visited)
        pos = visited[-1]
        stops.append(pos)

    reached = target is None or pos == tuple(target)
    return Simulation(reached, trace, stops)
