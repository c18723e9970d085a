"""Sliding-transition graph and shortest-path search over it.

Nodes are free cells. An edge ``u --d--> v`` means that sliding from ``u``
in direction ``d`` stops on ``v``. Moves that cannot leave ``u`` are not
edges.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import NamedTuple

from slidequest.engine.simulator import BlockedPredicate
from slidequest.models.grid import Coordinate, Direction

Edge = tuple[Coordinate, Direction]


class SlidePath(NamedTuple):
    moves: list[Direction]
    stops: list[Coordinate]


class TransitionGraph:
    """Adjacency list of slide transitions, keyed by coordinate."""

    def __init__(self, width: int, height: int, edges: dict[Coordinate, list[Edge]]) -> None:
        self.width = width
        self.height = height
        self._edges = edges

    @classmethod
    def build(cls, width: int, height: int, is_blocked: BlockedPredicate) -> TransitionGraph:
        free = {
            Coordinate(x, y)
            for y in range(height)
            for x in range(width)
            if not is_blocked(Coordinate(x, y))
        }

        # One sweep per direction: walking against the direction of travel,
        # a cell lands where its successor lands, or on itself at a wall.
        landings: dict[Direction, dict[Coordinate, Coordinate]] = {}
        for direction in Direction:
            dx, dy = direction.vector
            xs = range(width) if dx <= 0 else range(width - 1, -1, -1)
            ys = range(height) if dy <= 0 else range(height - 1, -1, -1)
            landing: dict[Coordinate, Coordinate] = {}
            for y in ys:
                for x in xs:
                    pos = Coordinate(x, y)
                    if pos not in free:
                        continue
                    nxt = Coordinate(x + dx, y + dy)
                    landing[pos] = landing[nxt] if nxt in free else pos
            landings[direction] = landing

        edges: dict[Coordinate, list[Edge]] = {}
        for y in range(height):
            for x in range(width):
                pos = Coordinate(x, y)
                if pos not in free:
                    continue
                edges[pos] = [
                    (landings[d][pos], d) for d in Direction if landings[d][pos] != pos
                ]
        return cls(width, height, edges)

    def __contains__(self, node: object) -> bool:
        return node in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def edges(self, node: tuple[int, int]) -> list[Edge]:
        return self._edges.get(Coordinate(*node), [])


class ShortestPaths:
    """Breadth-first search result keeping *every* shortest parent edge."""

    def __init__(
        self,
        source: Coordinate,
        dist: dict[Coordinate, int],
        parents: dict[Coordinate, list[Edge]],
    ) -> None:
        self.source = source
        self.dist = dist
        self.parents = parents

    @classmethod
    def search(cls, graph: TransitionGraph, source: tuple[int, int]) -> ShortestPaths:
        origin = Coordinate(*source)
        dist = {origin: 0}
        parents: dict[Coordinate, list[Edge]] = {origin: []}
        queue = deque([origin])

        while queue:
            u = queue.popleft()
            du = dist[u]
            for v, direction in graph.edges(u):
                if v not in dist:
                    dist[v] = du + 1
                    parents[v] = [(u, direction)]
                    queue.append(v)
                elif dist[v] == du + 1 and (u, direction) not in parents[v]:
                    parents[v].append((u, direction))

        return cls(origin, dist, parents)

    def reaches(self, node: tuple[int, int]) -> bool:
        return Coordinate(*node) in self.dist

    def distance(self, node: tuple[int, int]) -> int | None:
        return self.dist.get(Coordinate(*node))

    def first_path(self, target: tuple[int, int]) -> SlidePath:
        """Follow the first recorded parent of each node back to the source."""
        cur = Coordinate(*target)
        if cur not in self.dist:
            raise ValueError(f"{cur} is not reachable from {self.source}")

        moves: list[Direction] = []
        stops = [cur]
        while cur != self.source:
            cur, direction = self.parents[cur][0]
            moves.append(direction)
            stops.append(cur)
        moves.reverse()
        stops.reverse()
        return SlidePath(moves, stops)


def find_alternate(
    paths: ShortestPaths, target: tuple[int, int], primary: Sequence[Direction]
) -> SlidePath | None:
    """Return a solving sequence other than *primary* that is no longer than it.

    ``None`` means *primary* is the one and only shortest solution.
    """
    primary = list(primary)
    first = paths.first_path(target)
    if first.moves != primary:
        return first

    # Depth-first over the parent DAG. ``on_primary`` records whether the
    # suffix collected so far still matches the primary sequence; once it
    # does not, any way back to the source is an alternate.
    goal = Coordinate(*target)
    total = len(primary)
    stack: list[tuple[Coordinate, list[Direction], list[Coordinate], bool]] = [
        (goal, [], [goal], True)
    ]
    seen: set[tuple[Coordinate, int, bool]] = {(goal, 0, True)}

    while stack:
        node, moves, stops, on_primary = stack.pop()
        if node == paths.source:
            if not on_primary:
                return SlidePath(moves[::-1], stops[::-1])
            continue

        depth = len(moves)
        for prev, direction in paths.parents[node]:
            follows = on_primary and direction == primary[total - depth - 1]
            key = (prev, depth + 1, follows)
            if key in seen:
                continue
            seen.add(key)
            stack.append((prev, moves + [direction], stops + [prev], follows))

    return None
