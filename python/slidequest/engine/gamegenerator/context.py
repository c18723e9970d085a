"""Working state of a single ``generate`` call."""

from __future__ import annotations

import random
from collections.abc import Container
from dataclasses import dataclass, field

from slidequest.models.grid import CellKind, Coordinate, Direction, Side


@dataclass
class GenerationContext:
    """Everything one generation call mutates.

    The RNG stream lives for the whole call; :meth:`reset` wipes the rest
    before each attempt. ``cells`` is row-major like :class:`Grid`.
    ``blockers`` are the stoppers of the guaranteed path and ``enforced``
    the obstacles the uniqueness step added on top of the random ones.
    """

    width: int
    height: int
    seed: int
    rng: random.Random
    cells: list[list[CellKind]] = field(default_factory=list)
    start: Coordinate = Coordinate(0, 0)
    end: Coordinate = Coordinate(0, 0)
    start_side: Side = Side.TOP
    end_side: Side = Side.BOTTOM
    moves: list[Direction] = field(default_factory=list)
    path: list[Coordinate] = field(default_factory=list)
    blockers: list[Coordinate] = field(default_factory=list)
    enforced: list[Coordinate] = field(default_factory=list)
    obstacle_count: int = 0

    @classmethod
    def create(cls, width: int, height: int, seed: int) -> GenerationContext:
        context = cls(width=width, height=height, seed=seed, rng=random.Random(seed))
        context.reset()
        return context

    def reset(self) -> None:
        self.cells = [[CellKind.EMPTY] * self.width for _ in range(self.height)]
        self.moves = []
        self.path = []
        self.blockers = []
        self.enforced = []
        self.obstacle_count = 0

    # -- geometry -------------------------------------------------------------

    def in_grid(self, coord: tuple[int, int]) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def on_edge(self, coord: tuple[int, int]) -> bool:
        x, y = coord
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    # -- cells ----------------------------------------------------------------

    def kind(self, coord: tuple[int, int]) -> CellKind:
        x, y = coord
        return self.cells[y][x]

    def paint(self, coord: tuple[int, int], kind: CellKind) -> None:
        x, y = coord
        before = self.cells[y][x]
        if before == CellKind.OBSTACLE:
            self.obstacle_count -= 1
        if kind == CellKind.OBSTACLE:
            self.obstacle_count += 1
        self.cells[y][x] = kind

    def is_obstacle(self, coord: tuple[int, int]) -> bool:
        return self.in_grid(coord) and self.kind(coord) == CellKind.OBSTACLE

    def is_blocked(self, coord: Coordinate) -> bool:
        """Slide rule on the working grid: off-grid or obstacle."""
        return not self.in_grid(coord) or self.kind(coord) == CellKind.OBSTACLE

    def can_place_isolated(
        self, coord: Coordinate, forbidden: Container[tuple[int, int]] = ()
    ) -> bool:
        """True if an obstacle at *coord* would touch no other obstacle.

        The candidate must be empty, strictly interior and not forbidden.
        """
        if not self.in_grid(coord) or self.on_edge(coord):
            return False
        if coord in forbidden or self.kind(coord) != CellKind.EMPTY:
            return False
        return not any(self.is_obstacle(n) for n in coord.neighbors())
