"""Grid model for the sliding-block puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, NamedTuple


class Coordinate(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction, distance: int = 1) -> Coordinate:
        return Coordinate(
            self.x + direction.dx * distance, self.y + direction.dy * distance
        )

    def manhattan(self, other: tuple[int, int]) -> int:
        return abs(self.x - other[0]) + abs(self.y - other[1])

    def neighbors(self) -> list[Coordinate]:
        """The four orthogonal neighbours, bounds not checked."""
        return [self.step(d) for d in Direction]


class Direction(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]

    @property
    def dx(self) -> int:
        return _VECTORS[self][0]

    @property
    def dy(self) -> int:
        return _VECTORS[self][1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def between(cls, a: tuple[int, int], b: tuple[int, int]) -> Direction:
        """Direction of travel from *a* towards *b* (must share a row or column)."""
        dx = (b[0] > a[0]) - (b[0] < a[0])
        dy = (b[1] > a[1]) - (b[1] < a[1])
        if dx and dy or not (dx or dy):
            raise ValueError(f"{a} and {b} are not axis-aligned and distinct")
        return _BY_VECTOR[(dx, dy)]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.TOP: (0, -1),
    Direction.BOTTOM: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
_BY_VECTOR = {v: d for d, v in _VECTORS.items()}
_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Side(StrEnum):
    """A border of the grid. Declaration order matches the random draw."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def opposite(self) -> Side:
        sides = list(Side)
        return sides[(sides.index(self) + 2) % 4]

    @property
    def inward(self) -> Direction:
        """Direction pointing from this border into the grid."""
        return _INWARD[self]

    @property
    def outward(self) -> Direction:
        return _INWARD[self].opposite

    @property
    def is_horizontal(self) -> bool:
        """True for the top and bottom borders."""
        return self in (Side.TOP, Side.BOTTOM)


_INWARD = {
    Side.TOP: Direction.BOTTOM,
    Side.RIGHT: Direction.LEFT,
    Side.BOTTOM: Direction.TOP,
    Side.LEFT: Direction.RIGHT,
}


class CellKind(StrEnum):
    EMPTY = "empty"
    OBSTACLE = "obstacle"
    PATH = "path"
    START = "start"
    END = "end"


_SYMBOLS: dict[CellKind, str] = {
    CellKind.EMPTY: ".",
    CellKind.OBSTACLE: "#",
    CellKind.PATH: "+",
    CellKind.START: "S",
    CellKind.END: "E",
}
_KINDS_BY_SYMBOL = {s: k for k, s in _SYMBOLS.items()}


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    kind: CellKind = CellKind.EMPTY

    @property
    def coord(self) -> Coordinate:
        return Coordinate(self.x, self.y)


@dataclass(frozen=True)
class Grid:
    """A finished puzzle.

    ``cells`` is row-major (``cells[y][x]``) and includes the obstacle ring
    that frames the generated interior. ``start`` and ``end`` sit on that
    ring and ``moves_for_win`` slides the player from one to the other.
    """

    width: int
    height: int
    seed: int
    cells: tuple[tuple[Cell, ...], ...]
    start: Cell
    end: Cell
    moves_for_win: tuple[Direction, ...]

    # -- queries --------------------------------------------------------------

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, coord: tuple[int, int]) -> bool:
        """Slide rule: off-grid and obstacle cells stop the player."""
        x, y = coord
        if not self.in_bounds(x, y):
            return True
        return self.cells[y][x].kind == CellKind.OBSTACLE

    def is_ring(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def cells_of(self, kind: CellKind) -> list[Cell]:
        return [c for row in self.cells for c in row if c.kind == kind]

    def obstacle_count(self, interior_only: bool = False) -> int:
        return sum(
            1
            for c in self.cells_of(CellKind.OBSTACLE)
            if not (interior_only and self.is_ring(c.x, c.y))
        )

    def rows(self) -> list[str]:
        """Plain text form, one string per row (``#`` obstacle, ``+`` path)."""
        return ["".join(_SYMBOLS[c.kind] for c in row) for row in self.cells]

    # -- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "start": [self.start.x, self.start.y],
            "end": [self.end.x, self.end.y],
            "moves": [m.value for m in self.moves_for_win],
            "rows": self.rows(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Grid:
        """Rebuild a grid from :meth:`to_dict` output."""
        try:
            width = int(data["width"])
            height = int(data["height"])
            rows = data["rows"]
            if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
                raise TypeError("rows must be a list of strings")
            moves = tuple(Direction(m) for m in data["moves"])
            seed = int(data["seed"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed grid data: {exc}") from exc

        if len(rows) != height or any(len(r) != width for r in rows):
            raise ValueError(
                f"Expected {height} rows of {width} cells, got "
                f"{[len(r) for r in rows]}."
            )

        cells: list[tuple[Cell, ...]] = []
        for y, row in enumerate(rows):
            try:
                cells.append(
                    tuple(Cell(x, y, _KINDS_BY_SYMBOL[s]) for x, s in enumerate(row))
                )
            except KeyError as exc:
                raise ValueError(f"Unknown cell symbol {exc} in row {y}") from exc

        starts = [c for row in cells for c in row if c.kind == CellKind.START]
        ends = [c for row in cells for c in row if c.kind == CellKind.END]
        if len(starts) != 1 or len(ends) != 1:
            raise ValueError("A grid needs exactly one start and one end cell.")

        return cls(
            width=width,
            height=height,
            seed=seed,
            cells=tuple(cells),
            start=starts[0],
            end=ends[0],
            moves_for_win=moves,
        )
