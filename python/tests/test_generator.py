"""End-to-end properties of generated grids.

Every generated grid is checked against the same contract: one Start and
one End on the obstacle ring, an isolated interior, a move count inside
the size bucket's window, and a solution that is the only shortest one.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from slidequest import generate
from slidequest.engine.gamegenerator import GenerationExhausted, GridGenerator
from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.rules import move_window, obstacle_cap
from slidequest.engine.gamesolver import Solver
from slidequest.engine.simulator import simulate, slide
from slidequest.models.grid import CellKind, Coordinate, Direction, Grid

SNAPSHOT = Path(__file__).resolve().parent / "snapshots" / "grid_10x10_seed42.json"

CASES = [
    (8, 8, 3),
    (10, 10, 42),
    (12, 9, 5),
    (16, 16, 11),
    (20, 14, 2024),
]


def _ids(case: tuple[int, int, int]) -> str:
    width, height, seed = case
    return f"{width}x{height}-seed{seed}"


# -- helpers ------------------------------------------------------------------


def _slide_lengths(grid: Grid) -> list[int]:
    """Number of cells each winning move travels."""
    lengths = []
    position = grid.start.coord
    for direction in grid.moves_for_win:
        visited = slide(position, direction, grid.is_blocked)
        lengths.append(len(visited))
        position = visited[-1] if visited else position
    return lengths


def _interior_move_count(grid: Grid) -> int:
    """Winning moves minus the single-cell steps on and off the ring."""
    lengths = _slide_lengths(grid)
    count = len(lengths)
    if lengths[0] == 1:
        count -= 1
    if lengths[-1] == 1:
        count -= 1
    return count


def _generate_traced(width: int, height: int, seed: int) -> tuple[Grid, GenerationContext]:
    """Generate like :meth:`GridGenerator.generate` and keep the winning context."""
    context = GenerationContext.create(width, height, seed)
    return GridGenerator.run(context), context


def _assert_density(grid: Grid, context: GenerationContext) -> None:
    """Random obstacles stay under the cap; stoppers and enforced blockers do not count."""

    def bordered(coords: list[Coordinate]) -> set[Coordinate]:
        return {Coordinate(x + 1, y + 1) for x, y in coords}

    interior = {
        cell.coord
        for cell in grid.cells_of(CellKind.OBSTACLE)
        if not grid.is_ring(cell.x, cell.y)
    }
    stoppers = bordered(context.blockers)
    enforced = bordered(context.enforced)
    assert stoppers <= interior
    assert enforced <= interior
    assert not stoppers & enforced
    assert len(interior) == context.obstacle_count

    cap = obstacle_cap(context.width, context.height)
    placed = interior - stoppers - enforced
    assert len(placed) <= cap
    assert len(stoppers) + len(placed) <= max(cap, len(stoppers))


def _assert_valid(
    grid: Grid, width: int, height: int, context: GenerationContext | None = None
) -> None:
    assert (grid.width, grid.height) == (width + 2, height + 2)

    # ---- start and end live on the ring, everything else there is wall ------
    assert len(grid.cells_of(CellKind.START)) == 1
    assert len(grid.cells_of(CellKind.END)) == 1
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.is_ring(x, y) and (x, y) not in (grid.start.coord, grid.end.coord):
                assert grid.cell(x, y).kind == CellKind.OBSTACLE, (x, y)
    assert grid.is_ring(*grid.start.coord)
    assert grid.is_ring(*grid.end.coord)

    # ---- the stored solution replays onto the end ---------------------------
    result = simulate(grid.moves_for_win, grid.is_blocked, grid.start.coord, grid.end.coord)
    assert result.reached
    assert all(isinstance(m, Direction) for m in grid.moves_for_win)

    # ---- interior solution length stays inside the window -------------------
    low, high = move_window(width, height)
    assert low <= _interior_move_count(grid) <= high

    # ---- no two interior obstacles touch ------------------------------------
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            if grid.cell(x, y).kind != CellKind.OBSTACLE:
                continue
            for nx, ny in ((x + 1, y), (x, y + 1)):
                if not grid.is_ring(nx, ny):
                    assert grid.cell(nx, ny).kind != CellKind.OBSTACLE, ((x, y), (nx, ny))

    # ---- and the solution is the only shortest one --------------------------
    assert len(Solver.solve(grid)) == len(grid.moves_for_win)
    assert Solver.is_unique(grid)

    # ---- decoys and filler respect the density cap --------------------------
    if context is not None:
        _assert_density(grid, context)


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("case", CASES, ids=_ids)
def test_generated_grid_is_valid(case: tuple[int, int, int]) -> None:
    width, height, seed = case
    grid, context = _generate_traced(width, height, seed)
    assert grid == GridGenerator.generate(width, height, seed)
    _assert_valid(grid, width, height, context)


@pytest.mark.parametrize("seed", range(25))
def test_small_grids_keep_random_obstacles_under_cap(seed: int) -> None:
    grid, context = _generate_traced(8, 8, seed)
    _assert_density(grid, context)


def test_fixture_grid_is_valid(grid_10x10: Grid) -> None:
    _assert_valid(grid_10x10, 10, 10)


@pytest.mark.parametrize("case", CASES[:3], ids=_ids)
def test_same_seed_same_grid(case: tuple[int, int, int]) -> None:
    width, height, seed = case
    first = generate(width, height, seed)
    second = generate(width, height, seed)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_seed_is_recorded() -> None:
    assert generate(9, 9, 77).seed == 77


def test_random_seed_still_valid() -> None:
    grid = generate(10, 10)
    _assert_valid(grid, 10, 10)
    assert generate(10, 10, grid.seed) == grid


def test_path_cells_follow_the_solution(grid_10x10: Grid) -> None:
    trace = simulate(
        grid_10x10.moves_for_win, grid_10x10.is_blocked, grid_10x10.start.coord
    ).trace
    marked = {cell.coord for cell in grid_10x10.cells_of(CellKind.PATH)}
    assert marked == set(trace[1:-1]) - {grid_10x10.start.coord, grid_10x10.end.coord}


def test_golden_snapshot(grid_10x10: Grid) -> None:
    """Seed 42 must keep producing the recorded 10x10 layout.

    The baseline is written on the first run; delete it to re-record after
    an intentional change to the generator.
    """
    if not SNAPSHOT.exists():
        SNAPSHOT.parent.mkdir(parents=True, exist_ok=True)
        SNAPSHOT.write_text(json.dumps(grid_10x10.to_dict(), indent=2) + "\n")
    recorded = json.loads(SNAPSHOT.read_text())
    assert Grid.from_dict(recorded) == grid_10x10


def test_round_trip_keeps_uniqueness(grid_10x10: Grid) -> None:
    loaded = Grid.from_dict(grid_10x10.to_dict())
    assert loaded == grid_10x10
    assert Solver.is_unique(loaded)


@pytest.mark.timeout(30)
def test_small_grid_yields_grid_or_exhausts() -> None:
    try:
        grid = generate(5, 5, 1)
    except GenerationExhausted as exc:
        assert exc.attempts > 0
    else:
        _assert_valid(grid, 5, 5)


@pytest.mark.slow
@pytest.mark.timeout(3)
def test_large_grid_within_time() -> None:
    _assert_valid(generate(32, 32, 7), 32, 32)


def test_rejects_non_positive_dimensions() -> None:
    with pytest.raises(ValueError):
        generate(0, 5)
    with pytest.raises(ValueError):
        generate(5, -1)


def test_impossible_grid_exhausts() -> None:
    with pytest.raises(GenerationExhausted) as info:
        generate(2, 2, seed=1)
    exc = info.value
    assert (exc.width, exc.height, exc.seed) == (2, 2, 1)
    assert exc.attempts > 0
    assert "2x2" in str(exc)
