"""Slide-until-blocked simulation."""

from __future__ import annotations

from helpers import BLOCKED_ROWS, grid_from_rows
from slidequest.engine.simulator import blocked_by, simulate, slide
from slidequest.models.grid import Coordinate, Direction

D = Direction


def test_slide_stops_before_obstacle() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    assert slide((0, 0), D.RIGHT, grid.is_blocked) == [(1, 0)]
    assert slide((0, 0), D.BOTTOM, grid.is_blocked) == [(0, 1), (0, 2)]


def test_slide_blocked_first_step_is_empty() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    assert slide((0, 0), D.TOP, grid.is_blocked) == []
    assert slide((1, 0), D.RIGHT, grid.is_blocked) == []


def test_simulate_reaches_target() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    result = simulate([D.BOTTOM, D.RIGHT], grid.is_blocked, grid.start.coord, grid.end.coord)
    assert result.reached
    assert result.trace == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert result.stops == [(0, 0), (0, 2), (2, 2)]
    assert result.final == (2, 2)


def test_simulate_misses_target() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    result = simulate([D.RIGHT, D.BOTTOM], grid.is_blocked, grid.start.coord, grid.end.coord)
    assert not result.reached
    assert result.final == (1, 2)


def test_simulate_fails_on_blocked_first_step() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    result = simulate([D.BOTTOM, D.LEFT], grid.is_blocked, grid.start.coord)
    assert not result.reached
    assert result.stops == [(0, 0), (0, 2)]


def test_simulate_without_target_only_checks_moves() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    assert simulate([D.RIGHT, D.BOTTOM], grid.is_blocked, (0, 0)).reached


def test_simulate_empty_sequence_never_reaches() -> None:
    grid = grid_from_rows(BLOCKED_ROWS)
    assert not simulate([], grid.is_blocked, (0, 0), (0, 0)).reached


def test_blocked_by_obstacle_set() -> None:
    is_blocked = blocked_by(4, 3, {Coordinate(2, 1)})
    assert is_blocked(Coordinate(2, 1))
    assert is_blocked(Coordinate(4, 0))
    assert is_blocked(Coordinate(0, -1))
    assert not is_blocked(Coordinate(3, 2))

    result = simulate([D.RIGHT, D.BOTTOM, D.RIGHT], is_blocked, (0, 1), (3, 2))
    assert result.stops == [(0, 1), (1, 1), (1, 2), (3, 2)]
    assert result.reached
