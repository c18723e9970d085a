"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from slidequest.models.grid import Coordinate, Grid


class GameState:
    """The player's position on a fixed grid, with a move counter and a clock.

    The grid itself is never modified; only the player token moves. The
    clock stops while paused and once the puzzle is won.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.restart()

    # -- clock ----------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._running_since is not None

    @property
    def elapsed_time(self) -> float:
        """Seconds played, excluding paused stretches."""
        if self._running_since is None:
            return self._banked
        return self._banked + time.monotonic() - self._running_since

    def pause(self) -> None:
        if self._running_since is not None:
            self._banked = self.elapsed_time
            self._running_since = None

    def resume(self) -> None:
        if self._running_since is None:
            self._running_since = time.monotonic()

    # -- player ---------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def restart(self) -> None:
        """Put the player back on the start cell and clear the counters."""
        self.position: Coordinate = self.grid.start.coord
        self.moves = 0
        self._banked = 0.0
        self._running_since: float | None = time.monotonic()

    @property
    def is_solved(self) -> bool:
        return self.position == self.grid.end.coord
