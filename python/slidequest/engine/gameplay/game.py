"""Core gameplay logic: slides the player and checks the win condition."""

from __future__ import annotations

from slidequest.engine.gamegenerator import GridGenerator
from slidequest.engine.gamestate import GameState
from slidequest.engine.simulator import slide
from slidequest.models.grid import Direction, Grid


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, width: int, height: int, seed: int | None = None) -> None:
        grid = GridGenerator.generate(width, height, seed)
        self.state = GameState(grid)

    @classmethod
    def from_grid(cls, grid: Grid) -> "GamePlay":
        """Create a game session from an existing grid (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.state = GameState(grid)
        return obj

    @property
    def grid(self) -> Grid:
        return self.state.grid

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Slide the player in *direction* until the next cell is blocked.

        Returns False (and does not count a move) if the player cannot
        leave its cell, or once the puzzle is already won.
        """
        if self.is_won:
            return False

        visited = slide(self.state.position, direction, self.grid.is_blocked)
        if not visited:
            return False

        self.state.position = visited[-1]
        self.state.increment_moves()
        if self.is_won:
            self.state.pause()
        return True

    def reset(self) -> None:
        self.state.restart()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
