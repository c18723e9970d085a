"""Generates uniquely solvable sliding-block puzzles."""

from __future__ import annotations

import logging
import random

from slidequest.engine.gamegenerator.anchors import pick_start_and_end
from slidequest.engine.gamegenerator.border import wrap_with_border
from slidequest.engine.gamegenerator.context import GenerationContext
from slidequest.engine.gamegenerator.errors import AttemptInvalid, GenerationExhausted
from slidequest.engine.gamegenerator.obstacles import place_obstacles
from slidequest.engine.gamegenerator.path import build_guaranteed_path, paint_path
from slidequest.engine.gamegenerator.rules import MAX_ATTEMPTS
from slidequest.engine.gamegenerator.uniqueness import enforce_uniqueness, verify_unique
from slidequest.models.grid import Grid

logger = logging.getLogger(__name__)


class GridGenerator:
    """Builds puzzles by laying a guaranteed path and blocking every shortcut."""

    @staticmethod
    def generate(width: int, height: int, seed: int | None = None) -> Grid:
        """Return a uniquely solvable grid of ``width`` x ``height`` interior cells.

        The returned grid is two cells larger in each dimension because of
        the obstacle ring. One RNG stream seeded from *seed* (or system
        entropy) feeds every attempt, so a given seed always produces the
        same grid.

        Raises :class:`GenerationExhausted` after ``MAX_ATTEMPTS`` failures.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")

        if seed is None:
            seed = random.SystemRandom().randrange(2**31)
        return GridGenerator.run(GenerationContext.create(width, height, seed))

    @staticmethod
    def run(context: GenerationContext) -> Grid:
        """Drive the attempt loop on *context*, leaving the winning attempt's state in it."""
        width, height, seed = context.width, context.height, context.seed
        for attempt in range(1, MAX_ATTEMPTS + 1):
            context.reset()
            try:
                grid = GridGenerator.try_generate_once(context)
            except AttemptInvalid as exc:
                logger.debug("attempt %d/%d discarded: %s", attempt, MAX_ATTEMPTS, exc)
                continue

            logger.info(
                "generated %dx%d grid (seed %d) in %d attempt(s), %d moves",
                width, height, seed, attempt, len(grid.moves_for_win),
            )
            return grid

        raise GenerationExhausted(width, height, seed, MAX_ATTEMPTS)

    @staticmethod
    def try_generate_once(context: GenerationContext) -> Grid:
        """Run the pipeline once on a freshly reset *context*.

        Raises :class:`AttemptInvalid` when any stage breaks its contract.
        """
        pick_start_and_end(context)
        build_guaranteed_path(context)
        paint_path(context)
        place_obstacles(context)
        enforce_uniqueness(context)
        grid = wrap_with_border(context)
        verify_unique(grid)
        return grid


def generate(width: int, height: int, seed: int | None = None) -> Grid:
    return GridGenerator.generate(width, height, seed)
