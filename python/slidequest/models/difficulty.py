"""Grid size limits per difficulty tier."""

from __future__ import annotations

import random
from enum import StrEnum


class Difficulty(StrEnum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    EXPERT = "expert"


# Inclusive (min, max) side length for each tier.
DIFFICULTY_LIMITS: dict[Difficulty, tuple[int, int]] = {
    Difficulty.EASY: (5, 8),
    Difficulty.NORMAL: (10, 16),
    Difficulty.HARD: (16, 24),
    Difficulty.EXPERT: (24, 32),
}


def size_limits(difficulty: Difficulty) -> tuple[int, int]:
    return DIFFICULTY_LIMITS[difficulty]


def random_size(
    difficulty: Difficulty, rng: random.Random | None = None
) -> tuple[int, int]:
    """Draw a ``(width, height)`` pair within the tier's limits."""
    rng = rng or random.Random()
    low, high = DIFFICULTY_LIMITS[difficulty]
    return rng.randint(low, high), rng.randint(low, high)
