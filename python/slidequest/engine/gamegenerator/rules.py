"""Numeric rules of the generator, bucketed by the smaller grid side."""

from __future__ import annotations

import math

MAX_ATTEMPTS = 150
END_RESAMPLE_TRIES = 100
ANCHOR_RESAMPLE_TRIES = 200

# Probability of skipping a filler candidate that touches the path.
PATH_AVOIDANCE = 0.7

# Upper bounds of the size buckets: small (<= 8), medium (<= 16), large.
_BUCKETS = (8, 16)


def _bucket(width: int, height: int) -> int:
    m = min(width, height)
    for i, limit in enumerate(_BUCKETS):
        if m <= limit:
            return i
    return len(_BUCKETS)


def move_window(width: int, height: int) -> tuple[int, int]:
    """Inclusive ``(min, max)`` number of moves for the interior solution."""
    return ((6, 9), (7, 10), (8, 12))[_bucket(width, height)]


def filler_density(width: int, height: int) -> float:
    return (0.02, 0.035, 0.05)[_bucket(width, height)]


def cap_percent(width: int, height: int) -> float:
    return (0.07, 0.09, 0.11)[_bucket(width, height)]


def obstacle_cap(width: int, height: int) -> int:
    return math.floor(width * height * cap_percent(width, height))


def decoy_target(width: int, height: int) -> int:
    return max(2, min(width, height) // 4)


def filler_target(width: int, height: int) -> int:
    return round(width * height * filler_density(width, height))
