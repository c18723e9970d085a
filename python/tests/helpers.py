"""Grid builders shared by the tests."""

from __future__ import annotations

from slidequest.models.grid import Direction, Grid


def grid_from_rows(rows: list[str], moves: list[Direction] | None = None) -> Grid:
    """Build a grid from text rows (``S`` start, ``E`` end, ``#`` obstacle)."""
    return Grid.from_dict(
        {
            "width": len(rows[0]),
            "height": len(rows),
            "seed": 0,
            "moves": [m.value for m in moves or []],
            "rows": rows,
        }
    )


# Two equally short solutions: right-then-down and down-then-right.
OPEN_ROWS = [
    "S..",
    "...",
    "..E",
]

# The obstacle stops the rightward slide early, leaving down-then-right
# as the only two-move solution.
BLOCKED_ROWS = [
    "S.#",
    "...",
    "..E",
]
