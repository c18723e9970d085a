from slidequest.models.difficulty import Difficulty, random_size, size_limits
from slidequest.models.grid import Cell, CellKind, Coordinate, Direction, Grid, Side

__all__ = [
    "Cell",
    "CellKind",
    "Coordinate",
    "Difficulty",
    "Direction",
    "Grid",
    "Side",
    "random_size",
    "size_limits",
]
