"""Procedural generator for uniquely solvable sliding-block puzzles."""

from slidequest.engine.gamegenerator import GenerationExhausted, GridGenerator, generate
from slidequest.models import Cell, CellKind, Coordinate, Direction, Grid

__all__ = [
    "Cell",
    "CellKind",
    "Coordinate",
    "Direction",
    "GenerationExhausted",
    "Grid",
    "GridGenerator",
    "generate",
]
