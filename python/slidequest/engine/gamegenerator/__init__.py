from slidequest.engine.gamegenerator.errors import (
    AttemptInvalid,
    GenerationError,
    GenerationExhausted,
    GraphInconsistency,
)
from slidequest.engine.gamegenerator.generator import GridGenerator, generate

__all__ = [
    "AttemptInvalid",
    "GenerationError",
    "GenerationExhausted",
    "GraphInconsistency",
    "GridGenerator",
    "generate",
]
