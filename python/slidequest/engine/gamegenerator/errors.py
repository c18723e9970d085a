"""Generation errors.

Only :class:`GenerationExhausted` leaves :func:`generate`; the others mark a
single attempt as unusable and are absorbed by the attempt loop.
"""


class GenerationError(Exception):
    """Base class for all grid-generation errors."""


class GenerationExhausted(GenerationError):
    """Raised when no valid grid was produced within the attempt budget."""

    def __init__(self, width: int, height: int, seed: int, attempts: int) -> None:
        super().__init__(
            f"Could not generate a {width}x{height} grid (seed {seed}) "
            f"within {attempts} attempts."
        )
        self.width = width
        self.height = height
        self.seed = seed
        self.attempts = attempts


class AttemptInvalid(GenerationError):
    """The current attempt broke an invariant and must be discarded."""


class GraphInconsistency(AttemptInvalid):
    """The end is unreachable in the transition graph despite a built path."""
