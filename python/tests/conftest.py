from __future__ import annotations

import pytest

from slidequest.engine.gamegenerator import GridGenerator
from slidequest.models.grid import Grid


@pytest.fixture(scope="session")
def grid_10x10() -> Grid:
    return GridGenerator.generate(10, 10, 42)
