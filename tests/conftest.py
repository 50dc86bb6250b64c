import logging

import numpy as np
import pytest

from minboundinggeo.model.geometry_primitives import Point


@pytest.fixture
def quad_points() -> list[Point]:
    """Two nested squares; the outer one is the hull."""
    coords = [(1, 3), (-1, 3), (1, 1), (-1, 1), (2, 4), (-2, 4), (2, 0), (-2, 0)]
    return [Point(x, y, 0.0) for x, y in coords]


@pytest.fixture
def square_with_midpoints() -> list[Point]:
    """Corners of a 2x2 square, the midpoints of its edges and its centre."""
    coords = [(1, 1), (0, 1), (2, 2), (1, 0), (0, 2), (2, 1), (2, 0), (1, 2), (0, 0)]
    return [Point(x, y) for x, y in coords]


@pytest.fixture
def random_points():
    def _make(seed: int, n: int = 200, scale: float = 10.0) -> list[Point]:
        rng = np.random.default_rng(seed)
        coords = rng.uniform(-scale, scale, size=(n, 3))
        return [Point.from_sequence(row) for row in coords]
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by the command-line driver between tests."""
    yield
    logger = logging.getLogger("minboundinggeo")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
