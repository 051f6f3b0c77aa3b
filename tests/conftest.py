import numpy as np
import pytest
from PIL import Image

from qrstyle.regions import EYE_SIZE, eye_origins

FINDER = np.array([
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
], dtype=bool)


def make_matrix(n: int = 21, seed: int = 7) -> np.ndarray:
    """Random data modules with real finder patterns in the three corners."""
    rng = np.random.default_rng(seed)
    grid = rng.random((n, n)) < 0.5
    for row, col in eye_origins(n).values():
        grid[row:row + EYE_SIZE, col:col + EYE_SIZE] = FINDER
    return grid


@pytest.fixture
def matrix() -> np.ndarray:
    return make_matrix()


@pytest.fixture
def logo() -> Image.Image:
    img = Image.new("RGBA", (64, 32), (200, 30, 30, 255))
    return img
