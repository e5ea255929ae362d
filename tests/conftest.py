"""
Pytest configuration and shared grid fixtures.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so the top-level modules can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def empty_grid(rows, cols):
    return [[0] * cols for _ in range(rows)]


@pytest.fixture
def blinker_horizontal():
    """5x5 board with a horizontal blinker on row 2, columns 1-3."""
    grid = empty_grid(5, 5)
    grid[2][1] = grid[2][2] = grid[2][3] = 1
    return grid


@pytest.fixture
def blinker_vertical():
    """5x5 board with a vertical blinker on column 2, rows 1-3."""
    grid = empty_grid(5, 5)
    grid[1][2] = grid[2][2] = grid[3][2] = 1
    return grid


@pytest.fixture
def block():
    """4x4 board with a 2x2 block in the middle."""
    grid = empty_grid(4, 4)
    grid[1][1] = grid[1][2] = grid[2][1] = grid[2][2] = 1
    return grid


@pytest.fixture
def glider():
    return [
        [0, 1, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0],
        [1, 1, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ]
