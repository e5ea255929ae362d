"""
Conway's Game of Life on a bounded grid.

Rules
-----
1. Any live cell with fewer than two live neighbours dies (under-population).
2. Any live cell with two or three live neighbours lives on.
3. Any live cell with more than three live neighbours dies (overcrowding).
4. Any dead cell with exactly three live neighbours becomes a live cell.

Cells outside the grid are always dead; there is no wraparound.
"""

import logging
import random
from typing import Sequence

from utils import CellGrid, IntGrid, InvalidGridError, clone_grid, format_grid, to_cells, to_ints

logger = logging.getLogger(__name__)


def alive_neighbors(grid: Sequence[Sequence[object]], x: int, y: int) -> int:
    """Count live cells among the 8 neighbours of (x, y). Off-grid cells count as dead."""
    rows, cols = len(grid), len(grid[0])
    count = 0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dy == dx == 0:
                continue

            ny, nx = y + dy, x + dx
            if 0 <= ny < rows and 0 <= nx < cols and grid[ny][nx]:
                count += 1
    return count


def next_state(alive: bool, neighbors: int) -> bool:
    """Apply the rule table to a single cell."""
    if alive:
        return neighbors in (2, 3)
    return neighbors == 3


def create_board(rows: int, cols: int, density: float) -> IntGrid:
    """Generate a random seed grid."""
    if rows <= 0 or cols <= 0:
        raise InvalidGridError(f"board size must be positive, got {cols}x{rows}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be between 0 and 1, got {density}")
    return [[int(random.random() < density) for _ in range(cols)] for _ in range(rows)]


class Life:
    """
    A finite Game of Life simulation.

    `current` is the visible generation. `previous` is a separate buffer that
    holds the generation before the last `step()`; it is the only thing read
    while the next generation is computed.
    """

    def __init__(self, seed: Sequence[Sequence[object]]):
        self._current: CellGrid = to_cells(seed)
        self._previous: CellGrid = []
        self._height = len(self._current)
        self._width = len(self._current[0])
        self._generation = 0
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("New board %dx%d with %d live cells", self._width, self._height, self.alive_count)

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def alive_count(self) -> int:
        return sum(cell for row in self._current for cell in row)

    @property
    def board(self) -> IntGrid:
        """The current generation as a fresh 0/1 grid."""
        return to_ints(self._current)

    @property
    def previous(self) -> IntGrid:
        """The generation before the last step, or [] before the first step."""
        return to_ints(self._previous)

    def step(self) -> None:
        """Advance the board by exactly one generation."""
        if not self._previous:
            self._previous = clone_grid(self._current)
        else:
            for prev_row, row in zip(self._previous, self._current):
                prev_row[:] = row

        prev = self._previous
        for y in range(self._height):
            row = self._current[y]
            for x in range(self._width):
                row[x] = next_state(prev[y][x], alive_neighbors(prev, x, y))

        self._generation += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generation %d: %d live cells", self._generation, self.alive_count)

    def render(self) -> str:
        return format_grid(self._current)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Life(width={self._width}, height={self._height}, generation={self._generation})"
