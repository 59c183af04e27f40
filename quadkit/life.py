"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator


class CellState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


def next_state(cell: CellState, neighbours: int) -> CellState:
    """State of a cell in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        return CellState.ALIVE if neighbours in (2, 3) else CellState.DEAD
    if neighbours == 3:
        return CellState.ALIVE
    return cell


class Grid:
    """A width x height board; cells outside the edges count as dead."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [CellState.DEAD] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> CellState:
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, state: CellState) -> None:
        self._cells[self._index(x, y)] = state

    def __iter__(self) -> Iterator[tuple[int, int, CellState]]:
        for index, state in enumerate(self._cells):
            yield index % self.width, index // self.width, state

    @property
    def population(self) -> int:
        """Number of live cells."""
        return sum(1 for state in self._cells if state is CellState.ALIVE)

    def neighbours(self, x: int, y: int) -> int:
        """Count live cells among the up to eight cells around (x, y)."""
        self._index(x, y)
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    if self._cells[ny * self.width + nx] is CellState.ALIVE:
                        count += 1
        return count

    def randomize(self, rng: random.Random) -> None:
        """Bring roughly one cell in five to life."""
        self._cells = [
            CellState.ALIVE if rng.randrange(0, 5) == 0 else state
            for state in self._cells
        ]

    def step(self) -> None:
        """Advance the whole board by one generation."""
        self._cells = [
            next_state(state, self.neighbours(x, y)) for x, y, state in self
        ]