"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing import Iterable, Optional


class CellState(Enum):
    """State of a single cell."""

    ALIVE = "alive"
    DEAD = "dead"


def next_state(cell: CellState, neighbors: int) -> CellState:
    """State of ``cell`` in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        # Under- and overpopulation kill; two or three neighbours keep it alive.
        return CellState.ALIVE if neighbors in (2, 3) else CellState.DEAD
    # Reproduction.
    return CellState.ALIVE if neighbors == 3 else cell


@dataclass
class LifeGrid:
    """A ``width`` x ``height`` grid of cells stored row by row; edges are walls."""

    width: int
    height: int
    cells: list[CellState] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("grid dimensions must not be negative")
        if not self.cells:
            self.cells = [CellState.DEAD] * (self.width * self.height)
        if len(self.cells) != self.width * self.height:
            raise ValueError("cell count does not match grid dimensions")

    @classmethod
    def random(
        cls, width: int, height: int, rng: Optional[random.Random] = None
    ) -> LifeGrid:
        """A grid where each cell is alive with probability one in five."""
        rng = rng if rng is not None else random.Random()
        cells = [
            CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD
            for _ in range(width * height)
        ]
        return cls(width, height, cells)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> LifeGrid:
        """Build a grid from strings where ``#`` is alive and anything else dead."""
        rows = list(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        cells = [
            CellState.ALIVE if char == "#" else CellState.DEAD
            for row in rows
            for char in row
        ]
        return cls(width, len(rows), cells)

    def __getitem__(self, position: tuple[int, int]) -> CellState:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell {position} is outside the grid")
        return self.cells[y * self.width + x]

    def alive_cells(self) -> set[tuple[int, int]]:
        """Coordinates of all live cells."""
        return {
            (index % self.width, index // self.width)
            for index, cell in enumerate(self.cells)
            if cell is CellState.ALIVE
        }

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells around ``(x, y)``; cells past the edge do not count."""
        count = 0
        for dx, dy in product((-1, 0, 1), repeat=2):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                if self.cells[ny * self.width + nx] is CellState.ALIVE:
                    count += 1
        return count

    def step(self) -> None:
        """Advance the grid by one generation."""
        self.cells = [
            next_state(self.cells[y * self.width + x], self.neighbors(x, y))
            for y in range(self.height)
            for x in range(self.width)
        ]