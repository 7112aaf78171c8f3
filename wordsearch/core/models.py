"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .constants import Bounds, Direction


Grid = List[List[str]]
GridSnapshot = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class Coordinate:
    """A (row, col) position; may sit outside the grid while searching."""

    row: int
    col: int

    def step(self, direction: Direction, distance: int = 1) -> Coordinate:
        d_row, d_col = direction.step
        return Coordinate(self.row + d_row * distance, self.col + d_col * distance)

    def next_scan_position(self, width: int, height: int) -> Coordinate:
        """Advance in row-major order, wrapping the last cell back to (0, 0)."""

        if self.col + 1 < width:
            return Coordinate(self.row, self.col + 1)
        if self.row + 1 < height:
            return Coordinate(self.row + 1, 0)
        return Coordinate(0, 0)

    def valid(self, bounds: Bounds) -> bool:
        return bounds.contains(self.row, self.col)


@dataclass(frozen=True)
class Placement:
    """A word written into the grid."""

    word: str
    start: Coordinate
    direction: Direction

    @property
    def cells(self) -> List[Coordinate]:
        return [self.start.step(self.direction, i) for i in range(len(self.word))]


@dataclass
class PuzzleResult:
    """Finished puzzle handed to callers."""

    grid: GridSnapshot
    placements: List[Placement]
    words_not_placed: List[str]
    seed: Optional[int] = None
    validation_messages: List[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    @property
    def complete(self) -> bool:
        return not self.words_not_placed

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.grid]


def freeze(grid: Sequence[Sequence[str]]) -> GridSnapshot:
    return tuple(tuple(row) for row in grid)
