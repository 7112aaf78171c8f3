"""Grid construction and filling helpers."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ..core.constants import BLANK, LETTERS, Bounds
from ..core.exceptions import GridSizeError
from ..core.models import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_empty_grid(width: int, height: int) -> Grid:
    """Return ``height`` rows of ``width`` blank cells."""

    if width < 0 or height < 0:
        raise GridSizeError(f"Grid dimensions must be non-negative, got {width}x{height}")
    return [[BLANK] * width for _ in range(height)]


def grid_bounds(grid: Sequence[Sequence[str]]) -> Bounds:
    return Bounds(rows=len(grid), cols=len(grid[0]) if grid else 0)


def is_blank(grid: Sequence[Sequence[str]], row: int, col: int) -> bool:
    return grid[row][col] == BLANK


def count_blanks(grid: Sequence[Sequence[str]]) -> int:
    return sum(1 for row in grid for cell in row if cell == BLANK)


def fill_blanks(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Replace every blank cell with a uniformly random letter A-Z.

    Must only run once all placements are done: placement treats anything
    other than the blank marker as occupied.
    """

    rng = rng or random.Random()
    filled = 0
    for row in grid:
        for col, cell in enumerate(row):
            if cell == BLANK:
                row[col] = rng.choice(LETTERS)
                filled += 1
    LOGGER.debug("Filled %s blank cells with random letters", filled)
