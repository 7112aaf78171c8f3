"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


BLANK = " "
LETTERS = string.ascii_uppercase
MIN_DIMENSION = 1
MAX_DIMENSION = 100


class Direction(str, Enum):
    """The eight compass directions a word can run in."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP_LEFT = "UP_LEFT"
    UP_RIGHT = "UP_RIGHT"
    DOWN_LEFT = "DOWN_LEFT"
    DOWN_RIGHT = "DOWN_RIGHT"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


# Cyclic order used when sweeping alternatives from a random start direction.
DIRECTION_ORDER: Tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
)

DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP_LEFT: (-1, -1),
    Direction.UP_RIGHT: (-1, 1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.DOWN_RIGHT: (1, 1),
}


def next_direction(direction: Direction) -> Direction:
    """Return the direction following ``direction``, wrapping after the last."""

    index = DIRECTION_ORDER.index(direction)
    return DIRECTION_ORDER[(index + 1) % len(DIRECTION_ORDER)]


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols
