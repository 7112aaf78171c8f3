"""Word placement search.

Each word gets a random start cell and a random start direction. From there
the search sweeps every direction at the current cell before stepping to the
next cell in row-major order, so each (cell, direction) pair is tested at
most once and the search always terminates. Placed letters are permanent:
there is no backtracking across words.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import BLANK, DIRECTION_ORDER, Direction, next_direction
from ..core.exceptions import GridSizeError
from ..core.models import Coordinate, Grid, Placement
from ..utils.logger import get_logger
from .grid import grid_bounds


LOGGER = get_logger(__name__)


def word_fits(
    grid: Sequence[Sequence[str]],
    coordinate: Coordinate,
    direction: Direction,
    word_length: int,
) -> bool:
    """Return True when ``word_length`` cells from ``coordinate`` are all blank.

    A cell already holding a letter blocks the run even if it matches the
    letter the word needs there.
    """

    bounds = grid_bounds(grid)
    current = coordinate
    for _ in range(word_length):
        if not current.valid(bounds) or grid[current.row][current.col] != BLANK:
            return False
        current = current.step(direction)
    return True


def write_word(grid: Grid, coordinate: Coordinate, direction: Direction, word: str) -> None:
    current = coordinate
    for char in word:
        grid[current.row][current.col] = char
        current = current.step(direction)


def find_slot(
    grid: Sequence[Sequence[str]],
    word_length: int,
    rng: random.Random,
) -> Optional[Tuple[Coordinate, Direction]]:
    """Sweep from a random (cell, direction) until a fitting slot is found."""

    bounds = grid_bounds(grid)
    if bounds.cell_count == 0:
        raise GridSizeError(
            f"Cannot place a word of length {word_length} in a {bounds.cols}x{bounds.rows} grid"
        )

    original_coordinate = Coordinate(rng.randrange(bounds.rows), rng.randrange(bounds.cols))
    original_direction = rng.choice(DIRECTION_ORDER)
    coordinate = original_coordinate
    direction = original_direction

    while not word_fits(grid, coordinate, direction, word_length):
        direction = next_direction(direction)
        if direction == original_direction:
            coordinate = coordinate.next_scan_position(bounds.cols, bounds.rows)
            if coordinate == original_coordinate:
                return None
    return coordinate, direction


def place_word(grid: Grid, word: str, rng: Optional[random.Random] = None) -> Optional[Placement]:
    """Place ``word`` (uppercased) into ``grid``; return None when it cannot fit."""

    rng = rng or random.Random()
    upper = word.upper()
    slot = find_slot(grid, len(upper), rng)
    if slot is None:
        LOGGER.debug("No slot found for '%s'", upper)
        return None
    coordinate, direction = slot
    write_word(grid, coordinate, direction, upper)
    LOGGER.debug(
        "Placed '%s' at (%s,%s) going %s",
        upper,
        coordinate.row,
        coordinate.col,
        direction.value,
    )
    return Placement(word=upper, start=coordinate, direction=direction)


def place_all(
    grid: Grid,
    words: Iterable[str],
    rng: Optional[random.Random] = None,
) -> Tuple[List[Placement], List[str]]:
    """Place words in order, returning the placements and the words left over."""

    rng = rng or random.Random()
    placements: List[Placement] = []
    not_placed: List[str] = []
    for word in words:
        if not word:
            continue
        placement = place_word(grid, word, rng)
        if placement is None:
            not_placed.append(word)
        else:
            placements.append(placement)
    return placements, not_placed


def place_words(grid: Grid, words: Iterable[str], rng: Optional[random.Random] = None) -> List[str]:
    """Place each word into ``grid`` and return those that could not be placed.

    Returned words keep their original casing and input order.
    """

    _, not_placed = place_all(grid, words, rng)
    return not_placed
