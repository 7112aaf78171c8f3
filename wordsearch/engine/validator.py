"""Deterministic integrity checks for finished puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import DIRECTION_ORDER, LETTERS
from ..core.exceptions import ValidationError
from ..core.models import Coordinate, Placement, PuzzleResult
from .grid import grid_bounds
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


def spells(grid: Sequence[Sequence[str]], placement: Placement) -> bool:
    """Return True when the grid reads ``placement.word`` along its cells."""

    bounds = grid_bounds(grid)
    for char, cell in zip(placement.word, placement.cells):
        if not cell.valid(bounds) or grid[cell.row][cell.col] != char:
            return False
    return True


class PuzzleValidator:
    """Runs deterministic validation over a generated puzzle."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def validate(self, result: PuzzleResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(result)
            self._check_letters(result)
            self._check_placements(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        messages.extend(self._notes_for_unplaced(result))
        return ValidationResult(ok=True, messages=messages)

    def _check_shape(self, result: PuzzleResult) -> None:
        if len(result.grid) != self.height:
            raise ValidationError(f"Expected {self.height} rows, found {len(result.grid)}")
        for index, row in enumerate(result.grid):
            if len(row) != self.width:
                raise ValidationError(
                    f"Row {index} has {len(row)} cells, expected {self.width}"
                )

    def _check_letters(self, result: PuzzleResult) -> None:
        for r, row in enumerate(result.grid):
            for c, cell in enumerate(row):
                if cell not in LETTERS or len(cell) != 1:
                    raise ValidationError(f"Invalid letter '{cell}' at ({r},{c})")

    def _check_placements(self, result: PuzzleResult) -> None:
        for placement in result.placements:
            if not spells(result.grid, placement):
                raise ValidationError(
                    f"Word '{placement.word}' not found at "
                    f"({placement.start.row},{placement.start.col}) going {placement.direction.value}"
                )

    def _notes_for_unplaced(self, result: PuzzleResult) -> List[str]:
        # Duplicates and random filler can still spell an unplaced word.
        notes: List[str] = []
        for word in result.words_not_placed:
            if self._occurs(result.grid, word.upper()):
                notes.append(f"Unplaced word '{word}' occurs in the grid by chance")
        return notes

    @staticmethod
    def _occurs(grid: Sequence[Sequence[str]], word: str) -> bool:
        bounds = grid_bounds(grid)
        for row in range(bounds.rows):
            for col in range(bounds.cols):
                for direction in DIRECTION_ORDER:
                    if spells(grid, Placement(word, Coordinate(row, col), direction)):
                        return True
        return False
