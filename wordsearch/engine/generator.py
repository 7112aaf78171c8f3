"""Word search generation orchestration.

Pipeline: build an empty grid, place every word with a bounded randomized
sweep, then fill the remaining blanks with random letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.exceptions import ValidationError
from ..core.models import GridSnapshot, PuzzleResult, freeze
from ..data.normalization import check_dimension, check_words
from .grid import build_empty_grid, fill_blanks
from .placement import place_all, place_words
from .validator import PuzzleValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def generate_puzzle(
    width: int,
    height: int,
    words: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Tuple[GridSnapshot, List[str]]:
    """Build a puzzle and return ``(grid, words_not_placed)``.

    Nothing is retained between calls. Pass a seeded ``random.Random`` for
    reproducible layouts.
    """

    rng = rng or random.Random()
    grid = build_empty_grid(width, height)
    words_not_placed = place_words(grid, words, rng)
    fill_blanks(grid, rng)
    return freeze(grid), words_not_placed


@dataclass
class GeneratorConfig:
    width: int
    height: int
    seed: Optional[int] = None
    max_attempts: int = 1
    validate: bool = True


class PuzzleGenerator:
    """Config-driven generator with boundary checks, retries and validation."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.validator = PuzzleValidator(config.width, config.height)

    def generate(self, words: Sequence[str]) -> PuzzleResult:
        check_dimension(self.config.width, "width")
        check_dimension(self.config.height, "height")
        check_words(words)
        LOGGER.info(
            "Generating %sx%s puzzle for %s words",
            self.config.width,
            self.config.height,
            len(words),
        )

        # Fresh stream per call: the same seed always yields the same puzzle.
        rng = random.Random(self.config.seed)
        attempts = max(1, self.config.max_attempts)
        best = self._attempt(words, rng)
        LOGGER.debug("Attempt 1/%s left %s words unplaced", attempts, len(best.words_not_placed))
        for attempt in range(2, attempts + 1):
            if best.complete:
                break
            result = self._attempt(words, rng)
            LOGGER.debug(
                "Attempt %s/%s left %s words unplaced",
                attempt,
                attempts,
                len(result.words_not_placed),
            )
            if len(result.words_not_placed) < len(best.words_not_placed):
                best = result

        if best.words_not_placed:
            LOGGER.warning(
                "Could not place %s word(s): %s",
                len(best.words_not_placed),
                ", ".join(best.words_not_placed),
            )

        if self.config.validate:
            validation = self.validator.validate(best)
            if not validation.ok:
                raise ValidationError(f"Puzzle validation failed: {validation.messages}")
            best.validation_messages = validation.messages

        LOGGER.info("Puzzle generation completed with %s words placed", len(best.placements))
        return best

    def _attempt(self, words: Sequence[str], rng: random.Random) -> PuzzleResult:
        grid = build_empty_grid(self.config.width, self.config.height)
        placements, not_placed = place_all(grid, words, rng)
        fill_blanks(grid, rng)
        return PuzzleResult(
            grid=freeze(grid),
            placements=placements,
            words_not_placed=not_placed,
            seed=self.config.seed,
        )
