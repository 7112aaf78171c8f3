"""Word search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.generate_puzzle``: build, place and fill in one call.
- ``wordsearch.engine.generator.PuzzleGenerator``: config-driven generation with validation.
- ``wordsearch.data.words`` helpers: user, built-in and Gemini word sources.
"""

from .core.models import Placement, PuzzleResult
from .engine.generator import GeneratorConfig, PuzzleGenerator, generate_puzzle
from .engine.grid import build_empty_grid, fill_blanks
from .engine.placement import place_words, word_fits

__all__ = [
    "GeneratorConfig",
    "Placement",
    "PuzzleGenerator",
    "PuzzleResult",
    "build_empty_grid",
    "fill_blanks",
    "generate_puzzle",
    "place_words",
    "word_fits",
]

__version__ = "0.1.0"
