"""Pretty-print helpers for word search puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..core.models import PuzzleResult


INCOMPLETE_MESSAGE = "Could not place all words"


def format_grid(grid: Sequence[Sequence[str]], *, header: bool = False) -> str:
    if not grid:
        return ""
    lines = []
    if header:
        width = len(grid[0])
        lines.append("    " + " ".join(f"{c:>2}" for c in range(width)))
        lines.append("    " + "-" * (3 * width - 1))
        for r, row in enumerate(grid):
            lines.append(f"{r:>2} | " + " ".join(f"{cell:>2}" for cell in row))
    else:
        lines.extend(" ".join(row) for row in grid)
    return "\n".join(lines)


def format_word_list(words: Sequence[str], columns: int = 4) -> str:
    if not words:
        return ""
    width = max(len(word) for word in words) + 2
    lines = []
    for start in range(0, len(words), columns):
        chunk = words[start:start + columns]
        lines.append("".join(word.ljust(width) for word in chunk).rstrip())
    return "\n".join(lines)


def print_puzzle(result: PuzzleResult, *, header: bool = False, stream=None) -> None:
    """Print the grid, the placed words and a warning when words are missing."""

    stream = stream or sys.stdout
    if not result.complete:
        print(f"Error: {INCOMPLETE_MESSAGE}", file=stream)
        print(file=stream)
    print(format_grid(result.grid, header=header), file=stream)
    if result.placed_words:
        print(file=stream)
        print("Words:", file=stream)
        print(format_word_list(result.placed_words), file=stream)
    if result.words_not_placed:
        print(file=stream)
        print("Not placed: " + ", ".join(result.words_not_placed), file=stream)
    for message in result.validation_messages:
        print(f"  {message}", file=stream)
    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
