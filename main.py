"""CLI entrypoint for the word search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.exceptions import InputValidationError, WordSearchError
from wordsearch.core.models import PuzzleResult
from wordsearch.data.normalization import check_words, parse_dimension, parse_word_lines
from wordsearch.data.words import (
    GeminiWordSource,
    ThemeBucketSource,
    UserWordListSource,
    WordSource,
    merge_word_sources,
)
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import INCOMPLETE_MESSAGE, print_puzzle


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    return parse_word_lines(path.read_text(encoding="utf-8"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles",
    )
    parser.add_argument("--width", type=str, required=True, help="Grid width in cells (1-100)")
    parser.add_argument("--height", type=str, required=True, help="Grid height in cells (1-100)")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to hide in the grid",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default="",
        help="Add words for this theme from the built-in lists (or Gemini with --llm)",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Ask Gemini for theme words before falling back to the built-in lists (requires --theme)",
    )
    parser.add_argument("--limit", type=int, default=10, help="Number of theme words to add")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--attempts",
        type=int,
        default=1,
        help="Regenerate up to this many times until every word is placed",
    )
    parser.add_argument("--header", action="store_true", help="Print row/column indices")
    parser.add_argument("--json", action="store_true", help="Print the puzzle as JSON")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[str]:
    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))
    if not args.theme:
        return [entry.word for entry in UserWordListSource(user_words).generate()]

    primary = UserWordListSource(user_words) if user_words else None
    fallbacks: List[WordSource] = []
    if args.llm:
        fallbacks.append(GeminiWordSource())
    fallbacks.append(ThemeBucketSource(seed=args.seed))
    entries = merge_word_sources(primary, fallbacks, args.theme, args.limit)
    return [entry.word for entry in entries]


def build_payload(result: PuzzleResult) -> Dict[str, Any]:
    return {
        "width": result.width,
        "height": result.height,
        "grid": result.rows(),
        "placements": [
            {
                "word": placement.word,
                "start": [placement.start.row, placement.start.col],
                "direction": placement.direction.value,
            }
            for placement in result.placements
        ],
        "words_not_placed": result.words_not_placed,
        "message": "" if result.complete else INCOMPLETE_MESSAGE,
        "validation": result.validation_messages,
        "seed": result.seed,
    }


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.llm and not args.theme:
        parser.error("--llm requires --theme")
    if not args.theme and not (args.words or args.words_file):
        parser.error("provide --words / --words-file or --theme")

    try:
        width = parse_dimension(args.width, "width")
        height = parse_dimension(args.height, "height")
        words = collect_words(args)
        check_words(words)
    except InputValidationError as exc:
        parser.error(str(exc))
    except WordSearchError as exc:
        parser.exit(1, f"error: {exc}\n")

    config = GeneratorConfig(
        width=width,
        height=height,
        seed=args.seed,
        max_attempts=args.attempts,
    )
    try:
        result = PuzzleGenerator(config).generate(words)
    except WordSearchError as exc:
        parser.exit(1, f"error: {exc}\n")

    if args.json or args.output:
        output_text = json.dumps(build_payload(result), indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
    else:
        print_puzzle(result, header=args.header)


if __name__ == "__main__":  # pragma: no cover
    main()
