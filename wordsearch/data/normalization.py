"""Boundary checks and normalization for user supplied puzzle input."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..core.constants import MAX_DIMENSION, MIN_DIMENSION
from ..core.exceptions import InputValidationError

WORD_RE = re.compile(r"[A-Za-z]*")
INVALID_DIMENSIONS_MESSAGE = "Invalid width or height"


def parse_dimension(text: str, name: str = "dimension") -> int:
    """Parse a width/height field, rejecting non-numeric or out-of-range input."""

    try:
        value = int(str(text).strip())
    except ValueError as exc:
        raise InputValidationError(f"{INVALID_DIMENSIONS_MESSAGE}: {name}={text!r}") from exc
    check_dimension(value, name)
    return value


def check_dimension(value: int, name: str = "dimension") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputValidationError(f"{INVALID_DIMENSIONS_MESSAGE}: {name}={value!r}")
    if not MIN_DIMENSION <= value <= MAX_DIMENSION:
        raise InputValidationError(
            f"{INVALID_DIMENSIONS_MESSAGE}: {name} must be between "
            f"{MIN_DIMENSION} and {MAX_DIMENSION}, got {value}"
        )


def clean_word(text: str) -> str:
    """Return ``text`` without surrounding whitespace."""

    return (text or "").strip()


def check_words(words: Iterable[str]) -> None:
    """Reject words containing anything other than ASCII letters."""

    for word in words:
        if not WORD_RE.fullmatch(word):
            raise InputValidationError(f"Invalid word {word!r}: only letters A-Z are allowed")


def parse_word_lines(text: str) -> List[str]:
    """Split newline separated input into words. Blank lines and # comments are skipped."""

    entries: List[str] = []
    for line in text.splitlines():
        line = clean_word(line)
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


__all__ = [
    "INVALID_DIMENSIONS_MESSAGE",
    "check_dimension",
    "check_words",
    "clean_word",
    "parse_dimension",
    "parse_word_lines",
]
