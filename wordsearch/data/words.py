"""Word list sources for puzzles."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence

from ..core.exceptions import WordSourceError
from ..io.gemini_client import GeminiAPIError, GeminiWordClient
from ..utils.logger import get_logger
from .normalization import WORD_RE, clean_word


LOGGER = get_logger(__name__)


@dataclass
class WordEntry:
    """A candidate puzzle word and where it came from."""

    word: str
    source: str = "unknown"


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def generate(self, theme: str, limit: int = 20) -> List[WordEntry]:
        ...


class UserWordListSource:
    """Returns a user-supplied list of words, dropping blank entries."""

    def __init__(self, raw_words: Sequence[str]) -> None:
        self._entries = [
            WordEntry(clean_word(item), "user") for item in raw_words if clean_word(item)
        ]

    def generate(self, theme: str = "", limit: int = 20) -> List[WordEntry]:
        return list(self._entries)


DEFAULT_THEME_BUCKETS: Dict[str, List[str]] = {
    "animals": [
        "TIGER", "OTTER", "HORSE", "ZEBRA", "EAGLE", "WHALE", "MOOSE", "PANDA",
        "LLAMA", "CAMEL", "BISON", "KOALA", "RABBIT", "BEAVER", "FALCON",
    ],
    "fruits": [
        "APPLE", "MANGO", "PEACH", "GRAPE", "LEMON", "CHERRY", "BANANA",
        "ORANGE", "PAPAYA", "QUINCE", "MELON", "GUAVA", "KIWI", "PLUM", "FIG",
    ],
    "space": [
        "MERCURY", "VENUS", "EARTH", "MARS", "JUPITER", "SATURN", "URANUS",
        "NEPTUNE", "COMET", "ORBIT", "GALAXY", "NEBULA", "METEOR", "QUASAR",
    ],
}


class ThemeBucketSource:
    """Produces words from built-in themed lists."""

    def __init__(self, theme_buckets: Optional[Dict[str, List[str]]] = None, seed: Optional[int] = None) -> None:
        buckets = theme_buckets or DEFAULT_THEME_BUCKETS
        self.theme_buckets = {
            key.lower(): [w.upper() for w in words if w] for key, words in buckets.items()
        }
        self.rng = random.Random(seed)

    def generate(self, theme: str, limit: int = 20) -> List[WordEntry]:
        key = (theme or "").strip().lower()
        words = self.theme_buckets.get(key)
        if words is None:
            raise WordSourceError(
                f"Theme '{theme}' has no built-in word list "
                f"(known: {sorted(self.theme_buckets)})"
            )
        shuffled = list(words)
        self.rng.shuffle(shuffled)
        results = [WordEntry(word, "bucket") for word in shuffled[:limit]]
        LOGGER.info("Theme bucket '%s' produced %s words", key, len(results))
        return results


class GeminiWordSource:
    """LLM-powered source asking Gemini for themed words."""

    def __init__(self, client: Optional[GeminiWordClient] = None, max_length: int = 12) -> None:
        self._client = client
        self.max_length = max_length

    @property
    def client(self) -> GeminiWordClient:
        if self._client is None:
            self._client = GeminiWordClient()
        return self._client

    def generate(self, theme: str, limit: int = 20) -> List[WordEntry]:
        try:
            raw_words = self.client.fetch_words(theme, limit, self.max_length)
        except GeminiAPIError as exc:
            raise WordSourceError(str(exc)) from exc
        entries = self.usable_entries(raw_words, self.max_length)
        LOGGER.info("Gemini produced %s usable words for '%s'", len(entries), theme)
        return entries[:limit]

    @staticmethod
    def usable_entries(raw_words: Sequence[str], max_length: int = 12) -> List[WordEntry]:
        """Keep single A-Z words no longer than ``max_length``, uppercased."""
        entries: List[WordEntry] = []
        for item in raw_words:
            word = clean_word(item).upper()
            if word and len(word) <= max_length and WORD_RE.fullmatch(word):
                entries.append(WordEntry(word, "gemini"))
        return entries


def merge_word_sources(
    primary: Optional[WordSource],
    fallbacks: Sequence[WordSource],
    theme: str,
    limit: int,
) -> List[WordEntry]:
    """Combine the primary source's words with up to ``limit`` extra words.

    Primary words are kept as given, duplicates included. Words from the
    fallback sources are added in cascade order, skipping any word already
    collected (case-insensitively), until ``limit`` extras have been added.
    """

    collected: List[WordEntry] = []
    if primary:
        try:
            collected.extend(primary.generate(theme))
        except WordSourceError as exc:
            LOGGER.warning("Primary word source failed: %s", exc)

    seen = {entry.word.upper() for entry in collected}
    added = 0
    for source in fallbacks:
        if added >= limit:
            break
        try:
            entries = source.generate(theme, limit=limit)
        except WordSourceError as exc:
            LOGGER.warning("Fallback word source %s failed: %s", type(source).__name__, exc)
            continue
        for entry in entries:
            key = entry.word.upper()
            if not key or key in seen:
                continue
            collected.append(entry)
            seen.add(key)
            added += 1
            if added >= limit:
                break

    if not collected:
        raise WordSourceError(f"No words available for theme '{theme}'")
    return collected
