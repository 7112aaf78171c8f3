"""Gemini REST client that asks for themed word lists.

The request pins the response to a JSON array of strings, so the reply can
be decoded directly into candidate words. Filtering candidates down to
puzzle-safe words is left to :class:`wordsearch.data.words.GeminiWordSource`.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GeminiAPIError(RuntimeError):
    """Raised when Gemini cannot be reached or returns no usable word list."""


class GeminiWordClient:
    API_BASE = "https://generativelanguage.googleapis.com/v1beta"

    PROMPT = (
        "You are helping build a word search puzzle. "
        "List up to {limit} distinct English words about '{theme}'. "
        "Use only single words made of the letters A-Z, between 3 and {max_length} letters long."
    )

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        timeout_seconds: float = 30.0,
    ) -> None:
        self.model_name = os.environ.get(model_env, model_name)
        self.timeout_seconds = timeout_seconds
        self._api_key = os.environ.get(api_key_env)
        if not self._api_key:
            raise GeminiAPIError(f"Missing Gemini API key in environment variable {api_key_env}")

    def build_request(self, theme: str, limit: int, max_length: int) -> Dict[str, Any]:
        prompt = self.PROMPT.format(theme=theme, limit=limit, max_length=max_length)
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": {"type": "ARRAY", "items": {"type": "STRING"}},
            },
        }

    def fetch_words(self, theme: str, limit: int, max_length: int = 12) -> List[str]:
        """Return the raw word strings Gemini suggests for ``theme``."""
        url = f"{self.API_BASE}/models/{self.model_name}:generateContent"
        try:
            response = requests.post(
                url,
                params={"key": self._api_key},
                json=self.build_request(theme, limit, max_length),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise GeminiAPIError(f"Gemini request failed: {exc}") from exc

        texts = [
            part.get("text", "")
            for candidate in response.json().get("candidates") or []
            for part in (candidate.get("content") or {}).get("parts") or []
        ]
        if not any(texts):
            raise GeminiAPIError(f"Gemini returned no word list for '{theme}'")
        words = self.parse_word_array(next(text for text in texts if text))
        LOGGER.debug("Gemini suggested %s words for '%s'", len(words), theme)
        return words

    @staticmethod
    def parse_word_array(text: str) -> List[str]:
        """Decode a JSON array of strings, tolerating a markdown code fence."""
        stripped = text.strip()
        if stripped.startswith("```"):
            lines = stripped.splitlines()
            stripped = "\n".join(lines[1:-1] if lines[-1].strip().startswith("```") else lines[1:])
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise GeminiAPIError(f"Gemini word list is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise GeminiAPIError("Gemini word list is not a JSON array")
        return [item for item in data if isinstance(item, str)]
