"""AI-backed kanji suggestions for typed romaji."""

import threading
from typing import Dict, Optional

from yomikaki import AI_BACKEND, KANJI_MIN_LENGTH
from yomikaki.logger import logger
from yomikaki.nlp.japanese import is_romaji_input
from yomikaki.prompts import kanji_suggestion_prompt


class KanjiSuggester:
    """Ask the AI backend for the Japanese word a romaji input most likely means.

    Suggestions are memoised per lowercased input for the life of the
    instance. Every failure is logged and reported as ``None`` so callers can
    simply leave the kanji candidate out.
    """

    def __init__(self, client=None, min_length: int = KANJI_MIN_LENGTH, backend: str = AI_BACKEND):
        self._client = client
        self._backend = backend
        self.min_length = min_length
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def client(self):
        # Created lazily so transliteration-only callers never need API keys
        if self._client is None:
            from yomikaki.ai import get_ai_client
            self._client = get_ai_client(self._backend, language="ja")
        return self._client

    @staticmethod
    def cache_key(text: str) -> str:
        return f"kanji_conv_{text.lower()}"

    def accepts(self, text: str) -> bool:
        """Whether *text* is worth sending to the suggestion service."""
        return (
            len(text) >= self.min_length
            and bool(text.strip())
            and is_romaji_input(text)
        )

    def suggest(self, text: str) -> Optional[str]:
        if not text or not self.accepts(text):
            return None

        key = self.cache_key(text)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            reply = self.client.complete(kanji_suggestion_prompt(text), json_output=False)
        except Exception as e:
            logger.error(f"❌ Kanji suggestion failed for '{text}': {e}")
            return None

        candidate = (reply or "").strip()
        if not candidate:
            logger.warning(f"⚠️ Empty kanji suggestion for '{text}'")
            return None

        with self._lock:
            self._cache[key] = candidate
        return candidate

    def clear_cache(self):
        with self._lock:
            self._cache.clear()
