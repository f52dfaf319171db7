"""Build the list of conversion candidates offered for a typed input."""

import concurrent.futures
from typing import Iterable, List, Optional

from yomikaki import SUGGEST_TIMEOUT
from yomikaki.logger import logger
from yomikaki.nlp.japanese import to_hiragana, to_katakana
from yomikaki.schema import ConversionCandidates
from yomikaki.suggest import KanjiSuggester


class CandidateBuilder:
    """Combine deterministic kana conversion with an optional AI kanji guess.

    The kanji lookup runs on a worker thread while the kana forms are
    computed, and a slow or failing lookup only drops the kanji candidate.
    """

    def __init__(
        self,
        suggester: Optional[KanjiSuggester] = None,
        timeout: Optional[float] = SUGGEST_TIMEOUT,
        max_workers: int = 5,
    ):
        self.suggester = suggester
        self.timeout = timeout
        self._executor = concurrent.futures.ThreadPoolExecutor(max_workers=max_workers)

    def __enter__(self) -> "CandidateBuilder":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self._executor.shutdown(wait=False)

    def _submit_suggestion(self, text: str, with_kanji: bool) -> Optional[concurrent.futures.Future]:
        if not with_kanji or self.suggester is None or not self.suggester.accepts(text):
            return None
        return self._executor.submit(self.suggester.suggest, text)

    def _collect(self, text: str, future: Optional[concurrent.futures.Future]) -> Optional[str]:
        if future is None:
            return None
        try:
            return future.result(timeout=self.timeout)
        except concurrent.futures.TimeoutError:
            logger.warning(f"⚠️ Kanji suggestion timed out for '{text}'")
        except Exception as e:
            logger.error(f"❌ Kanji suggestion failed for '{text}': {e}")
        return None

    def build(self, text: str, with_kanji: bool = True) -> ConversionCandidates:
        future = self._submit_suggestion(text, with_kanji)
        hiragana = to_hiragana(text)
        katakana = to_katakana(text)
        return ConversionCandidates(
            original=text,
            hiragana=hiragana,
            katakana=katakana,
            kanji=self._collect(text, future),
        )

    def build_many(self, texts: Iterable[str], with_kanji: bool = True) -> List[ConversionCandidates]:
        texts = list(texts)
        futures = [self._submit_suggestion(text, with_kanji) for text in texts]
        logger.debug(f"Converting {len(texts)} inputs ({sum(f is not None for f in futures)} kanji lookups)")
        return [
            ConversionCandidates(
                original=text,
                hiragana=to_hiragana(text),
                katakana=to_katakana(text),
                kanji=self._collect(text, future),
            )
            for text, future in zip(texts, futures)
        ]
