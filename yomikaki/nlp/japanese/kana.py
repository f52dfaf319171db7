"""Kana script helpers used around the romaji converter."""

import re

from .romaji import RomajiConverter

_KANA_ONLY_RE = re.compile(r"^[ぁ-んゔゕゖァ-ヴー]+$")
_ROMAJI_INPUT_RE = re.compile(r"^[a-zA-Z\s]+$")


def is_kana_only(text: str) -> bool:
    """Check if text contains only kana characters."""
    return bool(_KANA_ONLY_RE.match(text))


def is_romaji_input(text: str) -> bool:
    """Check if text is plain Latin letters and whitespace (typed romaji)."""
    return bool(_ROMAJI_INPUT_RE.match(text))


class HiraganaConverter(RomajiConverter):
    """Romaji to hiragana."""


class KatakanaConverter(RomajiConverter):
    """Romaji (or hiragana) to katakana."""

    script = "katakana"

    def convert(self, text: str) -> str:
        return self.to_katakana(text)
