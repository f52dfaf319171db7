"""Japanese language processing module."""

from .romaji import (
    ROMAJI_KEYS,
    ROMAJI_TO_HIRAGANA,
    RomajiConverter,
    to_hiragana,
    to_katakana,
)
from .kana import HiraganaConverter, KatakanaConverter, is_kana_only, is_romaji_input

__all__ = [
    'ROMAJI_KEYS',
    'ROMAJI_TO_HIRAGANA',
    'RomajiConverter',
    'HiraganaConverter',
    'KatakanaConverter',
    'to_hiragana',
    'to_katakana',
    'is_kana_only',
    'is_romaji_input',
]
