"""Romaji to kana transliteration.

Typed Latin-alphabet Japanese is converted in two passes:

1. doubled consonants become a small tsu ("kk" -> "っk") so the remaining
   consonant still starts a syllable;
2. syllables are replaced greedily, always preferring the longest key at a
   given position ("shi" before "s", "cha" before "ch").

Anything the rule table does not know (digits, punctuation, stray letters,
text that is already Japanese) is left where it is.
"""

import re
from types import MappingProxyType
from typing import Mapping, Tuple

import jaconv

from yomikaki.nlp.base import BaseConverter

SMALL_TSU = "っ"
MORAIC_N = "ん"

# Romaji syllable -> hiragana
_ROMAJI_TO_HIRAGANA = {
    # Vowels
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    # K-row
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    # S-row
    "sa": "さ", "shi": "し", "su": "す", "se": "せ", "so": "そ",
    # T-row
    "ta": "た", "chi": "ち", "tsu": "つ", "te": "て", "to": "と",
    # N-row
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    # H-row
    "ha": "は", "hi": "ひ", "fu": "ふ", "he": "へ", "ho": "ほ",
    # M-row
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    # Y-row
    "ya": "や", "yu": "ゆ", "yo": "よ",
    # R-row
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    # W-row and N
    "wa": "わ", "wo": "を", "n": "ん",
    # Voiced
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    "za": "ざ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    # Semi-voiced
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    # Contracted sounds (youon)
    "kya": "きゃ", "kyu": "きゅ", "kyo": "きょ",
    "sha": "しゃ", "shu": "しゅ", "sho": "しょ",
    "cha": "ちゃ", "chu": "ちゅ", "cho": "ちょ",
    "nya": "にゃ", "nyu": "にゅ", "nyo": "にょ",
    "hya": "ひゃ", "hyu": "ひゅ", "hyo": "ひょ",
    "mya": "みゃ", "myu": "みゅ", "myo": "みょ",
    "rya": "りゃ", "ryu": "りゅ", "ryo": "りょ",
    "gya": "ぎゃ", "gyu": "ぎゅ", "gyo": "ぎょ",
    "ja": "じゃ", "ju": "じゅ", "jo": "じょ",
    "bya": "びゃ", "byu": "びゅ", "byo": "びょ",
    "pya": "ぴゃ", "pyu": "ぴゅ", "pyo": "ぴょ",
    # Small vowels
    "la": "ぁ", "li": "ぃ", "lu": "ぅ", "le": "ぇ", "lo": "ぉ",
    # Alternative spelling of tsu
    "tu": "つ",
}

ROMAJI_TO_HIRAGANA: Mapping[str, str] = MappingProxyType(_ROMAJI_TO_HIRAGANA)

# sorted() is stable, so equal-length keys keep their table order
ROMAJI_KEYS: Tuple[str, ...] = tuple(
    sorted(_ROMAJI_TO_HIRAGANA, key=len, reverse=True)
)

GEMINATE_CONSONANTS = "kstnhmyrwgzbpd"

_GEMINATE_RE = re.compile(rf"([{GEMINATE_CONSONANTS}])\1")
# Alternation is tried left to right, so longest keys win at each position
_SYLLABLE_RE = re.compile("|".join(re.escape(key) for key in ROMAJI_KEYS))

# Iteration marks sit outside U+3041-U+3096 and must not be shifted
_KATAKANA_IGNORE = "ゝゞ"


def _double_consonant(match: re.Match) -> str:
    letter = match.group(1)
    if letter != "n":
        return SMALL_TSU + letter

    # "nn" is the moraic n: keep one n when it still opens a syllable
    following = match.string[match.end():match.end() + 1]
    if following and following in "aiueoy":
        return MORAIC_N + letter
    return MORAIC_N


def to_hiragana(text: str) -> str:
    """Convert romanized *text* to hiragana.

    >>> to_hiragana("kitte")
    'きって'
    """
    result = text.lower()
    result = _GEMINATE_RE.sub(_double_consonant, result)
    return _SYLLABLE_RE.sub(lambda m: _ROMAJI_TO_HIRAGANA[m.group(0)], result)


def to_katakana(text: str) -> str:
    """Convert romanized or hiragana *text* to katakana.

    The input is first normalised with :func:`to_hiragana`; every hiragana
    code point is then moved to its katakana twin (+0x60).
    """
    return jaconv.hira2kata(to_hiragana(text), ignore=_KATAKANA_IGNORE)


class RomajiConverter(BaseConverter):
    """Romaji to hiragana converter."""

    script = "hiragana"

    @staticmethod
    def to_hiragana(text: str) -> str:
        return to_hiragana(text)

    @staticmethod
    def to_katakana(text: str) -> str:
        return to_katakana(text)

    def convert(self, text: str) -> str:
        return self.to_hiragana(text)
