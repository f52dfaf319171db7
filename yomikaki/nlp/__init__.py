"""Natural Language Processing module for yomikaki

This module provides script conversion for romanized Japanese input:
romaji to hiragana and romaji (or hiragana) to katakana.
"""

from .base import BaseConverter, UnsupportedScriptError

SUPPORTED_SCRIPTS = ('hiragana', 'katakana')


def get_converter(script: str) -> BaseConverter:
    """Get a romaji converter producing the specified script.

    Args:
        script: Target script ('hiragana'/'hira' or 'katakana'/'kata')

    Returns:
        Converter instance for the requested script

    Raises:
        UnsupportedScriptError: If the script is not supported
    """
    name = script.lower()

    if name in ['hiragana', 'hira']:
        from .japanese.kana import HiraganaConverter
        return HiraganaConverter()
    elif name in ['katakana', 'kata']:
        from .japanese.kana import KatakanaConverter
        return KatakanaConverter()
    else:
        raise UnsupportedScriptError(script, SUPPORTED_SCRIPTS)


__all__ = [
    'BaseConverter',
    'UnsupportedScriptError',
    'SUPPORTED_SCRIPTS',
    'get_converter',
]
