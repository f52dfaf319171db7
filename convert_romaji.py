#!/usr/bin/env python3
"""Convert typed romaji into hiragana/katakana candidates.

Examples:
    python convert_romaji.py konnichiwa tomodachi
    echo "kitte" | python convert_romaji.py --json
    python convert_romaji.py --kanji sakura
"""
import argparse
import json
import sys
from typing import List

from yomikaki import AI_BACKEND
from yomikaki.candidates import CandidateBuilder
from yomikaki.nlp import get_converter
from yomikaki.suggest import KanjiSuggester


def read_inputs(texts: List[str]) -> List[str]:
    """Use the positional texts, or one input per non-empty stdin line."""
    if texts:
        return texts
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def convert_single_script(texts: List[str], script: str) -> List[str]:
    converter = get_converter(script)
    return converter.convert_many(texts)


def convert_candidates(texts: List[str], with_kanji: bool, backend: str, as_json: bool) -> List[str]:
    suggester = KanjiSuggester(backend=backend) if with_kanji else None
    with CandidateBuilder(suggester=suggester) as builder:
        results = builder.build_many(texts, with_kanji=with_kanji)

    if as_json:
        return [json.dumps([r.model_dump() for r in results], ensure_ascii=False, indent=2)]
    return ["\t".join(option.text for option in r.options()) for r in results]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Convert romaji input to Japanese kana candidates')
    parser.add_argument('texts', nargs='*', help='Romaji inputs (read from stdin when omitted)')
    script = parser.add_mutually_exclusive_group()
    script.add_argument('--hiragana-only', action='store_true', help='Print only the hiragana conversion')
    script.add_argument('--katakana-only', action='store_true', help='Print only the katakana conversion')
    parser.add_argument('--kanji', action='store_true', help='Ask the AI backend for a kanji candidate')
    parser.add_argument('--backend', type=str, default=AI_BACKEND, choices=['gemini', 'openai'], help='AI backend for kanji suggestions')
    parser.add_argument('--json', action='store_true', help='Print candidates as JSON')

    args = parser.parse_args(argv)
    texts = read_inputs(args.texts)

    if args.hiragana_only:
        lines = convert_single_script(texts, 'hiragana')
    elif args.katakana_only:
        lines = convert_single_script(texts, 'katakana')
    else:
        lines = convert_candidates(texts, args.kanji, args.backend, args.json)

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
