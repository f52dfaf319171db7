"""Tests for conversion candidates and the candidate builder."""
import time
import pytest
from unittest.mock import Mock
from yomikaki.candidates import CandidateBuilder
from yomikaki.schema import CandidateKind, ConversionCandidates
from yomikaki.suggest import KanjiSuggester


@pytest.fixture
def suggester():
    mock = Mock(spec=KanjiSuggester)
    mock.accepts.return_value = True
    mock.suggest.return_value = "友達"
    return mock


class TestConversionCandidates:
    """Test the candidate model."""

    def test_options_without_kanji(self):
        candidates = ConversionCandidates(original="neko", hiragana="ねこ", katakana="ネコ")
        options = candidates.options()

        assert [o.kind for o in options] == [
            CandidateKind.hiragana, CandidateKind.katakana, CandidateKind.original
        ]
        assert [o.text for o in options] == ["ねこ", "ネコ", "neko"]
        assert [o.label for o in options] == ["ひらがな", "カタカナ", "英語 (English)"]

    def test_kanji_comes_first(self):
        candidates = ConversionCandidates(original="neko", hiragana="ねこ", katakana="ネコ", kanji="猫")
        first = candidates.options()[0]
        assert first.kind == CandidateKind.kanji
        assert first.text == "猫"
        assert first.label == "AI推測 (Kanji)"

    def test_empty_input_has_no_options(self):
        assert ConversionCandidates(original="", hiragana="", katakana="").options() == []

    def test_extra_fields_rejected(self):
        with pytest.raises(ValueError):
            ConversionCandidates(original="a", hiragana="あ", katakana="ア", romaji="a")


class TestCandidateBuilder:
    """Test CandidateBuilder."""

    def test_build_without_suggester(self):
        with CandidateBuilder() as builder:
            result = builder.build("tomodachi")

        assert result.original == "tomodachi"
        assert result.hiragana == "ともだち"
        assert result.katakana == "トモダチ"
        assert result.kanji is None

    def test_build_with_suggestion(self, suggester):
        with CandidateBuilder(suggester=suggester) as builder:
            result = builder.build("tomodachi")

        assert result.kanji == "友達"
        assert result.options()[0].kind == CandidateKind.kanji
        suggester.suggest.assert_called_once_with("tomodachi")

    def test_build_skips_kanji_when_disabled(self, suggester):
        with CandidateBuilder(suggester=suggester) as builder:
            result = builder.build("tomodachi", with_kanji=False)

        assert result.kanji is None
        suggester.suggest.assert_not_called()

    def test_build_skips_rejected_input(self, suggester):
        suggester.accepts.return_value = False
        with CandidateBuilder(suggester=suggester) as builder:
            result = builder.build("abc123")

        assert result.hiragana == "あbc123"
        assert result.kanji is None
        suggester.suggest.assert_not_called()

    def test_failing_suggestion_is_dropped(self, suggester):
        suggester.suggest.side_effect = RuntimeError("boom")
        with CandidateBuilder(suggester=suggester) as builder:
            result = builder.build("tomodachi")

        assert result.kanji is None
        assert result.katakana == "トモダチ"

    def test_slow_suggestion_times_out(self, suggester):
        suggester.suggest.side_effect = lambda text: time.sleep(0.5) or "友達"
        with CandidateBuilder(suggester=suggester, timeout=0.01) as builder:
            result = builder.build("tomodachi")

        assert result.kanji is None

    def test_build_many_preserves_order(self, suggester, sample_inputs):
        suggester.suggest.side_effect = lambda text: text.upper()
        romaji = [r for r, _, _ in sample_inputs]

        with CandidateBuilder(suggester=suggester) as builder:
            results = builder.build_many(romaji)

        assert [r.original for r in results] == romaji
        assert [r.hiragana for r in results] == [h for _, h, _ in sample_inputs]
        assert [r.katakana for r in results] == [k for _, _, k in sample_inputs]
        assert [r.kanji for r in results] == [r.upper() for r in romaji]
