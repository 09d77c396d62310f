"""Tests for Japanese mora counting."""
import pytest
from tanka.nlp.japanese import (
    EXTENDED_RULESET,
    JapaneseMoraCounter,
    LEGACY_RULESET,
)


class TestJapaneseMoraCounter:
    """Test JapaneseMoraCounter with the standard rules."""

    @pytest.fixture
    def counter(self):
        return JapaneseMoraCounter()

    def test_empty_string(self, counter):
        assert counter.count_mora("") == 0

    def test_only_excluded_characters(self, counter):
        assert counter.count_mora("「」、。 　") == 0

    @pytest.mark.parametrize("text,expected", [
        ("あいうえお", 5),
        ("きょう", 2),
        ("しゃしん", 3),
        ("ティー", 2),
        ("がっこう", 4),
        ("ラーメン", 4),
        ("きゃっ", 2),
        ("はる の そら", 5),
        ("たんぽぽの", 5),
    ])
    def test_counts(self, counter, text, expected):
        assert counter.count_mora(text) == expected

    def test_quotes_do_not_count(self, counter):
        assert counter.count_mora("「こんにちは」") == counter.count_mora("こんにちは") == 5

    def test_orphan_small_kana_counts_as_one(self, counter):
        assert counter.count_mora("ゃ") == 1
        assert counter.count_mora("「ゃ") == 1
        assert counter.count_mora("、ょう") == 2

    def test_example_poem_has_31_mora(self, counter, example_poem):
        assert counter.count_mora(example_poem) == 31

    def test_split_mora_keeps_pairs_together(self, counter):
        assert counter.split_mora("きょう、") == ["きょ", "う", "、"]
        assert counter.split_mora("シャッター") == ["シャ", "ッ", "タ", "ー"]

    def test_split_mora_is_lossless(self, counter, sample_texts):
        for text in sample_texts:
            assert "".join(counter.split_mora(text)) == text

    def test_iter_units_from_offset(self, counter):
        assert list(counter.iter_units("あきょ", 1)) == [(1, 3, 1)]

    def test_count_is_repeatable(self, counter, sample_texts):
        for text in sample_texts:
            assert counter.count_mora(text) == counter.count_mora(text) >= 0


class TestAlternativeRules:
    """Test counting under the non-default rule sets."""

    def test_legacy_folds_sokuon_and_long_vowel(self):
        counter = JapaneseMoraCounter(LEGACY_RULESET)
        assert counter.count_mora("ラーメン") == 3
        assert counter.count_mora("がっこう") == 3
        assert counter.count_mora("きょう") == 2

    def test_legacy_leading_long_vowel_still_counts(self):
        assert JapaneseMoraCounter(LEGACY_RULESET).count_mora("ーあ") == 2

    def test_extended_skips_ellipsis(self):
        assert JapaneseMoraCounter().count_mora("あ…い") == 3
        assert JapaneseMoraCounter(EXTENDED_RULESET).count_mora("あ…い") == 2
        assert JapaneseMoraCounter(EXTENDED_RULESET).count_mora("そら〜") == 2
