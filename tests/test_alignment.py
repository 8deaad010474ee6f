"""Tests for aligning Cantonese text with Jyutping readings."""

import pytest

from wordshk_parser import (
    ALIGNMENT_RULES,
    AlignAction,
    AlignmentError,
    ParseError,
    TextReadingPair,
    TokenClass,
    align_readings,
    tokenize,
)
from wordshk_parser.alignment import decide


def _pairs(result):
    return [(p.text, p.reading) for p in result]


class TestAlignReadings:

    def test_hanzi_and_english(self):
        result = align_readings(
            "你get唔get到我講咩？",
            "nei5 get1 m4 get1 dou2 ngo5 gong2 me1?",
        )
        assert _pairs(result) == [
            ("你", "nei5"), ("get", "get1"), ("唔", "m4"), ("get", "get1"),
            ("到", "dou2"), ("我", "ngo5"), ("講", "gong2"), ("咩", "me1"),
            ("？", ""),
        ]

    def test_returns_pairs(self):
        result = align_readings("你", "nei5")
        assert result == [TextReadingPair("你", "nei5")]

    def test_trailing_punctuation_without_reading(self):
        assert _pairs(align_readings("你好！", "nei5 hou2")) == [
            ("你", "nei5"), ("好", "hou2"), ("！", ""),
        ]

    def test_inner_punctuation_without_reading(self):
        assert _pairs(align_readings("好，好", "hou2 hou2")) == [
            ("好", "hou2"), ("，", ""), ("好", "hou2"),
        ]

    def test_punctuation_on_both_sides(self):
        assert _pairs(align_readings("好，好", "hou2 , hou2")) == [
            ("好", "hou2"), ("，", ""), ("好", "hou2"),
        ]

    def test_other_text_against_reading(self):
        assert _pairs(align_readings("「你」", "nei5")) == [
            ("「", ""), ("你", "nei5"), ("」", ""),
        ]

    def test_reading_missing_separator(self):
        assert _pairs(align_readings("畢竟", "bit1ging2")) == [
            ("畢", "bit1"), ("竟", "ging2"),
        ]

    def test_unconsumed_reading_fails(self):
        with pytest.raises(AlignmentError) as excinfo:
            align_readings("你", "nei5 hou2")
        assert excinfo.value.reading_token == "hou2"
        assert excinfo.value.text == "你"
        assert excinfo.value.reading == "nei5 hou2"

    def test_ideograph_against_punctuation_fails(self):
        with pytest.raises(AlignmentError) as excinfo:
            align_readings("你好", "nei5 , hou2")
        err = excinfo.value
        assert err.text_token == "好"
        assert err.reading_token == ","
        assert err.index == 1

    def test_alignment_error_is_parse_error(self):
        with pytest.raises(ParseError):
            align_readings("你", "nei5 hou2")

    def test_empty_inputs(self):
        assert align_readings("", "") == []

    def test_covers_every_text_token(self):
        text = "佢話：「唔該晒！」"
        reading = "keoi5 waa6 m4 goi1 saai3"
        result = align_readings(text, reading)
        assert [p.text for p in result] == tokenize(text)
        assert [p.reading for p in result if p.reading] == tokenize(reading)

    def test_deterministic(self):
        args = ("你get唔get到？", "nei5 get1 m4 get1 dou2?")
        assert align_readings(*args) == align_readings(*args)


class TestDecisionTable:

    CLASSES = [
        TokenClass.IDEOGRAPH,
        TokenClass.READING,
        TokenClass.PUNCTUATION,
        TokenClass.OTHER,
        None,
    ]

    def test_text_exhausted_always_fails(self):
        for reading_class in self.CLASSES:
            assert decide(None, reading_class) is AlignAction.FAIL

    def test_text_with_no_reading_left(self):
        for text_class in self.CLASSES[:-1]:
            assert decide(text_class, None) is AlignAction.TEXT_ONLY

    def test_syllables_pair_with_readings(self):
        assert decide(TokenClass.IDEOGRAPH, TokenClass.READING) is AlignAction.PAIR
        assert decide(TokenClass.READING, TokenClass.READING) is AlignAction.PAIR

    def test_syllables_never_pair_with_non_readings(self):
        for text_class in (TokenClass.IDEOGRAPH, TokenClass.READING):
            for reading_class in (
                TokenClass.IDEOGRAPH, TokenClass.PUNCTUATION, TokenClass.OTHER,
            ):
                assert decide(text_class, reading_class) is AlignAction.FAIL

    def test_decorations_skip_together(self):
        for text_class in (TokenClass.PUNCTUATION, TokenClass.OTHER):
            for reading_class in (
                TokenClass.IDEOGRAPH, TokenClass.PUNCTUATION, TokenClass.OTHER,
            ):
                assert decide(text_class, reading_class) is AlignAction.SKIP_BOTH

    def test_table_never_lists_fail(self):
        assert AlignAction.FAIL not in ALIGNMENT_RULES.values()
